"""
In-memory data store.

``InMemoryStore`` owns every collection the services work on: travel
options, bookings and users.  Each instance is seeded on construction, so
tests get isolation simply by building a new store.  The application keeps
one instance on ``app.state.db`` and hands it to endpoints via ``get_db``.
"""

import asyncio
import logging
import time
from typing import Dict, List, Optional

from fastapi import Request

from src.auth.schemas import User
from src.bookings.schemas import Booking
from src.seed_data import create_bookings, create_travel_options, create_users
from src.travel.schemas import TravelOption

logger = logging.getLogger(__name__)


class InMemoryStore:
    """Explicitly owned collections standing in for a database"""

    def __init__(self, latency_scale: float = 0.0, seed: bool = True):
        self.latency_scale = latency_scale
        self.travel_options: List[TravelOption] = []
        self.bookings: List[Booking] = []
        self.users: List[User] = []
        self._option_locks: Dict[str, asyncio.Lock] = {}
        self._last_booking_stamp = 0

        if seed:
            self.travel_options = create_travel_options()
            self.bookings = create_bookings(self.travel_options)
            self.users = create_users()
            logger.debug(
                "Seeded store with %d travel options, %d bookings, %d users",
                len(self.travel_options), len(self.bookings), len(self.users),
            )

    def find_travel_option(self, travel_id: str) -> Optional[TravelOption]:
        """Live record for ``travel_id`` (exact match) or None"""
        for option in self.travel_options:
            if option.id == travel_id:
                return option
        return None

    def find_user(self, user_id: str) -> Optional[User]:
        for user in self.users:
            if user.id == user_id:
                return user
        return None

    def option_lock(self, travel_id: str) -> asyncio.Lock:
        """Lock serialising seat changes on one travel option"""
        lock = self._option_locks.get(travel_id)
        if lock is None:
            lock = self._option_locks[travel_id] = asyncio.Lock()
        return lock

    def next_booking_id(self) -> str:
        """``BK`` + epoch milliseconds, bumped so ids never repeat"""
        stamp = int(time.time() * 1000)
        if stamp <= self._last_booking_stamp:
            stamp = self._last_booking_stamp + 1
        self._last_booking_stamp = stamp
        return f"BK{stamp}"

    async def simulate_delay(self, milliseconds: int) -> None:
        """Stand-in for network latency; scaled by ``latency_scale``"""
        if self.latency_scale > 0:
            await asyncio.sleep(milliseconds * self.latency_scale / 1000)


def get_db(request: Request) -> InMemoryStore:
    """FastAPI dependency returning the application's store"""
    return request.app.state.db
