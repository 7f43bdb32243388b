import logging
from datetime import datetime, timezone
from typing import List, Optional

from src.bookings.schemas import Booking, BookingStatus
from src.database import InMemoryStore
from src.exceptions import (
    AlreadyCancelledError, InputValidationError, InsufficientInventoryError,
    NotFoundError, UnauthenticatedError
)

logger = logging.getLogger(__name__)

class BookingService:
    """Service for the booking lifecycle and seat inventory

    Seat changes on a travel option happen under that option's lock with
    no await between the availability check and the write, so
    ``0 <= available_seats <= total_seats`` holds for every caller sharing
    the store.
    """

    def __init__(self, db: InMemoryStore):
        self.db = db

    async def list_bookings(self, user_id: Optional[str]) -> List[Booking]:
        """Get all bookings for a user, newest first"""
        await self.db.simulate_delay(500)
        if not user_id:
            return []

        bookings = [b.model_copy(deep=True) for b in self.db.bookings if b.user_id == user_id]
        return sorted(bookings, key=lambda x: x.booking_time, reverse=True)

    async def create_booking(self, user_id: str, travel_id: str, seats: int) -> Booking:
        """Book ``seats`` on a travel option"""
        await self.db.simulate_delay(1000)

        if not user_id:
            raise UnauthenticatedError("User must be logged in to book.")

        travel_option = self.db.find_travel_option(travel_id)
        if not travel_option:
            raise NotFoundError("Travel option not found.")

        if seats < 1:
            raise InputValidationError("At least one seat must be booked.")

        async with self.db.option_lock(travel_id):
            if travel_option.available_seats < seats:
                raise InsufficientInventoryError("Not enough seats available.")

            travel_option.available_seats -= seats
            booking = Booking(
                id=self.db.next_booking_id(),
                user_id=user_id,
                travel_option=travel_option.model_copy(deep=True),
                seats=seats,
                total_price=travel_option.price * seats,
                status=BookingStatus.CONFIRMED,
                booking_time=datetime.now(timezone.utc),
            )
            self.db.bookings.append(booking)

        logger.info(
            "Booking %s created: user=%s travel=%s seats=%d remaining=%d",
            booking.id, user_id, travel_id, seats, travel_option.available_seats,
        )
        return booking.model_copy(deep=True)

    async def get_booking(self, booking_id: str) -> Booking:
        """Get booking by ID, ignoring case"""
        await self.db.simulate_delay(600)

        wanted = booking_id.lower()
        for booking in self.db.bookings:
            if booking.id.lower() == wanted:
                return booking.model_copy(deep=True)
        raise NotFoundError("Booking with that ID not found.")

    async def cancel_booking(self, booking_id: str, user_id: str) -> Booking:
        """Cancel a user's booking and release its seats"""
        await self.db.simulate_delay(700)

        booking = self._find_owned_booking(booking_id, user_id)
        if not booking:
            # Someone else's booking looks the same as a missing one
            raise NotFoundError("Booking not found or you do not have permission to cancel it.")

        travel_id = booking.travel_option.id
        async with self.db.option_lock(travel_id):
            if booking.status == BookingStatus.CANCELLED:
                raise AlreadyCancelledError("Booking already cancelled.")

            travel_option = self.db.find_travel_option(travel_id)
            if travel_option:
                travel_option.available_seats += booking.seats
            else:
                logger.warning(
                    "Travel option %s for booking %s no longer exists; seats not restored",
                    travel_id, booking.id,
                )
            booking.status = BookingStatus.CANCELLED

        logger.info("Booking %s cancelled by %s, %d seats released", booking.id, user_id, booking.seats)
        return booking.model_copy(deep=True)

    def _find_owned_booking(self, booking_id: str, user_id: str) -> Optional[Booking]:
        for booking in self.db.bookings:
            if booking.id == booking_id and booking.user_id == user_id:
                return booking
        return None
