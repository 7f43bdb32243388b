"""
View-side helpers for the "my bookings" screen.

``partition_bookings`` splits a user's bookings into the current and past
tabs.  ``BookingListView`` keeps the list a client is displaying and
cancels optimistically: the entry is shown as cancelled straight away,
and if the service refuses the cancellation the previous list comes back.
"""

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from src.bookings.booking_service import BookingService
from src.bookings.schemas import Booking, BookingList, BookingStatus


def is_past(booking: Booking, now: datetime) -> bool:
    return (
        booking.status == BookingStatus.CANCELLED
        or booking.travel_option.departure_time < now
    )


def partition_bookings(
    bookings: List[Booking],
    now: Optional[datetime] = None,
) -> Tuple[List[Booking], List[Booking]]:
    """Split bookings into (current, past), keeping their order"""
    now = now or datetime.now(timezone.utc)
    current: List[Booking] = []
    past: List[Booking] = []
    for booking in bookings:
        (past if is_past(booking, now) else current).append(booking)
    return current, past


class BookingListView:
    """The booking list one user is looking at"""

    def __init__(self, service: BookingService, user_id: str):
        self.service = service
        self.user_id = user_id
        self.bookings: List[Booking] = []

    async def refresh(self) -> List[Booking]:
        self.bookings = await self.service.list_bookings(self.user_id)
        return self.bookings

    def as_tabs(self, now: Optional[datetime] = None) -> BookingList:
        current, past = partition_bookings(self.bookings, now)
        return BookingList(current=current, past=past, total=len(self.bookings))

    async def cancel(self, booking_id: str) -> Booking:
        """Cancel with an optimistic update; the old list returns on failure"""
        original = self.bookings
        self.bookings = [
            b.model_copy(update={"status": BookingStatus.CANCELLED}) if b.id == booking_id else b
            for b in original
        ]

        try:
            cancelled = await self.service.cancel_booking(booking_id, self.user_id)
        except Exception:
            self.bookings = original
            raise

        self.bookings = [cancelled if b.id == booking_id else b for b in self.bookings]
        return cancelled
