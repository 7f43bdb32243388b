import asyncio
import logging
from decimal import Decimal

import pytest

from src.bookings.schemas import BookingStatus
from src.exceptions import (
    AlreadyCancelledError, InputValidationError, InsufficientInventoryError,
    NotFoundError, UnauthenticatedError
)


def seats_of(db, travel_id):
    return db.find_travel_option(travel_id).available_seats


def assert_inventory_within_bounds(db):
    for option in db.travel_options:
        assert 0 <= option.available_seats <= option.total_seats


async def test_book_then_cancel_restores_seats(db, booking_service):
    assert seats_of(db, "F123") == 120

    booking = await booking_service.create_booking("user123", "F123", 3)

    assert booking.total_price == Decimal("1050.00")
    assert booking.status == BookingStatus.CONFIRMED
    assert booking.user_id == "user123"
    assert seats_of(db, "F123") == 117

    cancelled = await booking_service.cancel_booking(booking.id, "user123")

    assert cancelled.status == BookingStatus.CANCELLED
    assert seats_of(db, "F123") == 120


async def test_round_trip_for_every_valid_seat_count(db, booking_service):
    before = seats_of(db, "B789")
    for seats in range(1, before + 1):
        booking = await booking_service.create_booking("alice", "B789", seats)
        await booking_service.cancel_booking(booking.id, "alice")
        assert seats_of(db, "B789") == before


async def test_insufficient_inventory_leaves_seats_unchanged(db, booking_service):
    with pytest.raises(InsufficientInventoryError):
        await booking_service.create_booking("user123", "B789", 3)
    assert seats_of(db, "B789") == 2


async def test_sold_out_option_cannot_be_booked(db, booking_service):
    with pytest.raises(InsufficientInventoryError, match="Not enough seats"):
        await booking_service.create_booking("user123", "F999", 1)
    assert seats_of(db, "F999") == 0


async def test_booking_all_remaining_seats(db, booking_service):
    await booking_service.create_booking("user123", "B789", 2)
    assert seats_of(db, "B789") == 0
    assert_inventory_within_bounds(db)


async def test_create_requires_user(booking_service):
    with pytest.raises(UnauthenticatedError):
        await booking_service.create_booking("", "F123", 1)


async def test_create_unknown_option(booking_service):
    with pytest.raises(NotFoundError):
        await booking_service.create_booking("user123", "NOPE", 1)


async def test_travel_id_is_case_sensitive(booking_service):
    with pytest.raises(NotFoundError):
        await booking_service.create_booking("user123", "f123", 1)


@pytest.mark.parametrize("seats", [0, -2])
async def test_non_positive_seat_count_rejected(db, booking_service, seats):
    with pytest.raises(InputValidationError):
        await booking_service.create_booking("user123", "F123", seats)
    assert seats_of(db, "F123") == 120


async def test_double_cancel_fails_without_restoring_twice(db, booking_service):
    booking = await booking_service.create_booking("user123", "T567", 5)
    await booking_service.cancel_booking(booking.id, "user123")

    with pytest.raises(AlreadyCancelledError):
        await booking_service.cancel_booking(booking.id, "user123")
    assert seats_of(db, "T567") == 200


async def test_cancel_someone_elses_booking_looks_like_not_found(db, booking_service):
    with pytest.raises(NotFoundError, match="permission"):
        await booking_service.cancel_booking("BK002", "user123")
    assert (await booking_service.get_booking("BK002")).status == BookingStatus.CONFIRMED


async def test_cancel_unknown_booking(booking_service):
    with pytest.raises(NotFoundError):
        await booking_service.cancel_booking("BK404", "user123")


async def test_cancel_when_option_has_vanished(db, booking_service, caplog):
    booking = await booking_service.create_booking("user123", "T456", 1)
    db.travel_options = [o for o in db.travel_options if o.id != "T456"]

    with caplog.at_level(logging.WARNING, logger="src.bookings.booking_service"):
        cancelled = await booking_service.cancel_booking(booking.id, "user123")

    assert cancelled.status == BookingStatus.CANCELLED
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "T456" in warnings[0].getMessage()
    assert "seats not restored" in warnings[0].getMessage()


async def test_get_booking_ignores_case(booking_service):
    booking = await booking_service.get_booking("bk001")
    assert booking.id == "BK001"
    assert booking.seats == 2
    assert booking.total_price == Decimal("241.00")


async def test_get_booking_unknown(booking_service):
    with pytest.raises(NotFoundError):
        await booking_service.get_booking("BK999")


async def test_list_bookings_newest_first(booking_service):
    first = await booking_service.create_booking("user123", "F123", 1)
    await asyncio.sleep(0.001)
    second = await booking_service.create_booking("user123", "T567", 1)

    bookings = await booking_service.list_bookings("user123")

    assert [b.id for b in bookings] == [second.id, first.id, "BK001"]
    assert first.id != second.id


@pytest.mark.parametrize("user_id", ["", None])
async def test_list_bookings_without_user_is_empty(booking_service, user_id):
    assert await booking_service.list_bookings(user_id) == []


async def test_booking_keeps_snapshot_of_option(db, booking_service):
    booking = await booking_service.create_booking("user123", "F123", 2)

    db.find_travel_option("F123").available_seats = 10
    db.find_travel_option("F123").price = Decimal("999.00")

    stored = await booking_service.get_booking(booking.id)
    assert stored.travel_option.available_seats == 118
    assert stored.travel_option.price == Decimal("350.00")
    assert stored.total_price == Decimal("700.00")


async def test_returned_booking_is_a_copy(db, booking_service):
    booking = await booking_service.get_booking("BK001")
    booking.status = BookingStatus.CANCELLED
    assert (await booking_service.get_booking("BK001")).status == BookingStatus.CONFIRMED


async def test_concurrent_bookings_never_oversell(db, booking_service):
    db.latency_scale = 0.001

    results = await asyncio.gather(
        *[booking_service.create_booking(f"user{i}", "B789", 1) for i in range(5)],
        return_exceptions=True,
    )

    booked = [r for r in results if not isinstance(r, Exception)]
    failed = [r for r in results if isinstance(r, InsufficientInventoryError)]
    assert len(booked) == 2
    assert len(failed) == 3
    assert seats_of(db, "B789") == 0


async def test_inventory_bounds_hold_over_mixed_operations(db, booking_service):
    made = []
    for travel_id, seats in [("F123", 4), ("B789", 2), ("T456", 85), ("F234", 10)]:
        made.append(await booking_service.create_booking("user123", travel_id, seats))
        assert_inventory_within_bounds(db)

    with pytest.raises(InsufficientInventoryError):
        await booking_service.create_booking("user123", "T456", 1)

    for booking in made:
        await booking_service.cancel_booking(booking.id, "user123")
        assert_inventory_within_bounds(db)

    assert seats_of(db, "T456") == 85
