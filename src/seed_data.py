"""
Seed catalogue for a freshly constructed store.

Every ``InMemoryStore`` starts from these travel options, bookings and
users; restarting the process resets all data to exactly this state.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import List

from src.auth.schemas import User
from src.bookings.schemas import Booking, BookingStatus
from src.travel.schemas import TravelOption, TravelType


def _utc(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def create_travel_options() -> List[TravelOption]:
    return [
        TravelOption(
            id="F123",
            type=TravelType.FLIGHT,
            source="New York (JFK)",
            destination="Los Angeles (LAX)",
            departure_time=_utc("2024-09-10T09:00:00"),
            arrival_time=_utc("2024-09-10T12:00:00"),
            price=Decimal("350.00"),
            total_seats=180,
            available_seats=120,
            operator="Delta Airlines",
            operator_logo="https://picsum.photos/seed/delta/40/40",
            seat_type="Economy",
            baggage_allowance="1 carry-on, 1 checked bag",
            cancellation_policy="Full refund 24h before departure.",
        ),
        TravelOption(
            id="T456",
            type=TravelType.TRAIN,
            source="Washington D.C.",
            destination="New York (PENN)",
            departure_time=_utc("2024-09-12T14:30:00"),
            arrival_time=_utc("2024-09-12T18:00:00"),
            price=Decimal("120.50"),
            total_seats=300,
            available_seats=85,
            operator="Amtrak",
            operator_logo="https://picsum.photos/seed/amtrak/40/40",
            seat_type="Coach Class",
            baggage_allowance="2 carry-ons, 2 personal items",
            cancellation_policy="Full refund 48h before departure.",
        ),
        TravelOption(
            id="B789",
            type=TravelType.BUS,
            source="Boston",
            destination="New York (PABT)",
            departure_time=_utc("2024-09-11T08:00:00"),
            arrival_time=_utc("2024-09-11T12:30:00"),
            price=Decimal("45.00"),
            total_seats=50,
            available_seats=2,
            operator="Greyhound",
            operator_logo="https://picsum.photos/seed/greyhound/40/40",
            seat_type="Standard Seat",
            baggage_allowance="1 carry-on, 1 checked bag",
            cancellation_policy="Non-refundable.",
        ),
        TravelOption(
            id="F234",
            type=TravelType.FLIGHT,
            source="Chicago (ORD)",
            destination="San Francisco (SFO)",
            departure_time=_utc("2024-09-15T11:00:00"),
            arrival_time=_utc("2024-09-15T13:30:00"),
            price=Decimal("410.00"),
            total_seats=220,
            available_seats=50,
            operator="United Airlines",
            operator_logo="https://picsum.photos/seed/united/40/40",
            seat_type="Economy Plus",
            baggage_allowance="1 carry-on",
            cancellation_policy="Fee applies for cancellations.",
        ),
        TravelOption(
            id="F999",
            type=TravelType.FLIGHT,
            source="Miami (MIA)",
            destination="Atlanta (ATL)",
            departure_time=_utc("2024-09-20T18:00:00"),
            arrival_time=_utc("2024-09-20T20:00:00"),
            price=Decimal("180.00"),
            total_seats=150,
            available_seats=0,  # sold out
            operator="Spirit Airlines",
            operator_logo="https://picsum.photos/seed/spirit/40/40",
            seat_type="Standard",
            baggage_allowance="Charges for all bags",
            cancellation_policy="Non-refundable.",
        ),
        TravelOption(
            id="T567",
            type=TravelType.TRAIN,
            source="Los Angeles (LAX)",
            destination="San Diego",
            departure_time=_utc("2024-09-13T10:00:00"),
            arrival_time=_utc("2024-09-13T12:45:00"),
            price=Decimal("35.00"),
            total_seats=250,
            available_seats=200,
            operator="Pacific Surfliner",
            operator_logo="https://picsum.photos/seed/surfliner/40/40",
            seat_type="Business Class",
            baggage_allowance="2 carry-ons",
            cancellation_policy="Full refund up to departure.",
        ),
    ]


def create_bookings(travel_options: List[TravelOption]) -> List[Booking]:
    by_id = {option.id: option for option in travel_options}
    train, flight = by_id["T456"], by_id["F123"]
    return [
        Booking(
            id="BK001",
            user_id="user123",
            travel_option=train.model_copy(deep=True),
            seats=2,
            total_price=train.price * 2,
            status=BookingStatus.CONFIRMED,
            booking_time=_utc("2024-07-20T10:00:00"),
        ),
        Booking(
            id="BK002",
            user_id="alice",
            travel_option=flight.model_copy(deep=True),
            seats=1,
            total_price=flight.price,
            status=BookingStatus.CONFIRMED,
            booking_time=_utc("2024-07-22T15:30:00"),
        ),
    ]


def create_users() -> List[User]:
    return [
        User(id="user123", name="user123"),
        User(id="alice", name="alice"),
    ]
