from pydantic import BaseModel, Field
from typing import List
from datetime import datetime
from decimal import Decimal
from enum import Enum

from src.travel.schemas import TravelOption

class BookingStatus(str, Enum):
    """Booking status enumeration; Confirmed -> Cancelled is the only transition"""
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"

class Booking(BaseModel):
    """A user's reservation of seats on a travel option, frozen at creation"""
    id: str
    user_id: str
    travel_option: TravelOption  # snapshot taken at booking time
    seats: int = Field(..., gt=0)
    total_price: Decimal
    status: BookingStatus = BookingStatus.CONFIRMED
    booking_time: datetime

# Request Models
class BookingCreateRequest(BaseModel):
    """Request to book seats on a travel option for the logged-in user"""
    travel_id: str = Field(..., min_length=1)
    seats: int = Field(1, ge=1)

# Response Models
class BookingList(BaseModel):
    """A user's bookings split the way the bookings page shows them"""
    current: List[Booking] = []
    past: List[Booking] = []
    total: int = 0
