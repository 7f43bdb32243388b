from pydantic import BaseModel, Field, ValidationInfo, computed_field, field_validator
from typing import Optional
from datetime import datetime, date
from decimal import Decimal
from enum import Enum

class TravelType(str, Enum):
    """Mode of transport"""
    FLIGHT = "Flight"
    TRAIN = "Train"
    BUS = "Bus"

class TravelOption(BaseModel):
    """A single bookable trip with fixed schedule, price and seat capacity"""
    id: str
    type: TravelType
    source: str
    destination: str
    departure_time: datetime
    arrival_time: datetime
    price: Decimal = Field(..., gt=0)
    total_seats: int = Field(..., gt=0)
    available_seats: int = Field(..., ge=0)
    operator: str
    operator_logo: str
    seat_type: str
    baggage_allowance: str
    cancellation_policy: str
    
    class Config:
        validate_assignment = True
    
    # Field validators run before the value is stored, so a rejected
    # assignment leaves the record as it was
    @field_validator("arrival_time")
    def check_arrival_after_departure(cls, v, info: ValidationInfo):
        departure = info.data.get("departure_time")
        if departure is not None and v <= departure:
            raise ValueError("arrival_time must be after departure_time")
        return v
    
    @field_validator("available_seats")
    def check_seats_within_total(cls, v, info: ValidationInfo):
        total = info.data.get("total_seats")
        if total is not None and v > total:
            raise ValueError("available_seats cannot exceed total_seats")
        return v
    
    @computed_field
    @property
    def duration_minutes(self) -> int:
        return int((self.arrival_time - self.departure_time).total_seconds() // 60)
    
    @computed_field
    @property
    def is_sold_out(self) -> bool:
        return self.available_seats == 0

class TravelOptionFilters(BaseModel):
    """Optional list filters; a missing value matches everything"""
    id: Optional[str] = None
    type: Optional[TravelType] = None
    source: Optional[str] = None
    destination: Optional[str] = None
    departure_date: Optional[date] = None
    departure_after: Optional[str] = Field(None, pattern=r"^\d{2}:\d{2}$")  # HH:MM, UTC
    min_price: Optional[Decimal] = Field(None, ge=0)
    max_price: Optional[Decimal] = Field(None, ge=0)
    min_seats: Optional[int] = Field(None, ge=0)
