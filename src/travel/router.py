from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
from datetime import date
from decimal import Decimal

from src.database import InMemoryStore, get_db
from src.exceptions import TravelyError
from src.travel.filters import filter_travel_options
from src.travel.schemas import TravelOption, TravelOptionFilters, TravelType
from src.travel.service import TravelService

router = APIRouter()

@router.get("/", response_model=List[TravelOption])
async def list_travel_options(
    id: Optional[str] = Query(None, description="Trip ID contains"),
    type: Optional[TravelType] = Query(None, description="Flight, Train or Bus"),
    source: Optional[str] = Query(None, description="Origin contains"),
    destination: Optional[str] = Query(None, description="Destination contains"),
    departure_date: Optional[date] = Query(None, description="Departure date (UTC)"),
    departure_after: Optional[str] = Query(None, pattern=r"^\d{2}:\d{2}$", description="Earliest departure HH:MM (UTC)"),
    min_price: Optional[Decimal] = Query(None, ge=0),
    max_price: Optional[Decimal] = Query(None, ge=0),
    min_seats: Optional[int] = Query(None, ge=0, description="Minimum available seats"),
    db: InMemoryStore = Depends(get_db)
):
    """List travel options matching the search form"""
    filters = TravelOptionFilters(
        id=id,
        type=type,
        source=source,
        destination=destination,
        departure_date=departure_date,
        departure_after=departure_after,
        min_price=min_price,
        max_price=max_price,
        min_seats=min_seats
    )
    
    options = await TravelService(db).list_travel_options()
    return filter_travel_options(options, filters)

@router.get("/{travel_id}", response_model=TravelOption)
async def get_travel_option(travel_id: str, db: InMemoryStore = Depends(get_db)):
    """Get travel option details by ID"""
    try:
        return await TravelService(db).get_travel_option(travel_id)
    except TravelyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
