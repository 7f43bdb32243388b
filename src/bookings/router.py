from fastapi import APIRouter, Depends, HTTPException, status

from src.auth.dependencies import get_current_user
from src.auth.schemas import User
from src.bookings.booking_service import BookingService
from src.bookings.schemas import Booking, BookingCreateRequest, BookingList
from src.bookings.views import BookingListView
from src.database import InMemoryStore, get_db
from src.exceptions import InsufficientInventoryError, TravelyError
from src.travel.service import TravelService

router = APIRouter()

@router.get("/", response_model=BookingList)
async def get_my_bookings(
    current_user: User = Depends(get_current_user),
    db: InMemoryStore = Depends(get_db)
):
    """Current user's bookings, split into current and past"""
    view = BookingListView(BookingService(db), current_user.id)
    await view.refresh()
    return view.as_tabs()

@router.post("/", response_model=Booking, status_code=status.HTTP_201_CREATED)
async def create_booking(
    request: BookingCreateRequest,
    current_user: User = Depends(get_current_user),
    db: InMemoryStore = Depends(get_db)
):
    """Book seats on a travel option"""
    try:
        return await BookingService(db).create_booking(current_user.id, request.travel_id, request.seats)
    except InsufficientInventoryError as e:
        # Hand back fresh availability so the client can redisplay it
        travel_option = await TravelService(db).get_travel_option(request.travel_id)
        raise HTTPException(
            status_code=e.status_code,
            detail={
                "message": f"Booking failed: {e.message}",
                "travel_option": travel_option.model_dump(mode="json")
            }
        )
    except TravelyError as e:
        raise HTTPException(status_code=e.status_code, detail=f"Booking failed: {e.message}")

@router.get("/status/{booking_id}", response_model=Booking)
async def get_booking_status(booking_id: str, db: InMemoryStore = Depends(get_db)):
    """Look up a booking by ID (case-insensitive)"""
    if not booking_id.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please enter a booking ID."
        )
    try:
        return await BookingService(db).get_booking(booking_id.strip())
    except TravelyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

@router.post("/{booking_id}/cancel", response_model=Booking)
async def cancel_booking(
    booking_id: str,
    current_user: User = Depends(get_current_user),
    db: InMemoryStore = Depends(get_db)
):
    """Cancel one of the current user's bookings"""
    try:
        return await BookingService(db).cancel_booking(booking_id, current_user.id)
    except TravelyError as e:
        raise HTTPException(status_code=e.status_code, detail=f"Cancellation failed: {e.message}")
