"""
Customer booking endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.deps import get_db, get_current_user
from app.models.user import User
from app.schemas.booking import BOOKING_TIME_SLOTS, BookingCreate, BookingOut
from app.services.booking_service import create_booking, list_user_bookings

router = APIRouter()


@router.get("/time-slots", response_model=List[str])
async def get_time_slots():
    return BOOKING_TIME_SLOTS


@router.post("", response_model=BookingOut, status_code=status.HTTP_201_CREATED)
async def book_appointment(
    booking_data: BookingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Book an appointment; it starts as pending"""
    return create_booking(db, current_user.id, booking_data)


@router.get("/my", response_model=List[BookingOut])
async def my_bookings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return list_user_bookings(db, current_user.id)
