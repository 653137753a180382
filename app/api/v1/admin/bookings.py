"""
Admin booking endpoints

Every write responds with the bookings list re-fetched from the store.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.deps import get_db, require_admin
from app.models.booking import BookingStatus
from app.models.user import User
from app.schemas.booking import BookingListResponse, BookingStatusUpdate
from app.schemas.common import StatusOptionsOut
from app.services.booking_service import booking_lifecycle, list_bookings_admin

router = APIRouter()


def _listing(db: Session, status_filter: Optional[BookingStatus] = None) -> BookingListResponse:
    items = list_bookings_admin(db, status_filter=status_filter)
    return BookingListResponse(items=items, total=len(items))


@router.get("", response_model=BookingListResponse)
async def list_bookings(
    status_filter: Optional[BookingStatus] = Query(None, alias="status", description="Filter by status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """All bookings with customer details, newest first"""
    return _listing(db, status_filter)


@router.get("/statuses", response_model=StatusOptionsOut)
async def booking_statuses(current_user: User = Depends(require_admin)):
    return StatusOptionsOut(resource="booking", statuses=booking_lifecycle.allowed_statuses())


@router.patch("/{booking_id}/status", response_model=BookingListResponse)
async def update_booking_status(
    booking_id: int,
    status_data: BookingStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Set a booking's status

    Any status may be set from any other. Responds with the refreshed list.
    """
    booking_lifecycle.transition(db, booking_id, status_data.status, actor_id=current_user.id)
    return _listing(db)


@router.delete("/{booking_id}", response_model=BookingListResponse)
async def delete_booking(
    booking_id: int,
    confirm: bool = Query(False, description="Must be true; deletion cannot be undone"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    booking_lifecycle.delete(db, booking_id, confirmed=confirm, actor_id=current_user.id)
    return _listing(db)
