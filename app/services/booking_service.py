"""
Booking service - customer appointments and their admin lifecycle
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.booking import Booking, BookingStatus
from app.schemas.booking import BookingCreate, AdminBookingOut
from app.services.crud import create_row
from app.services.status_lifecycle import LifecycleSpec, StatusLifecycleManager

logger = logging.getLogger(__name__)

booking_lifecycle = StatusLifecycleManager(
    LifecycleSpec(model=Booking, entity_type="booking", statuses=BookingStatus)
)


def create_booking(db: Session, user_id: int, data: BookingCreate) -> Booking:
    """Book an appointment for the caller; new bookings start pending"""
    booking = create_row(
        db,
        Booking,
        {
            "user_id": user_id,
            "service_name": data.service_name,
            "booking_date": data.booking_date,
            "booking_time": data.booking_time,
            "notes": data.notes,
            "description": data.description,
            "status": BookingStatus.PENDING.value,
        },
        entity_type="booking",
        actor_id=user_id,
    )
    logger.info(f"Booking {booking.id} created by user {user_id}")
    return booking


def list_user_bookings(db: Session, user_id: int) -> List[Booking]:
    return (
        db.query(Booking)
        .filter(Booking.user_id == user_id)
        .order_by(Booking.booking_date.desc(), Booking.id.desc())
        .all()
    )


def to_admin_out(booking: Booking) -> AdminBookingOut:
    out = AdminBookingOut.model_validate(booking)
    if booking.user is not None:
        out.customer_name = booking.user.full_name
        out.customer_phone = booking.user.phone
    return out


def list_bookings_admin(db: Session, status_filter: Optional[BookingStatus] = None) -> List[AdminBookingOut]:
    """Full re-fetch of the admin bookings list"""
    return [to_admin_out(b) for b in booking_lifecycle.fetch_list(db, status_filter=status_filter)]
