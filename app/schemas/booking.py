"""
Booking schemas
"""
from datetime import date, datetime
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator

from app.models.booking import BookingStatus

# Slots offered by the booking form
BOOKING_TIME_SLOTS = [
    "09:00 AM", "10:00 AM", "11:00 AM", "12:00 PM",
    "02:00 PM", "03:00 PM", "04:00 PM", "05:00 PM",
]


class BookingCreate(BaseModel):
    """Schema for booking an appointment"""
    service_name: str = Field(..., min_length=1, max_length=200)
    booking_date: date = Field(..., description="Appointment date")
    booking_time: str = Field(..., description="One of the offered time slots")
    notes: Optional[str] = Field(None, max_length=500, description="Notes must be less than 500 characters")
    description: Optional[str] = Field(None, max_length=2000)

    @field_validator("booking_date")
    @classmethod
    def _not_in_past(cls, v: date) -> date:
        if v < date.today():
            raise ValueError("Booking date cannot be in the past")
        return v

    @field_validator("booking_time")
    @classmethod
    def _known_slot(cls, v: str) -> str:
        if v not in BOOKING_TIME_SLOTS:
            raise ValueError(f"booking_time must be one of {BOOKING_TIME_SLOTS}")
        return v


class BookingOut(BaseModel):
    id: int
    user_id: int
    service_name: str
    booking_date: date
    booking_time: str
    status: BookingStatus
    notes: Optional[str]
    description: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AdminBookingOut(BookingOut):
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None


class BookingListResponse(BaseModel):
    items: List[AdminBookingOut]
    total: int


class BookingStatusUpdate(BaseModel):
    status: BookingStatus
