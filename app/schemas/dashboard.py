"""
Dashboard schemas (admin overview and customer dashboard)
"""
from datetime import datetime
from typing import List
from pydantic import BaseModel

from app.schemas.auth import ProfileOut
from app.schemas.booking import BookingOut
from app.schemas.order import OrderOut


class RecentActivityItem(BaseModel):
    kind: str  # "application" or "booking"
    id: int
    title: str
    status: str
    created_at: datetime


class AdminDashboardOut(BaseModel):
    total_users: int
    pending_applications: int
    todays_bookings: int
    pending_orders: int
    active_jobs: int
    recent_activity: List[RecentActivityItem]


class CustomerDashboardOut(BaseModel):
    profile: ProfileOut
    orders: List[OrderOut]
    bookings: List[BookingOut]
