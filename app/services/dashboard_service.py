"""
Dashboard service - admin overview counts and recent activity
"""
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from app.models.booking import Booking
from app.models.job import ApplicationStatus, JobApplication, JobPosting
from app.models.order import Order, OrderStatus
from app.models.user import User
from app.schemas.dashboard import AdminDashboardOut, RecentActivityItem

RECENT_LIMIT = 3


def get_admin_overview(db: Session, today: Optional[date] = None) -> AdminDashboardOut:
    today = today or date.today()

    recent_applications = (
        db.query(JobApplication)
        .order_by(JobApplication.created_at.desc(), JobApplication.id.desc())
        .limit(RECENT_LIMIT)
        .all()
    )
    recent_bookings = (
        db.query(Booking)
        .order_by(Booking.created_at.desc(), Booking.id.desc())
        .limit(RECENT_LIMIT)
        .all()
    )

    activity = [
        RecentActivityItem(kind="application", id=a.id, title=a.full_name, status=a.status, created_at=a.created_at)
        for a in recent_applications
    ] + [
        RecentActivityItem(kind="booking", id=b.id, title=b.service_name, status=b.status, created_at=b.created_at)
        for b in recent_bookings
    ]
    activity.sort(key=lambda item: item.created_at, reverse=True)

    return AdminDashboardOut(
        total_users=db.query(User).count(),
        pending_applications=db.query(JobApplication).filter(
            JobApplication.status == ApplicationStatus.PENDING.value
        ).count(),
        todays_bookings=db.query(Booking).filter(Booking.booking_date == today).count(),
        pending_orders=db.query(Order).filter(Order.status == OrderStatus.PENDING.value).count(),
        active_jobs=db.query(JobPosting).filter(JobPosting.is_active.is_(True)).count(),
        recent_activity=activity,
    )
