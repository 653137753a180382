"""
Customer dashboard endpoint
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import get_db, get_current_user
from app.models.user import User
from app.schemas.dashboard import CustomerDashboardOut
from app.services.booking_service import list_user_bookings
from app.services.order_service import list_user_orders

router = APIRouter()


@router.get("", response_model=CustomerDashboardOut)
async def my_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Profile, orders and bookings of the signed-in customer"""
    return CustomerDashboardOut(
        profile=current_user,
        orders=list_user_orders(db, current_user.id),
        bookings=list_user_bookings(db, current_user.id),
    )
