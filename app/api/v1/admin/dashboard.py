"""
Admin dashboard endpoint
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import get_db, require_admin
from app.models.user import User
from app.schemas.dashboard import AdminDashboardOut
from app.services.dashboard_service import get_admin_overview

router = APIRouter()


@router.get("", response_model=AdminDashboardOut)
async def admin_overview(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Headline counts and the latest applications and bookings"""
    return get_admin_overview(db)
