"""
Admin site settings endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import get_db, require_admin
from app.models.user import User
from app.schemas.settings import SiteSettingsOut, SiteSettingsUpdate
from app.services.settings_service import get_site_settings, update_site_settings

router = APIRouter()


@router.get("", response_model=SiteSettingsOut)
async def read_settings(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return SiteSettingsOut(values=get_site_settings(db))


@router.put("", response_model=SiteSettingsOut)
async def save_settings(
    settings_data: SiteSettingsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Save the submitted keys and return every setting"""
    return SiteSettingsOut(values=update_site_settings(db, settings_data.values, actor_id=current_user.id))
