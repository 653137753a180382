"""
Public site settings endpoint
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.schemas.settings import SiteSettingsOut
from app.services.settings_service import get_site_settings

router = APIRouter()


@router.get("", response_model=SiteSettingsOut)
async def read_site_settings(db: Session = Depends(get_db)):
    """Contact details, social links and hero copy, with defaults filled in"""
    return SiteSettingsOut(values=get_site_settings(db))
