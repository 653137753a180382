"""
Build and deployment metadata
"""
from fastapi import APIRouter

from app.core.config import settings
from app.core.constants import DEFAULT_VERSION, SERVICE_NAME

router = APIRouter()


@router.get("/version")
async def get_version():
    """
    Report what is deployed

    "admin_verification" is "remote" when VERIFY_ADMIN_URL points at a
    deployed verify-admin function, "local" when checks run in-process.
    """
    return {
        "service": SERVICE_NAME,
        "version": settings.VERSION or DEFAULT_VERSION,
        "env": settings.APP_ENV,
        "admin_verification": "remote" if settings.VERIFY_ADMIN_URL else "local",
    }
