"""
Admin job application endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.deps import get_db, require_admin
from app.models.job import ApplicationStatus
from app.models.user import User
from app.schemas.common import StatusOptionsOut
from app.schemas.job import ApplicationStatusUpdate, JobApplicationListResponse
from app.services.job_service import application_lifecycle, list_applications_admin

router = APIRouter()


def _listing(db: Session, status_filter: Optional[ApplicationStatus] = None) -> JobApplicationListResponse:
    items = list_applications_admin(db, status_filter=status_filter)
    return JobApplicationListResponse(items=items, total=len(items))


@router.get("", response_model=JobApplicationListResponse)
async def list_applications(
    status_filter: Optional[ApplicationStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Applications with the title of the posting applied to"""
    return _listing(db, status_filter)


@router.get("/statuses", response_model=StatusOptionsOut)
async def application_statuses(current_user: User = Depends(require_admin)):
    return StatusOptionsOut(resource="job_application", statuses=application_lifecycle.allowed_statuses())


@router.patch("/{application_id}/status", response_model=JobApplicationListResponse)
async def update_application_status(
    application_id: int,
    status_data: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """
    Move an application through review

    A rejected or hired application can be moved back to any other status.
    """
    application_lifecycle.transition(db, application_id, status_data.status, actor_id=current_user.id)
    return _listing(db)


@router.delete("/{application_id}", response_model=JobApplicationListResponse)
async def delete_application(
    application_id: int,
    confirm: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    application_lifecycle.delete(db, application_id, confirmed=confirm, actor_id=current_user.id)
    return _listing(db)
