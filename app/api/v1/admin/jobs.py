"""
Admin job posting endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.deps import get_db, require_admin
from app.models.activity import ActivityStatus
from app.models.user import User
from app.schemas.common import ActivityStatusUpdate, StatusOptionsOut
from app.schemas.job import (
    JobPostingCreate,
    JobPostingListResponse,
    JobPostingOut,
    JobPostingUpdate,
)
from app.services.job_service import create_posting, job_posting_lifecycle, update_posting

router = APIRouter()


def _listing(db: Session, status_filter: Optional[ActivityStatus] = None) -> JobPostingListResponse:
    items = job_posting_lifecycle.fetch_list(db, status_filter=status_filter)
    return JobPostingListResponse(items=items, total=len(items))


@router.get("", response_model=JobPostingListResponse)
async def list_postings(
    status_filter: Optional[ActivityStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """All postings, active and inactive"""
    return _listing(db, status_filter)


@router.get("/statuses", response_model=StatusOptionsOut)
async def posting_statuses(current_user: User = Depends(require_admin)):
    return StatusOptionsOut(resource="job_posting", statuses=job_posting_lifecycle.allowed_statuses())


@router.post("", response_model=JobPostingOut, status_code=status.HTTP_201_CREATED)
async def create_job_posting(
    posting_data: JobPostingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return create_posting(db, posting_data, actor_id=current_user.id)


@router.patch("/{posting_id}", response_model=JobPostingOut)
async def update_job_posting(
    posting_id: int,
    posting_data: JobPostingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return update_posting(db, posting_id, posting_data, actor_id=current_user.id)


@router.patch("/{posting_id}/status", response_model=JobPostingListResponse)
async def update_posting_status(
    posting_id: int,
    status_data: ActivityStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Open or close a posting"""
    job_posting_lifecycle.transition(db, posting_id, status_data.status, actor_id=current_user.id)
    return _listing(db)


@router.delete("/{posting_id}", response_model=JobPostingListResponse)
async def delete_posting(
    posting_id: int,
    confirm: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    job_posting_lifecycle.delete(db, posting_id, confirmed=confirm, actor_id=current_user.id)
    return _listing(db)
