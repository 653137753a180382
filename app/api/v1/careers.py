"""
Careers endpoints - open positions and applications
"""
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.deps import get_db, get_optional_user
from app.models.user import User
from app.schemas.job import (
    JobApplicationCreate,
    JobApplicationOut,
    JobPostingListResponse,
    JobPostingOut,
)
from app.services.job_service import (
    get_active_posting,
    list_active_postings,
    submit_application,
    to_application_out,
)

router = APIRouter()


@router.get("/jobs", response_model=JobPostingListResponse)
async def list_jobs(db: Session = Depends(get_db)):
    """Active job postings, newest first"""
    postings = list_active_postings(db)
    return JobPostingListResponse(items=postings, total=len(postings))


@router.get("/jobs/{posting_id}", response_model=JobPostingOut)
async def get_job(posting_id: int, db: Session = Depends(get_db)):
    return get_active_posting(db, posting_id)


@router.post("/applications", response_model=JobApplicationOut, status_code=status.HTTP_201_CREATED)
async def apply(
    application_data: JobApplicationCreate,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    """
    Apply to an active job posting

    Signing in is optional; the application starts as pending.
    """
    application = submit_application(
        db,
        application_data,
        user_id=current_user.id if current_user else None,
    )
    return to_application_out(application)
