"""
Careers service - job postings and applications
"""
import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.job import ApplicationStatus, JobApplication, JobPosting
from app.schemas.job import (
    JobApplicationCreate,
    JobApplicationOut,
    JobPostingCreate,
    JobPostingUpdate,
)
from app.services.crud import create_row, get_row, update_row
from app.services.status_lifecycle import LifecycleSpec, StatusLifecycleManager, activity_spec

logger = logging.getLogger(__name__)

job_posting_lifecycle = StatusLifecycleManager(activity_spec(JobPosting, "job_posting"))
application_lifecycle = StatusLifecycleManager(
    LifecycleSpec(model=JobApplication, entity_type="job_application", statuses=ApplicationStatus)
)


def list_active_postings(db: Session) -> List[JobPosting]:
    return (
        db.query(JobPosting)
        .filter(JobPosting.is_active.is_(True))
        .order_by(JobPosting.created_at.desc(), JobPosting.id.desc())
        .all()
    )


def get_active_posting(db: Session, posting_id: int) -> JobPosting:
    posting = db.query(JobPosting).filter(
        JobPosting.id == posting_id,
        JobPosting.is_active.is_(True)
    ).first()
    if posting is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Job posting with id {posting_id} not found"
        )
    return posting


def create_posting(db: Session, data: JobPostingCreate, actor_id: int) -> JobPosting:
    return create_row(db, JobPosting, data.model_dump(), "job_posting", actor_id)


def update_posting(db: Session, posting_id: int, data: JobPostingUpdate, actor_id: int) -> JobPosting:
    posting = get_row(db, JobPosting, posting_id, "job_posting")
    return update_row(db, posting, data, "job_posting", actor_id)


def submit_application(db: Session, data: JobApplicationCreate, user_id: Optional[int]) -> JobApplication:
    """
    Record an application to an active posting

    Applicants may be anonymous; signed-in applicants are linked to their account.
    """
    get_active_posting(db, data.job_posting_id)

    application = create_row(
        db,
        JobApplication,
        {
            "job_posting_id": data.job_posting_id,
            "user_id": user_id,
            "full_name": data.full_name,
            "email": str(data.email),
            "phone": data.phone,
            "resume_url": data.resume_url,
            "portfolio_url": str(data.portfolio_url) if data.portfolio_url else None,
            "cover_letter": data.cover_letter,
            "status": ApplicationStatus.PENDING.value,
        },
        entity_type="job_application",
        actor_id=user_id,
    )
    logger.info(f"Application {application.id} received for posting {data.job_posting_id}")
    return application


def to_application_out(application: JobApplication) -> JobApplicationOut:
    out = JobApplicationOut.model_validate(application)
    if application.job_posting is not None:
        out.job_title = application.job_posting.title
    return out


def list_applications_admin(
    db: Session,
    status_filter: Optional[ApplicationStatus] = None,
) -> List[JobApplicationOut]:
    return [
        to_application_out(a)
        for a in application_lifecycle.fetch_list(db, status_filter=status_filter)
    ]
