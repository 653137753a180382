"""
Admin service catalogue endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.deps import get_db, require_admin
from app.models.activity import ActivityStatus
from app.models.user import User
from app.schemas.catalog import (
    ServiceOfferingCreate,
    ServiceOfferingListResponse,
    ServiceOfferingOut,
    ServiceOfferingUpdate,
)
from app.schemas.common import ActivityStatusUpdate, StatusOptionsOut
from app.services.catalog_service import create_service, service_lifecycle, update_service

router = APIRouter()


def _listing(db: Session, status_filter: Optional[ActivityStatus] = None) -> ServiceOfferingListResponse:
    services = service_lifecycle.fetch_list(db, status_filter=status_filter)
    return ServiceOfferingListResponse(items=services, total=len(services))


@router.get("", response_model=ServiceOfferingListResponse)
async def list_services(
    status_filter: Optional[ActivityStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return _listing(db, status_filter)


@router.get("/statuses", response_model=StatusOptionsOut)
async def service_statuses(current_user: User = Depends(require_admin)):
    return StatusOptionsOut(resource="service", statuses=service_lifecycle.allowed_statuses())


@router.post("", response_model=ServiceOfferingOut, status_code=status.HTTP_201_CREATED)
async def add_service(
    service_data: ServiceOfferingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return create_service(db, service_data, actor_id=current_user.id)


@router.patch("/{service_id}", response_model=ServiceOfferingOut)
async def edit_service(
    service_id: int,
    service_data: ServiceOfferingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return update_service(db, service_id, service_data, actor_id=current_user.id)


@router.patch("/{service_id}/status", response_model=ServiceOfferingListResponse)
async def update_service_status(
    service_id: int,
    status_data: ActivityStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    service_lifecycle.transition(db, service_id, status_data.status, actor_id=current_user.id)
    return _listing(db)


@router.delete("/{service_id}", response_model=ServiceOfferingListResponse)
async def remove_service(
    service_id: int,
    confirm: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    service_lifecycle.delete(db, service_id, confirmed=confirm, actor_id=current_user.id)
    return _listing(db)
