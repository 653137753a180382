"""
Service catalogue - the agency's offered services
"""
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.catalog import ServiceOffering
from app.schemas.catalog import ServiceOfferingCreate, ServiceOfferingUpdate
from app.services.crud import create_row, get_row, update_row
from app.services.status_lifecycle import StatusLifecycleManager, activity_spec
from app.utils.slugs import slugify, unique_slug

service_lifecycle = StatusLifecycleManager(
    activity_spec(ServiceOffering, "service", order_by=("display_order", "id"))
)


def list_public_services(db: Session) -> List[ServiceOffering]:
    return (
        db.query(ServiceOffering)
        .filter(ServiceOffering.is_active.is_(True))
        .order_by(ServiceOffering.display_order.asc(), ServiceOffering.id.asc())
        .all()
    )


def get_public_service(db: Session, slug: str) -> ServiceOffering:
    service = db.query(ServiceOffering).filter(
        ServiceOffering.slug == slug,
        ServiceOffering.is_active.is_(True)
    ).first()
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Service '{slug}' not found"
        )
    return service


def create_service(db: Session, data: ServiceOfferingCreate, actor_id: int) -> ServiceOffering:
    values = data.model_dump()
    values["slug"] = unique_slug(db, ServiceOffering, slugify(data.slug or data.title))
    return create_row(db, ServiceOffering, values, "service", actor_id)


def update_service(db: Session, service_id: int, data: ServiceOfferingUpdate, actor_id: int) -> ServiceOffering:
    service = get_row(db, ServiceOffering, service_id, "service")
    extra = {}
    if data.slug is not None:
        extra["slug"] = unique_slug(db, ServiceOffering, slugify(data.slug), exclude_id=service_id)
    return update_row(db, service, data, "service", actor_id, extra=extra)
