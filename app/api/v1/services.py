"""
Public service catalogue endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.schemas.catalog import ServiceOfferingListResponse, ServiceOfferingOut
from app.services.catalog_service import get_public_service, list_public_services

router = APIRouter()


@router.get("", response_model=ServiceOfferingListResponse)
async def list_services(db: Session = Depends(get_db)):
    """Active services in display order"""
    services = list_public_services(db)
    return ServiceOfferingListResponse(items=services, total=len(services))


@router.get("/{slug}", response_model=ServiceOfferingOut)
async def get_service(slug: str, db: Session = Depends(get_db)):
    return get_public_service(db, slug)
