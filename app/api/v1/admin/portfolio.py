"""
Admin portfolio endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.deps import get_db, require_admin
from app.models.activity import ActivityStatus
from app.models.user import User
from app.schemas.common import ActivityStatusUpdate, StatusOptionsOut
from app.schemas.portfolio import (
    PortfolioItemCreate,
    PortfolioItemOut,
    PortfolioItemUpdate,
    PortfolioListResponse,
)
from app.services.portfolio_service import create_item, portfolio_lifecycle, update_item

router = APIRouter()


def _listing(db: Session, status_filter: Optional[ActivityStatus] = None) -> PortfolioListResponse:
    items = portfolio_lifecycle.fetch_list(db, status_filter=status_filter)
    return PortfolioListResponse(items=items, total=len(items))


@router.get("", response_model=PortfolioListResponse)
async def list_items(
    status_filter: Optional[ActivityStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return _listing(db, status_filter)


@router.get("/statuses", response_model=StatusOptionsOut)
async def item_statuses(current_user: User = Depends(require_admin)):
    return StatusOptionsOut(resource="portfolio_item", statuses=portfolio_lifecycle.allowed_statuses())


@router.post("", response_model=PortfolioItemOut, status_code=status.HTTP_201_CREATED)
async def create_portfolio_item(
    item_data: PortfolioItemCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Add a portfolio item; the slug is derived from the title when omitted"""
    return create_item(db, item_data, actor_id=current_user.id)


@router.patch("/{item_id}", response_model=PortfolioItemOut)
async def update_portfolio_item(
    item_id: int,
    item_data: PortfolioItemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return update_item(db, item_id, item_data, actor_id=current_user.id)


@router.patch("/{item_id}/status", response_model=PortfolioListResponse)
async def update_item_status(
    item_id: int,
    status_data: ActivityStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    portfolio_lifecycle.transition(db, item_id, status_data.status, actor_id=current_user.id)
    return _listing(db)


@router.delete("/{item_id}", response_model=PortfolioListResponse)
async def delete_item(
    item_id: int,
    confirm: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    portfolio_lifecycle.delete(db, item_id, confirmed=confirm, actor_id=current_user.id)
    return _listing(db)
