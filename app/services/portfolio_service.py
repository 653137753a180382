"""
Portfolio service
"""
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.portfolio import PortfolioItem
from app.schemas.portfolio import PortfolioItemCreate, PortfolioItemUpdate
from app.services.crud import create_row, get_row, update_row
from app.services.status_lifecycle import StatusLifecycleManager, activity_spec
from app.utils.slugs import slugify, unique_slug

portfolio_lifecycle = StatusLifecycleManager(
    activity_spec(PortfolioItem, "portfolio_item", order_by=("display_order", "id"))
)


def list_public_items(
    db: Session,
    category: Optional[str] = None,
    featured_only: bool = False,
) -> List[PortfolioItem]:
    query = db.query(PortfolioItem).filter(PortfolioItem.is_active.is_(True))
    if category:
        query = query.filter(PortfolioItem.category == category)
    if featured_only:
        query = query.filter(PortfolioItem.is_featured.is_(True))
    return query.order_by(PortfolioItem.display_order.asc(), PortfolioItem.id.asc()).all()


def get_public_item(db: Session, slug: str) -> PortfolioItem:
    item = db.query(PortfolioItem).filter(
        PortfolioItem.slug == slug,
        PortfolioItem.is_active.is_(True)
    ).first()
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Portfolio item '{slug}' not found"
        )
    return item


def create_item(db: Session, data: PortfolioItemCreate, actor_id: int) -> PortfolioItem:
    values = data.model_dump()
    values["slug"] = unique_slug(db, PortfolioItem, slugify(data.slug or data.title))
    return create_row(db, PortfolioItem, values, "portfolio_item", actor_id)


def update_item(db: Session, item_id: int, data: PortfolioItemUpdate, actor_id: int) -> PortfolioItem:
    item = get_row(db, PortfolioItem, item_id, "portfolio_item")
    extra = {}
    if data.slug is not None:
        extra["slug"] = unique_slug(db, PortfolioItem, slugify(data.slug), exclude_id=item_id)
    return update_row(db, item, data, "portfolio_item", actor_id, extra=extra)
