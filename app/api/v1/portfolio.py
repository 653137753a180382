"""
Public portfolio endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.schemas.portfolio import PortfolioItemOut, PortfolioListResponse
from app.services.portfolio_service import get_public_item, list_public_items

router = APIRouter()


@router.get("", response_model=PortfolioListResponse)
async def list_portfolio(
    category: Optional[str] = Query(None, description="Filter by category"),
    featured: bool = Query(False, description="Only featured items"),
    db: Session = Depends(get_db)
):
    """
    Active portfolio items

    Query parameters:
    - category: Optional category filter ("All" or empty means no filter)
    - featured: Only featured items
    """
    if category == "All":
        category = None
    items = list_public_items(db, category=category, featured_only=featured)
    return PortfolioListResponse(items=items, total=len(items))


@router.get("/{slug}", response_model=PortfolioItemOut)
async def get_portfolio_item(slug: str, db: Session = Depends(get_db)):
    return get_public_item(db, slug)
