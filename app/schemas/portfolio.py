"""
Portfolio schemas
"""
from datetime import date, datetime
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator

from app.models.portfolio import PORTFOLIO_CATEGORIES


def _check_category(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in PORTFOLIO_CATEGORIES:
        raise ValueError(f"category must be one of {PORTFOLIO_CATEGORIES}")
    return v


class PortfolioItemBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200, description="Derived from the title when omitted")
    description: Optional[str] = None
    full_description: Optional[str] = None
    category: Optional[str] = "Web Application"
    image_url: Optional[str] = None
    technologies: List[str] = Field(default_factory=list)
    client_name: Optional[str] = None
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    completion_date: Optional[date] = None
    is_featured: bool = False
    is_active: bool = True
    display_order: int = 0

    @field_validator("category")
    @classmethod
    def _category(cls, v):
        return _check_category(v)


class PortfolioItemCreate(PortfolioItemBase):
    """Schema for creating a portfolio item"""


class PortfolioItemUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    full_description: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    technologies: Optional[List[str]] = None
    client_name: Optional[str] = None
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    completion_date: Optional[date] = None
    is_featured: Optional[bool] = None
    display_order: Optional[int] = None

    @field_validator("category")
    @classmethod
    def _category(cls, v):
        return _check_category(v)


class PortfolioItemOut(PortfolioItemBase):
    id: int
    slug: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PortfolioListResponse(BaseModel):
    items: List[PortfolioItemOut]
    total: int
