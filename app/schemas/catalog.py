"""
Service offering schemas
"""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


class ServiceOfferingBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200, description="Derived from the title when omitted")
    description: str = Field(..., min_length=1)
    icon: str = Field(default="Globe", max_length=50)
    icon_url: Optional[str] = None
    background_image: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    display_order: int = 0
    is_active: bool = True


class ServiceOfferingCreate(ServiceOfferingBase):
    """Schema for creating a service"""


class ServiceOfferingUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=50)
    icon_url: Optional[str] = None
    background_image: Optional[str] = None
    features: Optional[List[str]] = None
    display_order: Optional[int] = None


class ServiceOfferingOut(ServiceOfferingBase):
    id: int
    slug: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ServiceOfferingListResponse(BaseModel):
    items: List[ServiceOfferingOut]
    total: int
