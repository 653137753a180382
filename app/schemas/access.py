"""
Access resolution schemas
"""
from typing import Optional
from pydantic import BaseModel, Field

from app.models.user_role import AppRole


class AccessStateOut(BaseModel):
    """Privilege verdict for the current caller"""
    is_admin: bool
    is_manager: bool
    is_staff: bool
    role: Optional[AppRole]
    is_loading: bool


class RouteDecisionOut(BaseModel):
    """Whether a client route may render, and where to go otherwise"""
    path: str
    allowed: bool
    redirect_to: Optional[str] = Field(None, description="Redirect target when not allowed")
