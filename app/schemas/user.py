"""
Admin user management schemas
"""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel

from app.models.user_role import AppRole


class UserWithRoleOut(BaseModel):
    id: int
    email: str
    full_name: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    active: bool
    created_at: datetime
    role: AppRole
    role_id: Optional[int]


class UserListResponse(BaseModel):
    items: List[UserWithRoleOut]
    total: int


class RoleUpdateRequest(BaseModel):
    role: AppRole
