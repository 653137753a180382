"""
Admin user and role management endpoints
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.deps import get_db, require_admin
from app.models.user import User
from app.schemas.user import RoleUpdateRequest, UserListResponse, UserWithRoleOut
from app.services.role_service import list_users_with_roles, remove_user_role, set_user_role

router = APIRouter()


def _listing(db: Session) -> UserListResponse:
    items = [
        UserWithRoleOut(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            phone=user.phone,
            address=user.address,
            active=user.active,
            created_at=user.created_at,
            role=role,
            role_id=role_id,
        )
        for user, role, role_id in list_users_with_roles(db)
    ]
    return UserListResponse(items=items, total=len(items))


@router.get("", response_model=UserListResponse)
async def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Users with their effective role (no role row reads as customer)"""
    return _listing(db)


@router.put("/{user_id}/role", response_model=UserListResponse)
async def assign_role(
    user_id: int,
    role_data: RoleUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Create or replace the user's role row"""
    set_user_role(db, user_id, role_data.role, actor_id=current_user.id)
    return _listing(db)


@router.delete("/{user_id}/role", response_model=UserListResponse)
async def delete_role(
    user_id: int,
    confirm: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Remove the user's role row; they revert to customer"""
    remove_user_role(db, user_id, confirmed=confirm, actor_id=current_user.id)
    return _listing(db)
