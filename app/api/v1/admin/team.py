"""
Admin team endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.deps import get_db, require_admin
from app.models.activity import ActivityStatus
from app.models.user import User
from app.schemas.common import ActivityStatusUpdate, StatusOptionsOut
from app.schemas.team import TeamListResponse, TeamMemberCreate, TeamMemberOut, TeamMemberUpdate
from app.services.team_service import create_member, team_lifecycle, update_member

router = APIRouter()


def _listing(db: Session, status_filter: Optional[ActivityStatus] = None) -> TeamListResponse:
    members = team_lifecycle.fetch_list(db, status_filter=status_filter)
    return TeamListResponse(items=members, total=len(members))


@router.get("", response_model=TeamListResponse)
async def list_members(
    status_filter: Optional[ActivityStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return _listing(db, status_filter)


@router.get("/statuses", response_model=StatusOptionsOut)
async def member_statuses(current_user: User = Depends(require_admin)):
    return StatusOptionsOut(resource="team_member", statuses=team_lifecycle.allowed_statuses())


@router.post("", response_model=TeamMemberOut, status_code=status.HTTP_201_CREATED)
async def add_member(
    member_data: TeamMemberCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return create_member(db, member_data, actor_id=current_user.id)


@router.patch("/{member_id}", response_model=TeamMemberOut)
async def edit_member(
    member_id: int,
    member_data: TeamMemberUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return update_member(db, member_id, member_data, actor_id=current_user.id)


@router.patch("/{member_id}/status", response_model=TeamListResponse)
async def update_member_status(
    member_id: int,
    status_data: ActivityStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    team_lifecycle.transition(db, member_id, status_data.status, actor_id=current_user.id)
    return _listing(db)


@router.delete("/{member_id}", response_model=TeamListResponse)
async def remove_member(
    member_id: int,
    confirm: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    team_lifecycle.delete(db, member_id, confirmed=confirm, actor_id=current_user.id)
    return _listing(db)
