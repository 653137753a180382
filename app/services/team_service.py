"""
Team service
"""
from typing import List

from sqlalchemy.orm import Session

from app.models.team import TeamMember
from app.schemas.team import TeamMemberCreate, TeamMemberUpdate
from app.services.crud import create_row, get_row, update_row
from app.services.status_lifecycle import StatusLifecycleManager, activity_spec

team_lifecycle = StatusLifecycleManager(
    activity_spec(TeamMember, "team_member", order_by=("display_order", "id"))
)


def list_public_members(db: Session) -> List[TeamMember]:
    return (
        db.query(TeamMember)
        .filter(TeamMember.is_active.is_(True))
        .order_by(TeamMember.display_order.asc(), TeamMember.id.asc())
        .all()
    )


def create_member(db: Session, data: TeamMemberCreate, actor_id: int) -> TeamMember:
    return create_row(db, TeamMember, data.model_dump(), "team_member", actor_id)


def update_member(db: Session, member_id: int, data: TeamMemberUpdate, actor_id: int) -> TeamMember:
    member = get_row(db, TeamMember, member_id, "team_member")
    return update_row(db, member, data, "team_member", actor_id)
