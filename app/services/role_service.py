"""
Role service - role assignments and the role store used by access resolution
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.core.exceptions import (
    ConfirmationRequired,
    EntityNotFound,
    PersistenceError,
    RoleLookupError,
)
from app.models.user import User
from app.models.user_role import AppRole, UserRoleAssignment
from app.services.audit_service import record_audit

logger = logging.getLogger(__name__)


class SqlRoleStore:
    """Reads a principal's role row; absence of a row is returned as None"""

    def __init__(self, db: Session):
        self.db = db

    async def get_role(self, principal_id: int) -> Optional[AppRole]:
        try:
            assignment = self.db.query(UserRoleAssignment).filter(
                UserRoleAssignment.user_id == principal_id
            ).first()
        except SQLAlchemyError as e:
            raise RoleLookupError(f"Role query failed for user {principal_id}") from e

        if assignment is None:
            return None
        try:
            return AppRole(assignment.role)
        except ValueError as e:
            raise RoleLookupError(
                f"Unrecognized role '{assignment.role}' stored for user {principal_id}"
            ) from e


def effective_role(assignment: Optional[UserRoleAssignment]) -> AppRole:
    """Role shown in the users list; no row (or an unknown value) reads as customer"""
    if assignment is None:
        return AppRole.CUSTOMER
    try:
        return AppRole(assignment.role)
    except ValueError:
        logger.warning(f"Unrecognized role '{assignment.role}' on role row {assignment.id}")
        return AppRole.CUSTOMER


def list_users_with_roles(db: Session) -> List[Tuple[User, AppRole, Optional[int]]]:
    """Return (user, effective role, role row id) for every user, newest first"""
    users = (
        db.query(User)
        .options(joinedload(User.role_assignment))
        .order_by(User.created_at.desc(), User.id.desc())
        .all()
    )
    return [
        (user, effective_role(user.role_assignment), user.role_assignment.id if user.role_assignment else None)
        for user in users
    ]


def set_user_role(db: Session, user_id: int, role: AppRole, actor_id: Optional[int]) -> UserRoleAssignment:
    """
    Create or update the user's single role row

    Raises:
        EntityNotFound: If the user does not exist
        PersistenceError: If the store rejects the write
    """
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise EntityNotFound(f"User with id {user_id} not found")

    assignment = db.query(UserRoleAssignment).filter(UserRoleAssignment.user_id == user_id).first()
    previous = assignment.role if assignment else None

    try:
        if assignment is None:
            assignment = UserRoleAssignment(user_id=user_id, role=role.value)
            db.add(assignment)
        else:
            assignment.role = role.value
        db.flush()
        record_audit(
            db,
            actor_id=actor_id,
            action="ROLE_SET",
            entity_type="user_role",
            entity_id=assignment.id,
            meta={"user_id": user_id, "from": previous, "to": role},
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Error updating role for user {user_id}", exc_info=True)
        raise PersistenceError("Failed to update role")

    db.refresh(assignment)
    return assignment


def remove_user_role(db: Session, user_id: int, confirmed: bool, actor_id: Optional[int]) -> None:
    """
    Delete the user's role row, reverting them to customer

    Raises:
        ConfirmationRequired: If not confirmed (nothing is changed)
        EntityNotFound: If the user has no role row
        PersistenceError: If the store rejects the delete
    """
    if confirmed is not True:
        raise ConfirmationRequired("Removing a role cannot be undone; confirm to proceed")

    assignment = db.query(UserRoleAssignment).filter(UserRoleAssignment.user_id == user_id).first()
    if assignment is None:
        raise EntityNotFound(f"User {user_id} has no role assignment")

    try:
        record_audit(
            db,
            actor_id=actor_id,
            action="ROLE_REMOVE",
            entity_type="user_role",
            entity_id=assignment.id,
            meta={"user_id": user_id, "role": assignment.role},
        )
        db.delete(assignment)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Error deleting role for user {user_id}", exc_info=True)
        raise PersistenceError("Failed to delete role")
