"""
Initial admin bootstrap
"""
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.logging import get_logger
from app.core.security import hash_password
from app.models.user import User
from app.models.user_role import AppRole, UserRoleAssignment
from app.services.auth_service import get_user_by_email
from app.services.audit_service import record_audit

logger = get_logger(__name__)


def admin_exists(db: Session) -> bool:
    return db.query(UserRoleAssignment).filter(
        UserRoleAssignment.role == AppRole.ADMIN.value
    ).first() is not None


def grant_admin(db: Session, email: str, password: str) -> User:
    """
    Give the account with this email the admin role, creating the account
    first when it does not exist. An existing account keeps its password.
    """
    email = email.lower()
    user = get_user_by_email(db, email)
    if user is None:
        user = User(
            email=email,
            password_hash=hash_password(password),
            full_name="System Administrator",
            active=True,
        )
        db.add(user)
        db.flush()
        logger.info("Created admin account %s", email)

    if user.role_assignment is None:
        db.add(UserRoleAssignment(user_id=user.id, role=AppRole.ADMIN.value))
    else:
        user.role_assignment.role = AppRole.ADMIN.value
    record_audit(db, actor_id=None, action="ROLE_SET", entity_type="user_role",
                 meta={"user_id": user.id, "to": AppRole.ADMIN, "bootstrap": True})
    db.commit()
    db.refresh(user)
    return user


def ensure_initial_admin(db: Session) -> Optional[User]:
    """
    Create the initial admin from INITIAL_ADMIN_EMAIL / INITIAL_ADMIN_PASSWORD
    when no admin role row exists. Returns None when an admin already exists.
    """
    if admin_exists(db):
        logger.info("Admin user already exists, skipping initial bootstrap")
        return None

    logger.info("No admin user found, creating initial admin setup...")
    user = grant_admin(db, settings.INITIAL_ADMIN_EMAIL, settings.INITIAL_ADMIN_PASSWORD)
    logger.info("Initial admin ready: %s", user.email)
    logger.info("Password: [set via INITIAL_ADMIN_PASSWORD environment variable]")
    return user
