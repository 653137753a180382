"""
Identity provider - accounts, tokens and session contexts
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.security import create_access_token, decode_token, hash_password, verify_password
from app.models.user import User
from app.schemas.auth import SignupRequest, ProfileUpdate
from app.services.access_resolver import Principal, SessionContext
from app.services.audit_service import log_audit

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(func.lower(User.email) == email.lower()).first()


def signup(db: Session, data: SignupRequest) -> User:
    """
    Register a customer account

    New accounts get no role row, which makes them customers.

    Raises:
        HTTPException: If the email is already registered
    """
    if get_user_by_email(db, data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="An account with this email already exists"
        )

    user = User(
        email=data.email.lower(),
        password_hash=hash_password(data.password),
        full_name=data.full_name,
        phone=data.phone,
        active=True
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    log_audit(db, actor_id=user.id, action="AUTH_SIGNUP", entity_type="auth", entity_id=user.id)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    """
    Check credentials

    Raises:
        HTTPException: 401 on bad credentials, 403 on inactive accounts
    """
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    if not user.active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive"
        )
    return user


def issue_token(user: User) -> str:
    # JWT 'sub' claim must be a string
    return create_access_token({"sub": str(user.id), "email": user.email})


def read_session(access_token: Optional[str]) -> SessionContext:
    """
    Build the session context a token holder would see.

    The signature is checked but expiry is not: an expired token still
    names its principal, and it is the privileged check that rejects it.
    """
    if not access_token:
        return SessionContext()

    try:
        payload = decode_token(access_token, verify_exp=False)
        principal_id = int(payload.get("sub"))
    except (ValueError, TypeError):
        return SessionContext()

    exp = payload.get("exp")
    expires_at = datetime.fromtimestamp(exp, tz=timezone.utc) if isinstance(exp, (int, float)) else None
    principal = Principal(id=principal_id, email=payload.get("email"), expires_at=expires_at)
    return SessionContext(principal=principal, access_token=access_token)


def update_profile(db: Session, user: User, data: ProfileUpdate) -> User:
    """Update the caller's own profile fields"""
    update_dict = data.model_dump(exclude_unset=True)
    for key, value in update_dict.items():
        setattr(user, key, value)
    db.commit()
    db.refresh(user)
    return user
