"""
Dependencies and guards for FastAPI endpoints
"""
from typing import Generator, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import decode_token
from app.db.session import SessionLocal
from app.models.user import User
from app.services.access_resolver import (
    AccessVerdict,
    AdminVerifier,
    RoleStore,
    SessionContext,
    resolve_access,
)
from app.services.admin_verification import HttpAdminVerifier, LocalAdminVerifier
from app.services.auth_service import read_session
from app.services.role_service import SqlRoleStore


security = HTTPBearer(auto_error=False)


def get_db() -> Generator:
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _credentials_exception(detail: str = "Invalid authentication credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _load_user(token: str, db: Session) -> User:
    try:
        payload = decode_token(token)
        user_id = int(payload.get("sub"))
    except (ValueError, TypeError):
        raise _credentials_exception()

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise _credentials_exception("User not found")
    if not user.active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user"
        )
    return user


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """Get current authenticated user from a valid, unexpired JWT"""
    if credentials is None:
        raise _credentials_exception("Not authenticated")
    return _load_user(credentials.credentials, db)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Current user when a valid token is sent, otherwise None"""
    if credentials is None:
        return None
    try:
        return _load_user(credentials.credentials, db)
    except HTTPException:
        return None


def get_session_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> SessionContext:
    """Session as held by the caller (token may be stale)"""
    return read_session(credentials.credentials if credentials else None)


def get_admin_verifier(db: Session = Depends(get_db)) -> AdminVerifier:
    """Remote verify-admin function when configured, else the in-process one"""
    if settings.VERIFY_ADMIN_URL:
        return HttpAdminVerifier(settings.VERIFY_ADMIN_URL, timeout=settings.VERIFY_ADMIN_TIMEOUT_SECONDS)
    return LocalAdminVerifier(db)


def get_role_store(db: Session = Depends(get_db)) -> RoleStore:
    return SqlRoleStore(db)


async def get_access_verdict(
    session: SessionContext = Depends(get_session_context),
    verifier: AdminVerifier = Depends(get_admin_verifier),
    role_store: RoleStore = Depends(get_role_store),
) -> AccessVerdict:
    return await resolve_access(session, verifier, role_store)


async def require_admin(
    current_user: User = Depends(get_current_user),
    verdict: AccessVerdict = Depends(get_access_verdict),
) -> User:
    """
    Admin-only guard.

    Usage:
        @router.get("/admin-only")
        async def endpoint(user: User = Depends(require_admin)):
            ...
    """
    if not verdict.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Admin role required."
        )
    return current_user
