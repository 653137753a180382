"""
Privileged admin verification

verify_admin_request() is the server-side function behind
/functions/verify-admin. It decides admin status from the store, which the
session holder cannot influence. LocalAdminVerifier calls it in-process;
HttpAdminVerifier calls a deployed instance over HTTP.
"""
import logging
from typing import Optional

import httpx
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import VerificationUnavailable
from app.core.security import decode_token
from app.models.user import User
from app.models.user_role import AppRole, UserRoleAssignment
from app.services.access_resolver import VerificationResult

logger = logging.getLogger(__name__)

NO_AUTH_HEADER = "No authorization header"
NOT_AUTHENTICATED = "Not authenticated"
ROLE_CHECK_FAILED = "Failed to verify role"
INTERNAL_ERROR = "Internal server error"


def has_role(db: Session, user_id: int, role: AppRole) -> bool:
    """Return True when the user's role row holds exactly this role"""
    assignment = db.query(UserRoleAssignment).filter(
        UserRoleAssignment.user_id == user_id
    ).first()
    return assignment is not None and assignment.role == role.value


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def verify_admin_request(db: Session, authorization: Optional[str]) -> VerificationResult:
    """
    Authoritatively decide whether the bearer of a token is an admin

    Args:
        db: Database session
        authorization: Raw Authorization header value

    Returns:
        VerificationResult with the HTTP status the function answers with
    """
    try:
        if not authorization:
            return VerificationResult(status_code=401, error=NO_AUTH_HEADER)

        token = _bearer_token(authorization)
        if token is None:
            return VerificationResult(status_code=401, error=NOT_AUTHENTICATED)

        try:
            payload = decode_token(token)
            user_id = int(payload.get("sub"))
        except (ValueError, TypeError):
            return VerificationResult(status_code=401, error=NOT_AUTHENTICATED)

        user = db.query(User).filter(User.id == user_id).first()
        if user is None or not user.active:
            return VerificationResult(status_code=401, error=NOT_AUTHENTICATED)

        try:
            is_admin = has_role(db, user.id, AppRole.ADMIN)
        except SQLAlchemyError:
            logger.error("Error checking admin role", exc_info=True)
            return VerificationResult(status_code=500, error=ROLE_CHECK_FAILED)

        return VerificationResult(status_code=200, is_admin=is_admin)
    except Exception:
        logger.exception("Unexpected error in verify-admin")
        return VerificationResult(status_code=500, error=INTERNAL_ERROR)


def result_to_body(result: VerificationResult) -> dict:
    """Wire format of the verify-admin function"""
    body = {"isAdmin": result.is_admin}
    if result.error is not None:
        body["error"] = result.error
    return body


def result_from_response(status_code: int, body) -> VerificationResult:
    """Parse a verify-admin HTTP answer"""
    if not isinstance(body, dict):
        raise VerificationUnavailable(f"Unexpected verify-admin response body (status {status_code})")
    error = body.get("error")
    return VerificationResult(
        status_code=status_code,
        is_admin=body.get("isAdmin") is True,
        error=str(error) if error is not None else None,
    )


class LocalAdminVerifier:
    """Runs the verify-admin function in-process against the given session"""

    def __init__(self, db: Session):
        self.db = db

    async def verify(self, access_token: str) -> VerificationResult:
        return verify_admin_request(self.db, f"Bearer {access_token}")


class HttpAdminVerifier:
    """Calls a deployed verify-admin function over HTTP"""

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def verify(self, access_token: str) -> VerificationResult:
        headers = {"Authorization": f"Bearer {access_token}"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.url, headers=headers)
        except httpx.HTTPError as e:
            raise VerificationUnavailable(f"verify-admin request failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise VerificationUnavailable(
                f"verify-admin returned non-JSON body (status {response.status_code})"
            ) from e

        return result_from_response(response.status_code, body)
