"""
Access resolver - decides the privilege level of the current principal

Resolution order:
1. session still loading -> no verdict yet
2. no principal -> unauthenticated
3. privileged verify-admin call with the session token
   - stale-session error -> unauthenticated (fallback suppressed)
   - isAdmin true -> admin (fallback skipped)
4. otherwise read the principal's role row (read error -> customer)

The resolver never raises; every failure degrades to the least privileged
verdict that is still correct for the inputs seen so far.
"""
import enum
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol

from app.core.exceptions import RoleLookupError, VerificationUnavailable
from app.models.user_role import AppRole

logger = logging.getLogger(__name__)

# Error strings the privileged function uses for a token it will not honour
STALE_SESSION_ERRORS = frozenset({"Not authenticated", "No authorization header"})


@dataclass(frozen=True)
class Principal:
    """Authenticated actor as seen by the session holder"""
    id: int
    email: Optional[str] = None
    expires_at: Optional[datetime] = None


@dataclass
class SessionContext:
    """
    Explicitly passed session capability.

    principal is None when nobody is signed in; is_loading is True while the
    identity provider has not finished restoring the session.
    """
    principal: Optional[Principal] = None
    access_token: Optional[str] = None
    is_loading: bool = False

    async def get_access_token(self) -> Optional[str]:
        return self.access_token


@dataclass(frozen=True)
class VerificationResult:
    """Answer of the privileged verify-admin function"""
    status_code: int
    is_admin: bool = False
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code == 200 and self.error is None

    @property
    def is_stale_session(self) -> bool:
        return self.error in STALE_SESSION_ERRORS


class AdminVerifier(Protocol):
    async def verify(self, access_token: str) -> VerificationResult:
        """Raise VerificationUnavailable when no answer could be obtained"""


class RoleStore(Protocol):
    async def get_role(self, principal_id: int) -> Optional[AppRole]:
        """Return the stored role, None when no row exists; raise RoleLookupError on failure"""


class ResolutionState(str, enum.Enum):
    UNRESOLVED = "unresolved"
    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    AUTHORITATIVE_ADMIN = "authoritative_admin"
    FALLBACK_ROLE = "fallback_role"

    @property
    def is_terminal(self) -> bool:
        return self in (
            ResolutionState.UNAUTHENTICATED,
            ResolutionState.AUTHORITATIVE_ADMIN,
            ResolutionState.FALLBACK_ROLE,
        )


@dataclass(frozen=True)
class AccessVerdict:
    is_admin: bool = False
    is_manager: bool = False
    is_staff: bool = False
    role: Optional[AppRole] = None
    is_loading: bool = False
    state: ResolutionState = ResolutionState.UNRESOLVED

    @classmethod
    def unresolved(cls) -> "AccessVerdict":
        """Nothing decided yet for the current principal; consumers should wait"""
        return cls(is_loading=True, state=ResolutionState.UNRESOLVED)

    @classmethod
    def loading(cls) -> "AccessVerdict":
        return cls(is_loading=True, state=ResolutionState.LOADING)

    @classmethod
    def unauthenticated(cls) -> "AccessVerdict":
        return cls(state=ResolutionState.UNAUTHENTICATED)

    @classmethod
    def authoritative_admin(cls) -> "AccessVerdict":
        return cls(is_admin=True, role=AppRole.ADMIN, state=ResolutionState.AUTHORITATIVE_ADMIN)

    @classmethod
    def from_role(cls, role: AppRole) -> "AccessVerdict":
        flags = _ROLE_FLAGS[role]
        return cls(
            is_admin=flags[0],
            is_manager=flags[1],
            is_staff=flags[2],
            role=role,
            state=ResolutionState.FALLBACK_ROLE,
        )

    def to_dict(self) -> dict:
        return {
            "is_admin": self.is_admin,
            "is_manager": self.is_manager,
            "is_staff": self.is_staff,
            "role": self.role.value if self.role else None,
            "is_loading": self.is_loading,
        }


# (is_admin, is_manager, is_staff); every member of AppRole needs an entry
_ROLE_FLAGS = {
    AppRole.ADMIN: (True, False, False),
    AppRole.MANAGER: (False, True, False),
    AppRole.STAFF: (False, False, True),
    AppRole.CUSTOMER: (False, False, False),
}


async def resolve_access(
    session: SessionContext,
    verifier: AdminVerifier,
    role_store: RoleStore,
) -> AccessVerdict:
    """
    Resolve the privilege verdict for the session's principal.

    Args:
        session: Current session context
        verifier: Privileged verify-admin function
        role_store: Client-readable role assignments

    Returns:
        AccessVerdict; never raises
    """
    if session.is_loading:
        return AccessVerdict.loading()

    principal = session.principal
    if principal is None:
        return AccessVerdict.unauthenticated()

    try:
        token = await session.get_access_token()
        if token:
            try:
                result = await verifier.verify(token)
            except VerificationUnavailable as e:
                logger.warning(f"Admin verification unavailable for user {principal.id}: {e}")
                result = None

            if result is not None:
                if result.is_stale_session:
                    logger.info(f"Stale session for user {principal.id}: {result.error}")
                    return AccessVerdict.unauthenticated()
                if result.ok and result.is_admin:
                    return AccessVerdict.authoritative_admin()
                if not result.ok:
                    logger.warning(
                        f"Admin verification failed for user {principal.id} "
                        f"(status={result.status_code}, error={result.error}); using role fallback"
                    )

        try:
            role = await role_store.get_role(principal.id)
        except RoleLookupError as e:
            logger.error(f"Error fetching user role: {e}")
            return AccessVerdict.from_role(AppRole.CUSTOMER)

        return AccessVerdict.from_role(role if role is not None else AppRole.CUSTOMER)
    except Exception:
        logger.exception("Error resolving access")
        return AccessVerdict.unauthenticated()


class AccessResolver:
    """
    Stateful resolver for one session holder.

    Keeps the last verdict for the current principal, resets whenever the
    principal changes, and drops answers that arrive for a principal that
    is no longer current.
    """

    def __init__(self, verifier: AdminVerifier, role_store: RoleStore):
        self.verifier = verifier
        self.role_store = role_store
        self.verdict = AccessVerdict.unresolved()
        self._principal_id: Optional[int] = None
        self._generation = 0

    @property
    def state(self) -> ResolutionState:
        return self.verdict.state

    def observe(self, session: SessionContext) -> None:
        """Record the session's principal; a change resets the verdict"""
        principal_id = session.principal.id if session.principal else None
        if principal_id != self._principal_id:
            self._principal_id = principal_id
            self._generation += 1
            self.verdict = AccessVerdict.unresolved()

    def force_recheck(self) -> None:
        self._generation += 1
        self.verdict = AccessVerdict.unresolved()

    async def resolve(self, session: SessionContext) -> AccessVerdict:
        self.observe(session)
        if self.verdict.state.is_terminal:
            return self.verdict

        generation = self._generation
        issued_for = self._principal_id
        self.verdict = AccessVerdict.loading()

        verdict = await resolve_access(session, self.verifier, self.role_store)

        if generation != self._generation or issued_for != self._principal_id:
            logger.debug(f"Discarding access verdict issued for user {issued_for}")
            return self.verdict

        self.verdict = verdict
        return verdict
