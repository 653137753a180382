"""
Route guard for the admin area

Permission failures redirect instead of showing an error page: signed-out
visitors go to the login page, signed-in non-admins go home.
"""
import enum
from dataclasses import dataclass
from typing import Optional

from app.services.access_resolver import AccessVerdict

ADMIN_PREFIX = "/admin"
LOGIN_PATH = "/login"
HOME_PATH = "/"


class GuardOutcome(str, enum.Enum):
    WAIT = "wait"
    ALLOW = "allow"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class RouteDecision:
    outcome: GuardOutcome
    redirect_to: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.outcome is GuardOutcome.ALLOW


def is_admin_path(path: str) -> bool:
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + "/")


def evaluate_admin_route(verdict: AccessVerdict, authenticated: bool) -> RouteDecision:
    """Decide what an admin route does for the given verdict"""
    if verdict.is_loading:
        return RouteDecision(GuardOutcome.WAIT)
    if not authenticated:
        return RouteDecision(GuardOutcome.REDIRECT, LOGIN_PATH)
    if not verdict.is_admin:
        return RouteDecision(GuardOutcome.REDIRECT, HOME_PATH)
    return RouteDecision(GuardOutcome.ALLOW)


def evaluate_route(path: str, verdict: AccessVerdict, authenticated: bool) -> RouteDecision:
    """Non-admin routes are always allowed"""
    if not is_admin_path(path):
        return RouteDecision(GuardOutcome.ALLOW)
    return evaluate_admin_route(verdict, authenticated)
