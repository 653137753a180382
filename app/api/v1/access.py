"""
Access resolution endpoints
"""
from fastapi import APIRouter, Depends, Query

from app.core.deps import get_access_verdict, get_session_context
from app.schemas.access import AccessStateOut, RouteDecisionOut
from app.services.access_resolver import AccessVerdict, SessionContext
from app.services.route_guard import evaluate_route

router = APIRouter()


@router.get("/me", response_model=AccessStateOut)
async def get_my_access(verdict: AccessVerdict = Depends(get_access_verdict)):
    """Privilege verdict for the caller (never an error; the least privilege on failure)"""
    return AccessStateOut(**verdict.to_dict())


@router.get("/route", response_model=RouteDecisionOut)
async def check_route(
    path: str = Query(..., description="Client route, e.g. /admin/bookings"),
    session: SessionContext = Depends(get_session_context),
    verdict: AccessVerdict = Depends(get_access_verdict),
):
    """Route guard decision for a client route"""
    decision = evaluate_route(path, verdict, authenticated=session.principal is not None)
    return RouteDecisionOut(path=path, allowed=decision.allowed, redirect_to=decision.redirect_to)
