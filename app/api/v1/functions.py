"""
Privileged server-side functions
"""
from typing import Optional

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.services.admin_verification import result_to_body, verify_admin_request

router = APIRouter()


@router.api_route("/verify-admin", methods=["GET", "POST"])
async def verify_admin(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db)
):
    """
    Authoritatively report whether the token holder is an admin.

    200 {"isAdmin": bool}; 401 {"isAdmin": false, "error": "No authorization header" |
    "Not authenticated"}; 500 {"isAdmin": false, "error": ...} on internal failure.
    """
    result = verify_admin_request(db, authorization)
    return JSONResponse(status_code=result.status_code, content=result_to_body(result))
