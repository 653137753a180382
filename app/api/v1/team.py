"""
Public team endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.schemas.team import TeamListResponse
from app.services.team_service import list_public_members

router = APIRouter()


@router.get("", response_model=TeamListResponse)
async def list_team(db: Session = Depends(get_db)):
    members = list_public_members(db)
    return TeamListResponse(items=members, total=len(members))
