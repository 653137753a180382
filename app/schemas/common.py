"""
Schemas shared by the admin resources
"""
from typing import List
from pydantic import BaseModel

from app.models.activity import ActivityStatus


class StatusOptionsOut(BaseModel):
    """The statuses an operator may choose from for a resource"""
    resource: str
    statuses: List[str]


class ActivityStatusUpdate(BaseModel):
    status: ActivityStatus
