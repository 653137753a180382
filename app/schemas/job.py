"""
Job posting and application schemas
"""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, EmailStr, Field, HttpUrl, ConfigDict, field_validator

from app.models.job import ApplicationStatus


class JobPostingBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    department: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=100)
    type: str = Field(default="Full-time", max_length=50)
    description: str = Field(..., min_length=1)
    requirements: str = Field(..., min_length=1)
    responsibilities: str = Field(..., min_length=1)
    salary_range: Optional[str] = Field(None, max_length=100)
    is_active: bool = True


class JobPostingCreate(JobPostingBase):
    """Schema for creating a job posting"""


class JobPostingUpdate(BaseModel):
    """Schema for updating a job posting"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    department: Optional[str] = Field(None, min_length=1, max_length=100)
    location: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    requirements: Optional[str] = None
    responsibilities: Optional[str] = None
    salary_range: Optional[str] = Field(None, max_length=100)


class JobPostingOut(JobPostingBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class JobPostingListResponse(BaseModel):
    items: List[JobPostingOut]
    total: int


class JobApplicationCreate(BaseModel):
    """Schema for applying to a job posting"""
    job_posting_id: int
    full_name: str = Field(..., min_length=2, max_length=100, description="Name must be at least 2 characters")
    email: EmailStr
    phone: str = Field(..., min_length=10, max_length=20, description="Phone number must be at least 10 digits")
    resume_url: str = Field(..., min_length=1, description="Location of the uploaded resume")
    portfolio_url: Optional[HttpUrl] = None
    cover_letter: Optional[str] = Field(None, max_length=2000, description="Cover letter must be less than 2000 characters")

    @field_validator("portfolio_url", mode="before")
    @classmethod
    def _blank_url_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class JobApplicationOut(BaseModel):
    id: int
    job_posting_id: int
    user_id: Optional[int]
    full_name: str
    email: str
    phone: str
    resume_url: str
    portfolio_url: Optional[str]
    cover_letter: Optional[str]
    status: ApplicationStatus
    created_at: datetime
    job_title: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class JobApplicationListResponse(BaseModel):
    items: List[JobApplicationOut]
    total: int


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus
