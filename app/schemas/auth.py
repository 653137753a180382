"""
Authentication schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator

from app.core.security import validate_password


class SignupRequest(BaseModel):
    """Signup request schema"""
    email: EmailStr = Field(..., description="Account email")
    password: str = Field(..., description="Password (min 6 characters)")
    full_name: Optional[str] = Field(None, max_length=100, description="Full name")
    phone: Optional[str] = Field(None, max_length=20, description="Phone number")

    @field_validator("password")
    @classmethod
    def _check_password(cls, v: str) -> str:
        return validate_password(v)


class LoginRequest(BaseModel):
    """Login request schema"""
    email: str = Field(..., description="Account email")
    password: str = Field(..., description="Password")


class TokenResponse(BaseModel):
    """Token response schema"""
    access_token: str
    token_type: str = "bearer"


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile"""
    full_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=500)


class ProfileOut(BaseModel):
    id: int
    email: str
    full_name: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
