"""
Authentication endpoints
"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.deps import get_db, get_current_user
from app.models.user import User
from app.schemas.auth import (
    LoginRequest,
    ProfileOut,
    ProfileUpdate,
    SignupRequest,
    TokenResponse,
)
from app.services.auth_service import authenticate, issue_token, signup, update_profile

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def signup_endpoint(
    signup_data: SignupRequest,
    db: Session = Depends(get_db)
):
    """Create a customer account and sign it in"""
    user = signup(db, signup_data)
    return TokenResponse(access_token=issue_token(user))


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and return JWT token

    Rejects unknown emails, wrong passwords and inactive accounts.
    """
    user = authenticate(db, login_data.email, login_data.password)
    logger.info(f"User {user.id} signed in")
    return TokenResponse(access_token=issue_token(user))


@router.get("/me", response_model=ProfileOut)
async def get_me(current_user: User = Depends(get_current_user)):
    """Current user's profile"""
    return current_user


@router.patch("/me", response_model=ProfileOut)
async def update_me(
    profile_data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update the current user's profile"""
    return update_profile(db, current_user, profile_data)
