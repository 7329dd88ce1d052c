"""
Authentication Handler

Handles registration, login and the acting user's own account.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Service exceptions
(duplicate account, bad credentials) are turned into JSON errors by the
global exception handlers.
"""

from fastapi import APIRouter, Depends, status

from snipshare.shared.schemas.user import (
    AuthResponse,
    ProfileUpdate,
    ProfileUpdateResponse,
    UserCreate,
    UserEnvelope,
    UserLogin,
    UserResponse,
)
from snipshare.shared.services.auth_service import AuthService
from snipshare.api.dependencies import CurrentUser
from snipshare.api.dependencies.services import get_auth_service


router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Returns:
        AuthResponse with the new user and a bearer token

    Raises:
        409: If the email or username is already taken
    """
    user, token = await auth_service.register_user(
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
    )
    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate by email and password.

    Raises:
        401: If credentials are invalid
    """
    user, token = await auth_service.login_user(
        email=credentials.email,
        password=credentials.password,
    )
    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserEnvelope)
async def get_me(current_user: CurrentUser):
    """The account behind the bearer token."""
    return UserEnvelope(user=UserResponse.model_validate(current_user))


@router.put("/profile", response_model=ProfileUpdateResponse)
async def update_profile(
    data: ProfileUpdate,
    current_user: CurrentUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Update avatar and/or bio of the acting user."""
    user = await auth_service.update_profile(current_user, avatar=data.avatar, bio=data.bio)
    return ProfileUpdateResponse(
        message="Profile updated successfully",
        user=UserResponse.model_validate(user),
    )
