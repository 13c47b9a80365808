"""
Authentication router — signup and login endpoints.

These are the only public endpoints of the /api family. Everything else
under /api requires a valid JWT token.

Endpoints:
  POST /api/auth/signup  — Register a new user and get a token
  POST /api/auth/login   — Authenticate and get a token

Security audit notes:
  - Plaintext passwords exist only in memory during request processing;
    they are hashed before anything is written and never logged.
  - JWT tokens appear only in response bodies, which are not logged by
    uvicorn (it logs method, path, and status code only).
  - No request body logging middleware is installed, so POST bodies
    containing passwords are not written to any log file.
"""

from fastapi import APIRouter, Depends, status

from app.models.user import User
from app.schemas.auth import (
    UserSignupRequest,
    UserLoginRequest,
    UserResponse,
    AuthResponse,
)
from app.services import auth_service
from app.storage import RecordStore, get_user_store

router = APIRouter()


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def signup(
    request: UserSignupRequest,
    users: RecordStore[User] = Depends(get_user_store),
):
    """
    Register a new user and log them in.

    - **name**: 2-100 characters
    - **email**: Must be a valid email and not already registered (any case)
    - **password**: Minimum 6 characters
    """
    user, token = await auth_service.signup(
        store=users,
        name=request.name,
        email=request.email,
        password=request.password,
    )

    return AuthResponse(
        message="User created successfully",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Authenticate and get a token",
)
async def login(
    request: UserLoginRequest,
    users: RecordStore[User] = Depends(get_user_store),
):
    """
    Authenticate with email and password.

    Returns a JWT bearer token that must be included in the Authorization
    header for all subsequent /api/developers requests:

        Authorization: Bearer <token>

    The token expires after ACCESS_TOKEN_EXPIRE_DAYS (default: 7).
    """
    user, token = await auth_service.login(
        store=users,
        email=request.email,
        password=request.password,
    )

    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserResponse.model_validate(user),
    )
