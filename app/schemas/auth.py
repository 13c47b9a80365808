"""
Pydantic schemas for authentication endpoints (signup and login).

These schemas define the request/response contracts for the auth API.
Pydantic validates incoming data automatically — if a required field is
missing or malformed, the request is rejected with a 400 listing every
field error before our code even runs.
"""

from typing import Annotated

from pydantic import BaseModel, EmailStr, Field, StringConstraints


class UserSignupRequest(BaseModel):
    """Request body for POST /api/auth/signup."""
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
    email: EmailStr                                # Validates email format
    password: str = Field(min_length=6)            # Minimum 6 characters


class UserLoginRequest(BaseModel):
    """Request body for POST /api/auth/login."""
    email: EmailStr
    password: str = Field(min_length=1)


class UserResponse(BaseModel):
    """Public representation of a User (never includes the password hash)."""
    id: str
    name: str
    email: str

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    """Response body for successful signup/login — user info + JWT."""
    message: str
    token: str
    user: UserResponse
