"""User collection schemas."""

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, EmailStr, Field

from schemas.enums import Role


def _normalize_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


Email = Annotated[EmailStr, BeforeValidator(_normalize_email)]


class RegisterRequest(BaseModel):
    """Account registration payload."""
    email: Email = Field(..., description="Account email", examples=["john.doe@example.com"])
    password: str = Field(
        ..., min_length=8, description="Password, at least 8 characters", examples=["Str0ngP@ssw0rd"]
    )


class LoginRequest(BaseModel):
    """Email/password login payload."""
    email: Email = Field(..., description="Account email", examples=["john.doe@example.com"])
    password: str = Field(
        ..., min_length=1, description="Password", examples=["Str0ngP@ssw0rd"]
    )


class UserResponse(BaseModel):
    """Registered user."""
    id: str
    email: str
    role: Role


class TokenResponse(BaseModel):
    """Issued access token."""
    access_token: str
    token_type: str = "bearer"


class CurrentUser(BaseModel):
    """Authenticated caller resolved from the bearer token."""
    user_id: str = Field(..., serialization_alias="userId")
    email: str
    role: Role = Role.USER
