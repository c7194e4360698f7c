"""Pydantic schemas for authentication and user endpoints."""
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class AuthCredentials(BaseModel):
    """Email and password used by both signup and signin."""

    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """Reject passwords bcrypt would silently truncate."""
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class AccessTokenResponse(BaseModel):
    """Bearer token returned after signup or signin."""

    access_token: str
    token_type: str = "bearer"


class UserUpdate(BaseModel):
    """Schema for partially updating the current user's profile."""

    email: EmailStr | None = None
    # The unseparated spellings are also accepted from older clients
    first_name: str | None = Field(
        default=None,
        max_length=255,
        validation_alias=AliasChoices("first_name", "firstname"),
    )
    last_name: str | None = Field(
        default=None,
        max_length=255,
        validation_alias=AliasChoices("last_name", "lastname"),
    )

    @field_validator("email")
    @classmethod
    def reject_null_email(cls, v: str | None) -> str | None:
        """Email may be omitted but not cleared."""
        if v is None:
            raise ValueError("email cannot be null")
        return v


class UserResponse(BaseModel):
    """Response model for user info. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime
