"""Request/response schemas for user management."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from versex.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)

if TYPE_CHECKING:
    from versex.models.user import User


class _UserFields(BaseModel):
    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    email: EmailStr
    first_name: str = Field(default="", max_length=255)
    last_name: str = Field(default="", max_length=255)
    roles: list[str] | None = Field(
        default=None,
        description="Requested role names (Admin, User). Omitted or empty assigns User.",
    )


class NewUserRequest(_UserFields):
    """Body for POST /users."""

    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)


class UpdateUserRequest(_UserFields):
    """Body for PUT /users/{id}. Replaces every field; the role list is diffed."""


class UserPasswordChangeRequest(BaseModel):
    """Body for PUT /users/{id}/password."""

    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)


class UserResponse(BaseModel):
    """User as returned by the API (no hash, no salt)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    role_id: int
    roles: list[str] = Field(default_factory=list)

    @classmethod
    def from_user(cls, user: "User") -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role_id=user.role_id,
            roles=user.role_names,
        )


class UserQueryResponse(BaseModel):
    """Response for GET /users."""

    users: list[UserResponse]
