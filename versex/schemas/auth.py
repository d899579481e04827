"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=8, max_length=128, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class CurrentUser(BaseModel):
    """Authenticated user (id, username, primary role, all roles) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
    roles: list[str] = Field(default_factory=list)

    @property
    def is_admin(self) -> bool:
        return self.role == "Admin" or "Admin" in self.roles
