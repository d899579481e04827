"""Pydantic request/response schemas."""

from versex.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from versex.schemas.devices import (
    DeviceQueryResponse,
    DeviceResponse,
    DeviceStateRequest,
    NewDeviceRequest,
    UpdateDeviceRequest,
)
from versex.schemas.health import HealthResponse
from versex.schemas.logs import LogQueryResponse, LogResponse
from versex.schemas.roles import RoleQueryResponse, RoleResponse
from versex.schemas.users import (
    NewUserRequest,
    UpdateUserRequest,
    UserPasswordChangeRequest,
    UserQueryResponse,
    UserResponse,
)

__all__ = [
    "CurrentUser",
    "DeviceQueryResponse",
    "DeviceResponse",
    "DeviceStateRequest",
    "HealthResponse",
    "LoginRequest",
    "LogQueryResponse",
    "LogResponse",
    "NewDeviceRequest",
    "NewUserRequest",
    "RoleQueryResponse",
    "RoleResponse",
    "TokenResponse",
    "UpdateDeviceRequest",
    "UpdateUserRequest",
    "UserPasswordChangeRequest",
    "UserQueryResponse",
    "UserResponse",
]
