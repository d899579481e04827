"""SQLAlchemy ORM models."""

from versex.models.base import Base
from versex.models.device import Device, DeviceKind
from versex.models.log import Log
from versex.models.role import Role, RoleName
from versex.models.user import User, user_roles

__all__ = ["Base", "Device", "DeviceKind", "Log", "Role", "RoleName", "User", "user_roles"]
