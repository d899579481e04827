"""ORM model for roles used in role-based access control."""

import enum

from sqlalchemy import Column, Enum, Integer

from versex.models.base import Base


class RoleName(str, enum.Enum):
    """Role names known to the dashboard."""

    ADMIN = "Admin"
    USER = "User"


class Role(Base):
    """A named role; rows are seeded by the initial migration."""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(
        Enum(RoleName, name="role_name", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        unique=True,
    )
