"""ORM model for controllable home-automation devices."""

import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Float, Integer, String, func

from versex.models.base import Base


class DeviceKind(str, enum.Enum):
    LIGHT = "light"
    SWITCH = "switch"
    SENSOR = "sensor"


class Device(Base):
    """
    A device shown on the dashboard.

    luminance is only meaningful for lights; it stays at its default for other kinds.
    """

    __tablename__ = "devices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    kind = Column(
        Enum(DeviceKind, name="device_kind", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    room = Column(String(255), nullable=True)
    is_on = Column(Boolean, nullable=False, default=False)
    luminance = Column(Float, nullable=False, default=0.5)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
