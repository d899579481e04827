"""Request/response schemas for devices and their state."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from versex.models.device import DeviceKind

# Luminance slider bounds used by the dashboard light control.
LUMINANCE_MIN = 0.0
LUMINANCE_MAX = 1.0
LUMINANCE_STEP = 0.1
LUMINANCE_DEFAULT = LUMINANCE_MAX / 2


def snap_luminance(value: float) -> float:
    """
    Round value to the nearest slider step, clamped to [LUMINANCE_MIN, LUMINANCE_MAX].

    Halfway values round up (0.25 -> 0.3), matching the dashboard slider.
    """
    step = Decimal(str(LUMINANCE_STEP))
    steps = ((Decimal(str(value)) - Decimal(str(LUMINANCE_MIN))) / step).quantize(
        Decimal(1), rounding=ROUND_HALF_UP
    )
    snapped = float(Decimal(str(LUMINANCE_MIN)) + steps * step)
    return min(max(snapped, LUMINANCE_MIN), LUMINANCE_MAX)


class _DeviceFields(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    kind: DeviceKind
    room: str | None = Field(default=None, max_length=255)


class NewDeviceRequest(_DeviceFields):
    """Body for POST /devices."""

    is_on: bool = False
    luminance: float = Field(default=LUMINANCE_DEFAULT, ge=LUMINANCE_MIN, le=LUMINANCE_MAX)

    @field_validator("luminance")
    @classmethod
    def snap(cls, v: float) -> float:
        return snap_luminance(v)


class UpdateDeviceRequest(_DeviceFields):
    """Body for PUT /devices/{id}: name, kind and room."""


class DeviceStateRequest(BaseModel):
    """Body for PUT /devices/{id}/state. Omitted fields are left unchanged."""

    is_on: bool | None = None
    luminance: float | None = Field(default=None, ge=LUMINANCE_MIN, le=LUMINANCE_MAX)

    @field_validator("luminance")
    @classmethod
    def snap(cls, v: float | None) -> float | None:
        return None if v is None else snap_luminance(v)


class DeviceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    kind: DeviceKind
    room: str | None
    is_on: bool
    luminance: float
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DeviceQueryResponse(BaseModel):
    devices: list[DeviceResponse]
