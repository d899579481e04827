"""Device management and state control (power, luminance)."""

import logging

from sqlalchemy.orm import Session

from versex.models import Device, DeviceKind
from versex.schemas.devices import (
    LUMINANCE_DEFAULT,
    DeviceStateRequest,
    NewDeviceRequest,
    UpdateDeviceRequest,
)
from versex.services.activity_log import commit_or_raise, record_activity
from versex.services.errors import ServiceError, parse_id

logger = logging.getLogger(__name__)

INVALID_DEVICE_ID_MESSAGE = "Invalid DeviceId provided. Can not be parsed into INTEGER!"
NO_SUCH_DEVICE_MESSAGE = "No such device in database!"
LUMINANCE_NOT_SUPPORTED_MESSAGE = "Luminance can only be set on light devices!"


def get_device_by_string_id(db: Session, raw_id: str) -> Device:
    device_id = parse_id(raw_id, INVALID_DEVICE_ID_MESSAGE)
    device = db.query(Device).filter(Device.id == device_id).first()
    if device is None:
        record_activity(db, NO_SUCH_DEVICE_MESSAGE)
        raise ServiceError(NO_SUCH_DEVICE_MESSAGE)
    return device


def get_all_devices(db: Session) -> list[Device]:
    return db.query(Device).order_by(Device.id).all()


def create_device(db: Session, req: NewDeviceRequest) -> Device:
    """Create a device; only lights may be given a luminance, others keep the default."""
    is_light = req.kind == DeviceKind.LIGHT
    if not is_light and "luminance" in req.model_fields_set:
        raise ServiceError(LUMINANCE_NOT_SUPPORTED_MESSAGE)

    device = Device(
        name=req.name,
        kind=req.kind,
        room=req.room,
        is_on=req.is_on,
        luminance=req.luminance if is_light else LUMINANCE_DEFAULT,
    )
    db.add(device)
    commit_or_raise(db)

    record_activity(db, f"Create a new {device.kind.value} device {device.name} and saves it in the database!")
    return device


def update_device(db: Session, raw_id: str, req: UpdateDeviceRequest) -> Device:
    device = get_device_by_string_id(db, raw_id)
    device.name = req.name
    device.kind = req.kind
    device.room = req.room
    if req.kind != DeviceKind.LIGHT:
        device.luminance = LUMINANCE_DEFAULT
    commit_or_raise(db)

    record_activity(db, f"Update device {device.name} and saves the updated device in the database!")
    return device


def delete_device(db: Session, raw_id: str) -> None:
    device = get_device_by_string_id(db, raw_id)
    name = device.name

    db.delete(device)
    commit_or_raise(db)

    record_activity(db, f"Delete device {name} from the database!")


def set_device_state(db: Session, raw_id: str, req: DeviceStateRequest) -> Device:
    """Switch a device on/off and, for lights, set its luminance."""
    device = get_device_by_string_id(db, raw_id)

    if req.luminance is not None and device.kind != DeviceKind.LIGHT:
        raise ServiceError(LUMINANCE_NOT_SUPPORTED_MESSAGE)

    changes: list[str] = []
    if req.is_on is not None and req.is_on != device.is_on:
        device.is_on = req.is_on
        changes.append("on" if req.is_on else "off")
    if req.luminance is not None and req.luminance != device.luminance:
        device.luminance = req.luminance
        changes.append(f"luminance {req.luminance:.1f}")

    if not changes:
        return device

    commit_or_raise(db)
    record_activity(db, f"Set device {device.name} {', '.join(changes)}!")
    logger.info(
        "Device state changed",
        extra={"device_id": device.id, "is_on": device.is_on, "luminance": device.luminance},
    )
    return device
