"""Device endpoints: inventory management (admin) and state control (any signed-in user)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from versex.api.v1.auth import get_current_user, require_admin
from versex.core.database import get_db
from versex.schemas.auth import CurrentUser
from versex.schemas.devices import (
    DeviceQueryResponse,
    DeviceResponse,
    DeviceStateRequest,
    NewDeviceRequest,
    UpdateDeviceRequest,
)
from versex.services import devices as device_service
from versex.services.errors import ServiceError, to_http_exception

router = APIRouter()


@router.get(
    "",
    response_model=DeviceQueryResponse,
    responses={204: {"description": "No devices in the database"}},
)
def get_all_devices(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> DeviceQueryResponse | Response:
    devices = device_service.get_all_devices(db)
    if not devices:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return DeviceQueryResponse(devices=[DeviceResponse.model_validate(d) for d in devices])


@router.get("/{device_id}", response_model=DeviceResponse)
def get_device(
    device_id: str,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> DeviceResponse:
    try:
        device = device_service.get_device_by_string_id(db, device_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return DeviceResponse.model_validate(device)


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
def create_device(
    body: NewDeviceRequest,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> DeviceResponse:
    try:
        device = device_service.create_device(db, body)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return DeviceResponse.model_validate(device)


@router.put("/{device_id}", response_model=DeviceResponse)
def update_device(
    device_id: str,
    body: UpdateDeviceRequest,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> DeviceResponse:
    try:
        device = device_service.update_device(db, device_id, body)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return DeviceResponse.model_validate(device)


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_device(
    device_id: str,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    try:
        device_service.delete_device(db, device_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{device_id}/state", response_model=DeviceResponse)
def set_device_state(
    device_id: str,
    body: DeviceStateRequest,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> DeviceResponse:
    """
    Switch a device on or off and set a light's luminance.

    Luminance must lie in [0.0, 1.0] and is snapped to steps of 0.1; setting it
    on anything other than a light is rejected with 400.
    """
    try:
        device = device_service.set_device_state(db, device_id, body)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return DeviceResponse.model_validate(device)
