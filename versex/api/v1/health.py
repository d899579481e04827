"""Liveness endpoint the dashboard polls before loading users, devices and logs."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from versex.core.config import get_settings
from versex.core.database import check_db_connected, get_db
from versex.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Report API status, environment and whether the home database answers. No auth required."""
    return HealthResponse(
        environment=get_settings().APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
