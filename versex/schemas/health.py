"""Response schema for GET /health."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """API liveness plus reachability of the users/devices/logs database."""

    status: Literal["ok"] = "ok"
    environment: Literal["dev", "prod"]
    database: Literal["connected", "disconnected"] = Field(
        description="'disconnected' means the dashboard will get 5xx on data endpoints",
    )
