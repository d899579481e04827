"""Response schemas for the activity log."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class LogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    timestamp: datetime
    message: str


class LogQueryResponse(BaseModel):
    """Response for GET /logs; the dashboard terminal reads the logs array."""

    logs: list[LogResponse]
