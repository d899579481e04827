"""Activity log endpoint backing the dashboard terminal."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from versex.api.v1.auth import get_current_user
from versex.core.database import get_db
from versex.schemas.auth import CurrentUser
from versex.schemas.logs import LogQueryResponse, LogResponse
from versex.services.activity_log import MAX_LOGS_PER_REQUEST, list_logs

router = APIRouter()


@router.get(
    "",
    response_model=LogQueryResponse,
    responses={204: {"description": "No log entries"}},
)
def get_all_logs(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    limit: Annotated[int | None, Query(ge=1, le=MAX_LOGS_PER_REQUEST)] = None,
) -> LogQueryResponse | Response:
    """Return activity entries oldest first; with limit, only the newest N. 204 when empty."""
    logs = list_logs(db, limit=limit)
    if not logs:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return LogQueryResponse(logs=[LogResponse.model_validate(entry) for entry in logs])
