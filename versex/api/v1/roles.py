"""Roles endpoint: the role names users can be assigned."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from versex.api.v1.auth import get_current_user
from versex.core.database import get_db
from versex.schemas.auth import CurrentUser
from versex.schemas.roles import RoleQueryResponse, RoleResponse
from versex.services.roles import list_roles

router = APIRouter()


@router.get(
    "",
    response_model=RoleQueryResponse,
    responses={204: {"description": "No roles in the database"}},
)
def get_all_roles(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> RoleQueryResponse | Response:
    roles = list_roles(db)
    if not roles:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return RoleQueryResponse(roles=[RoleResponse.model_validate(r) for r in roles])
