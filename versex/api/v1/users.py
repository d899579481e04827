"""User management endpoints (admin only, except a user changing their own password)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from versex.api.v1.auth import get_current_user, require_admin
from versex.core.database import get_db
from versex.schemas.auth import CurrentUser
from versex.schemas.users import (
    NewUserRequest,
    UpdateUserRequest,
    UserPasswordChangeRequest,
    UserQueryResponse,
    UserResponse,
)
from versex.services import users as user_service
from versex.services.errors import ServiceError, parse_id, to_http_exception

router = APIRouter()


@router.get(
    "",
    response_model=UserQueryResponse,
    responses={204: {"description": "No users in the database"}},
)
def get_all_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserQueryResponse | Response:
    """List all users. Returns 204 when there are none."""
    try:
        users = user_service.get_all_users(db)
    except ServiceError as e:
        raise to_http_exception(e) from e
    if not users:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return UserQueryResponse(users=[UserResponse.from_user(u) for u in users])


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    try:
        user = user_service.get_user_by_string_id(db, user_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return UserResponse.from_user(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: NewUserRequest,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """
    Create a user with a salted password hash.

    roles lists role names (Admin, User); an unknown name is rejected with 400.
    Duplicate username or email is rejected with 400 and the database message.
    """
    try:
        user = user_service.create_user(db, body)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return UserResponse.from_user(user)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    body: UpdateUserRequest,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Replace the user's fields; assigned roles are synchronized with the requested list."""
    try:
        user = user_service.update_user(db, user_id, body)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return UserResponse.from_user(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: str,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    try:
        user_service.delete_user(db, user_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{user_id}/password", status_code=status.HTTP_204_NO_CONTENT)
def change_user_password(
    user_id: str,
    body: UserPasswordChangeRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Change a password. Admins may change any password; other users only their own."""
    if not current_user.is_admin:
        try:
            target_id = parse_id(user_id, user_service.INVALID_USER_ID_MESSAGE)
        except ServiceError as e:
            raise to_http_exception(e) from e
        if target_id != current_user.id:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin access required",
            )
    try:
        user_service.change_user_password(db, user_id, body)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
