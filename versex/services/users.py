"""User management: create, read, update, delete and password change, each recorded in the activity log."""

import logging

from sqlalchemy.orm import Session

from versex.core.security import generate_salt, hash_password
from versex.models import Role, RoleName, User
from versex.schemas.users import NewUserRequest, UpdateUserRequest, UserPasswordChangeRequest
from versex.services.activity_log import commit_or_raise, record_activity
from versex.services.errors import ServiceError, parse_id
from versex.services.roles import get_requested_roles, get_role_by_name, primary_role

logger = logging.getLogger(__name__)

INVALID_USER_ID_MESSAGE = "Invalid UserId provided. Can not be parsed into INTEGER!"
NO_SUCH_USER_MESSAGE = "No such user in database!"


def get_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_string_id(db: Session, raw_id: str) -> User:
    """Resolve a path id to a User, recording an activity entry when it does not exist."""
    user_id = parse_id(raw_id, INVALID_USER_ID_MESSAGE)
    user = get_by_id(db, user_id)
    if user is None:
        record_activity(db, NO_SUCH_USER_MESSAGE)
        raise ServiceError(NO_SUCH_USER_MESSAGE)
    return user


def get_all_users(db: Session) -> list[User]:
    """Return every user; records an activity entry only when there is something to return."""
    users = db.query(User).order_by(User.id).all()
    if users:
        record_activity(db, "Get all users from the database!")
    return users


def _resolve_roles(db: Session, requested: list[str] | None) -> tuple[list[Role], Role]:
    roles = get_requested_roles(db, requested)
    if not roles:
        roles = [get_role_by_name(db, RoleName.USER)]
    return roles, primary_role(db, roles)


def create_user(db: Session, req: NewUserRequest) -> User:
    roles, primary = _resolve_roles(db, req.roles)

    salt = generate_salt()
    user = User(
        username=req.username,
        email=req.email,
        first_name=req.first_name,
        last_name=req.last_name,
        password_salt=salt,
        password_hash=hash_password(req.password, salt),
        role_id=primary.id,
    )
    user.roles = roles
    db.add(user)
    commit_or_raise(db)

    record_activity(
        db,
        f"Create a new user {user.first_name} {user.last_name} and saves the user in the database!",
    )
    logger.info("User created", extra={"user_id": user.id, "role_id": user.role_id})
    return user


def update_user(db: Session, raw_id: str, req: UpdateUserRequest) -> User:
    user = get_user_by_string_id(db, raw_id)
    roles, primary = _resolve_roles(db, req.roles)

    user.username = req.username
    user.email = req.email
    user.first_name = req.first_name
    user.last_name = req.last_name
    user.role_id = primary.id

    # Add requested roles that are missing, then drop assigned roles that were not requested.
    for role in roles:
        if role not in user.roles:
            user.roles.append(role)
    for role in list(user.roles):
        if role not in roles:
            user.roles.remove(role)

    commit_or_raise(db)

    record_activity(
        db,
        f"Update user {user.first_name} {user.last_name} and saves the updated user in the database!",
    )
    return user


def delete_user(db: Session, raw_id: str) -> None:
    user = get_user_by_string_id(db, raw_id)
    first_name, last_name = user.first_name, user.last_name

    db.delete(user)
    commit_or_raise(db)

    record_activity(db, f"Delete user {first_name} {last_name} from the database!")


def change_user_password(db: Session, raw_id: str, req: UserPasswordChangeRequest) -> None:
    """Store a fresh salt and the salted hash of the new password."""
    user = get_user_by_string_id(db, raw_id)

    salt = generate_salt()
    user.password_salt = salt
    user.password_hash = hash_password(req.password, salt)
    commit_or_raise(db)

    record_activity(
        db,
        f"Change password from user {user.first_name} {user.last_name} "
        "and saves the updated password in the database!",
    )
