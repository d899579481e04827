"""Role lookup and validation of requested role names."""

from sqlalchemy.orm import Session

from versex.models import Role, RoleName
from versex.services.errors import ServiceError

INVALID_ROLE_MESSAGE = "Invalid role requested!"


def list_roles(db: Session) -> list[Role]:
    return db.query(Role).order_by(Role.id).all()


def get_requested_roles(db: Session, requested: list[str] | None) -> list[Role]:
    """
    Resolve requested role names to Role rows.

    Returns an empty list when nothing is requested. Raises ServiceError if any
    name does not match a role in the database.
    """
    if not requested:
        return []
    all_roles = list_roles(db)
    known = {r.name.value: r for r in all_roles}
    if any(name not in known for name in requested):
        raise ServiceError(INVALID_ROLE_MESSAGE)
    return [r for r in all_roles if r.name.value in requested]


def get_role_by_name(db: Session, name: RoleName) -> Role:
    role = db.query(Role).filter(Role.name == name).first()
    if role is None:
        raise ServiceError(f"Role '{name.value}' is missing from the database!")
    return role


def primary_role(db: Session, roles: list[Role]) -> Role:
    """Admin when Admin is among roles, otherwise the User role."""
    for role in roles:
        if role.name == RoleName.ADMIN:
            return role
    for role in roles:
        if role.name == RoleName.USER:
            return role
    return get_role_by_name(db, RoleName.USER)
