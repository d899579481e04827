"""Response schemas for roles."""

from pydantic import BaseModel, ConfigDict

from versex.models.role import RoleName


class RoleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: RoleName


class RoleQueryResponse(BaseModel):
    roles: list[RoleResponse]
