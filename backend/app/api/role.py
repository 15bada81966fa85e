"""Admin / employee mode switch."""

from fastapi import APIRouter, Depends

from backend.app.dependencies.stores import get_role_store
from backend.app.schemas.role import RoleRead, RoleUpdate
from backend.app.services.roles import RoleStore

router = APIRouter(prefix="/role", tags=["role"])


@router.get("", response_model=RoleRead)
async def get_role(roles: RoleStore = Depends(get_role_store)):
    return RoleRead(role=roles.get())


@router.put("", response_model=RoleRead)
async def update_role(payload: RoleUpdate, roles: RoleStore = Depends(get_role_store)):
    roles.set(payload.role)
    return RoleRead(role=roles.get())
