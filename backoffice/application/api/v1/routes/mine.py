"""Routes acting on the signed-in admin ("mine")."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from backoffice.domain.access.query.get_my_menus import GetMyMenus, GetMyMenusHandler, MenuTree
from backoffice.domain.access.query.get_my_role import GetMyRole, GetMyRoleHandler, MyRole
from backoffice.domain.access.query.get_my_role_selections import (
    GetMyRoleSelections,
    GetMyRoleSelectionsHandler,
    RoleSelections,
)
from backoffice.domain.access.query.get_my_roles import GetMyRoles, GetMyRolesHandler, RoleTree
from backoffice.domain.profile.command.change_password import (
    ChangePassword,
    ChangePasswordHandler,
)
from backoffice.domain.profile.command.edit_profile import EditProfile, EditProfileHandler
from backoffice.domain.profile.command.upsert_config import (
    ConfigResult,
    UpsertConfig,
    UpsertConfigHandler,
)
from backoffice.domain.profile.command.verify_password import (
    VerifyPassword,
    VerifyPasswordHandler,
    VerifyPasswordResult,
)
from backoffice.domain.profile.model.profile import AdminProfile
from backoffice.domain.profile.query.get_my_config import GetMyConfig, GetMyConfigHandler, MyConfig
from backoffice.domain.profile.query.get_my_info import GetMyInfo, GetMyInfoHandler

router = APIRouter(prefix="/mine", tags=["Mine"], route_class=DishkaRoute)


class EditProfileRequest(BaseModel):
    """Request body for renaming; `password` re-confirms the caller."""

    name: str
    password: str


class ChangePasswordRequest(BaseModel):
    old_password: str
    new_password: str


class VerifyPasswordRequest(BaseModel):
    password: str


class UpsertConfigRequest(BaseModel):
    settings: dict[str, Any]


# =============================================================================
# Profile
# =============================================================================


@router.get("", response_model=AdminProfile)
async def get_my_info(handler: FromDishka[GetMyInfoHandler]) -> AdminProfile:
    result = await handler.run(GetMyInfo())
    return result.profile


@router.patch("", response_model=AdminProfile)
async def edit_profile(
    body: EditProfileRequest,
    handler: FromDishka[EditProfileHandler],
) -> AdminProfile:
    result = await handler.run(EditProfile(name=body.name, password=body.password))
    return result.profile


@router.patch("/password", status_code=204)
async def change_password(
    body: ChangePasswordRequest,
    handler: FromDishka[ChangePasswordHandler],
) -> Response:
    await handler.run(
        ChangePassword(old_password=body.old_password, new_password=body.new_password)
    )
    return Response(status_code=204)


@router.post("/verify-password", response_model=VerifyPasswordResult)
async def verify_password(
    body: VerifyPasswordRequest,
    handler: FromDishka[VerifyPasswordHandler],
) -> VerifyPasswordResult:
    """Succeeds with `verified: true`; a wrong password is a 400 `password_mismatch`."""
    return await handler.run(VerifyPassword(password=body.password))


# =============================================================================
# Config
# =============================================================================


@router.get("/config", response_model=MyConfig)
async def get_my_config(handler: FromDishka[GetMyConfigHandler]) -> MyConfig:
    return await handler.run(GetMyConfig())


@router.post("/config", response_model=ConfigResult)
async def upsert_my_config(
    body: UpsertConfigRequest,
    handler: FromDishka[UpsertConfigHandler],
) -> ConfigResult:
    return await handler.run(UpsertConfig(settings=body.settings))


# =============================================================================
# Roles and menus
# =============================================================================


@router.get("/role", response_model=MyRole)
async def get_my_role(handler: FromDishka[GetMyRoleHandler]) -> MyRole:
    return await handler.run(GetMyRole())


@router.get("/roles", response_model=RoleTree)
async def get_my_roles(handler: FromDishka[GetMyRolesHandler]) -> RoleTree:
    return await handler.run(GetMyRoles())


@router.get("/roles/selections", response_model=RoleSelections)
async def get_my_role_selections(
    handler: FromDishka[GetMyRoleSelectionsHandler],
) -> RoleSelections:
    return await handler.run(GetMyRoleSelections())


@router.get("/menus", response_model=MenuTree)
async def get_my_menus(handler: FromDishka[GetMyMenusHandler]) -> MenuTree:
    return await handler.run(GetMyMenus())
