"""Access service: which roles and menus a caller may see."""

import logging

from backoffice.domain.access.model.grant import RoleMenuGrant
from backoffice.domain.access.model.role import Menu, Role
from backoffice.domain.access.model.tree import TreeNode, build_tree, find_subtree, flatten
from backoffice.domain.access.model.value import MenuId
from backoffice.domain.access.model.visibility import resolve_visible_menus
from backoffice.domain.access.port.repository import (
    MenuRepository,
    RoleMenuGrantRepository,
    RoleRepository,
)
from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.shared.service import Service

logger = logging.getLogger(__name__)


class AccessService(Service):
    """Loads flat role/menu records and resolves the caller's view of them.

    - visible_menus: menu forest, full for superadmins, grant-pruned otherwise
    - role_tree: full role forest for superadmins, the caller's own subtree otherwise
    - role_selections: role_tree flattened in pre-order
    - my_role: the caller's role and its granted menu ids
    """

    _role_repo: RoleRepository
    _menu_repo: MenuRepository
    _grant_repo: RoleMenuGrantRepository

    async def visible_menus(self, caller: CallerContext) -> list[TreeNode[Menu]]:
        menus = await self._menu_repo.list_all()
        grants = await self._grants_of(caller)
        forest = resolve_visible_menus(caller, menus, grants)
        logger.debug(
            "Menus resolved: admin_id=%s, role_id=%s, super_admin=%s, roots=%d",
            caller.admin_id,
            caller.role_id,
            caller.is_super_admin,
            len(forest),
        )
        return forest

    async def role_tree(self, caller: CallerContext) -> list[TreeNode[Role]]:
        forest = build_tree(await self._role_repo.list_all())
        if caller.is_super_admin:
            return forest

        own = find_subtree(forest, caller.role_id)
        if own is None or not own.node.available:
            return []
        return [own]

    async def role_selections(self, caller: CallerContext) -> list[Role]:
        return flatten(await self.role_tree(caller))

    async def my_role(self, caller: CallerContext) -> tuple[Role | None, list[MenuId]]:
        """The caller's role record and sorted granted menu ids.

        Superadmins are granted every menu, whether or not they carry a role.
        """
        role = await self._role_repo.get(caller.role_id) if caller.role_id is not None else None
        if caller.is_super_admin:
            menu_ids = [m.id for m in await self._menu_repo.list_all()]
        else:
            menu_ids = [g.menu_id for g in await self._grants_of(caller)]
        return role, sorted(set(menu_ids))

    async def _grants_of(self, caller: CallerContext) -> list[RoleMenuGrant]:
        if caller.is_super_admin or caller.role_id is None:
            return []
        return await self._grant_repo.list_by_role(caller.role_id)
