"""Menu visibility strategies and the permission resolver."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from backoffice.domain.access.model.grant import RoleMenuGrant, granted_menu_ids
from backoffice.domain.access.model.role import Menu
from backoffice.domain.access.model.tree import TreeNode, build_tree, prune
from backoffice.domain.access.model.value import MenuId
from backoffice.domain.auth.model.caller import CallerContext


@dataclass(frozen=True)
class Unrestricted:
    """Superadmin view: every menu."""

    def apply(self, forest: Sequence[TreeNode[Menu]]) -> list[TreeNode[Menu]]:
        return list(forest)


@dataclass(frozen=True)
class GrantFiltered:
    """Only granted menus, plus the ancestors needed to reach them."""

    granted_ids: frozenset[MenuId]

    def apply(self, forest: Sequence[TreeNode[Menu]]) -> list[TreeNode[Menu]]:
        if not self.granted_ids:
            return []
        return prune(forest, self.granted_ids)


MenuVisibility = Unrestricted | GrantFiltered


def visibility_for(caller: CallerContext, grants: Iterable[RoleMenuGrant]) -> MenuVisibility:
    """Pick the strategy for a caller. Grants of roles other than the caller's are ignored."""
    if caller.is_super_admin:
        return Unrestricted()
    return GrantFiltered(granted_ids=granted_menu_ids(grants, caller.role_id))


def resolve_visible_menus(
    caller: CallerContext,
    all_menus: Iterable[Menu],
    grants: Iterable[RoleMenuGrant],
) -> list[TreeNode[Menu]]:
    """Build the menu forest the caller may see.

    A role without grants, or one that does not exist, sees an empty forest.
    """
    return visibility_for(caller, grants).apply(build_tree(all_menus))
