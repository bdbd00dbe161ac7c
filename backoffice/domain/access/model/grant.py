"""RoleMenuGrant: explicit permission link between a role and a menu."""

from collections.abc import Iterable
from dataclasses import dataclass

from backoffice.domain.access.model.value import MenuId, RoleId


@dataclass(frozen=True)
class RoleMenuGrant:
    """A role may see a menu. The pair is unique; there is no payload."""

    role_id: RoleId
    menu_id: MenuId


def granted_menu_ids(grants: Iterable[RoleMenuGrant], role_id: RoleId | None) -> frozenset[MenuId]:
    """Menu ids explicitly granted to `role_id`. Grants for other roles are ignored."""
    if role_id is None:
        return frozenset()
    return frozenset(g.menu_id for g in grants if g.role_id == role_id)
