"""Role and Menu hierarchy records."""

from collections.abc import Hashable
from typing import Protocol

from backoffice.domain.access.model.value import MenuAuthority, MenuId, MenuType, RoleId
from backoffice.domain.shared.model.entity import Entity


class HierarchyNode(Protocol):
    """Anything stored as a flat, parent-referencing record.

    `parent_id` of None marks a root. Siblings are ordered by
    `(display_order, id)`, so ids must be orderable.
    """

    @property
    def id(self) -> Hashable: ...

    @property
    def parent_id(self) -> Hashable | None: ...

    @property
    def display_order(self) -> int: ...


class Role(Entity):
    """A node of the role hierarchy."""

    id: RoleId
    name: str
    parent_id: RoleId | None = None
    display_order: int = 0
    available: bool = True


class Menu(Entity):
    """A node of the navigation menu hierarchy."""

    id: MenuId
    name: str
    type: MenuType = MenuType.PAGE
    parent_id: MenuId | None = None
    display_order: int = 0
    url: str | None = None
    icon: str | None = None
    authority_items: list[MenuAuthority] = []
