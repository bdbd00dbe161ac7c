"""Response shapes shared by the access queries."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel

from backoffice.domain.access.model.role import Menu, Role
from backoffice.domain.access.model.tree import TreeNode
from backoffice.domain.access.model.value import MenuAuthority, MenuType


class RoleSummary(BaseModel):
    id: int
    name: str
    parent_id: int | None
    display_order: int
    available: bool

    @classmethod
    def from_role(cls, role: Role) -> RoleSummary:
        return cls(
            id=role.id.root,
            name=role.name,
            parent_id=role.parent_id.root if role.parent_id is not None else None,
            display_order=role.display_order,
            available=role.available,
        )


class RoleNode(RoleSummary):
    children: list[RoleNode] = []


class MenuAuthorityItem(BaseModel):
    authority: str
    types: list[str]
    display_order: int

    @classmethod
    def from_authority(cls, item: MenuAuthority) -> MenuAuthorityItem:
        return cls(
            authority=item.authority,
            types=list(item.types),
            display_order=item.display_order,
        )


class MenuNode(BaseModel):
    id: int
    name: str
    type: MenuType
    parent_id: int | None
    display_order: int
    url: str | None
    icon: str | None
    authority_items: list[MenuAuthorityItem] = []
    children: list[MenuNode] = []


def role_nodes(forest: Sequence[TreeNode[Role]]) -> list[RoleNode]:
    return [
        RoleNode(
            **RoleSummary.from_role(t.node).model_dump(),
            children=role_nodes(t.children),
        )
        for t in forest
    ]


def menu_nodes(forest: Sequence[TreeNode[Menu]]) -> list[MenuNode]:
    return [
        MenuNode(
            id=t.node.id.root,
            name=t.node.name,
            type=t.node.type,
            parent_id=t.node.parent_id.root if t.node.parent_id is not None else None,
            display_order=t.node.display_order,
            url=t.node.url,
            icon=t.node.icon,
            authority_items=[
                MenuAuthorityItem.from_authority(a)
                for a in sorted(t.node.authority_items, key=lambda a: a.display_order)
            ],
            children=menu_nodes(t.children),
        )
        for t in forest
    ]
