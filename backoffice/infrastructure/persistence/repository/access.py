"""SQL repository implementations for access domain."""

from collections import defaultdict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.domain.access.model.grant import RoleMenuGrant
from backoffice.domain.access.model.role import Menu, Role
from backoffice.domain.access.model.value import MenuAuthority, MenuId, MenuType, RoleId
from backoffice.domain.access.port.repository import (
    MenuRepository,
    RoleMenuGrantRepository,
    RoleRepository,
)
from backoffice.infrastructure.persistence.tables import (
    authority_items_table,
    menus_table,
    role_menus_table,
    roles_table,
)


def _row_to_role(row: dict) -> Role:
    return Role(
        id=RoleId(row["id"]),
        name=row["name"],
        parent_id=RoleId(row["parent_id"]) if row["parent_id"] is not None else None,
        display_order=row["display_order"],
        available=row["available"],
    )


def _row_to_menu(row: dict, authority_items: list[MenuAuthority]) -> Menu:
    return Menu(
        id=MenuId(row["id"]),
        name=row["name"],
        type=MenuType(row["type"]),
        parent_id=MenuId(row["parent_id"]) if row["parent_id"] is not None else None,
        display_order=row["display_order"],
        url=row["url"],
        icon=row["icon"],
        authority_items=authority_items,
    )


class PostgresRoleRepository(RoleRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, role_id: RoleId) -> Role | None:
        stmt = select(roles_table).where(roles_table.c.id == role_id.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_role(dict(row)) if row else None

    async def list_all(self) -> list[Role]:
        result = await self.session.execute(select(roles_table))
        return [_row_to_role(dict(row)) for row in result.mappings().all()]


class PostgresMenuRepository(MenuRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> list[Menu]:
        items = await self._authority_items_by_menu()
        result = await self.session.execute(select(menus_table))
        return [
            _row_to_menu(dict(row), items.get(row["id"], []))
            for row in result.mappings().all()
        ]

    async def _authority_items_by_menu(self) -> dict[int, list[MenuAuthority]]:
        stmt = select(authority_items_table).order_by(
            authority_items_table.c.menu_id,
            authority_items_table.c.display_order,
            authority_items_table.c.id,
        )
        result = await self.session.execute(stmt)
        items: dict[int, list[MenuAuthority]] = defaultdict(list)
        for row in result.mappings().all():
            items[row["menu_id"]].append(
                MenuAuthority(
                    authority=row["authority"],
                    types=tuple(row["types"] or ()),
                    display_order=row["display_order"],
                )
            )
        return items


class PostgresRoleMenuGrantRepository(RoleMenuGrantRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_by_role(self, role_id: RoleId) -> list[RoleMenuGrant]:
        stmt = select(role_menus_table).where(role_menus_table.c.role_id == role_id.root)
        result = await self.session.execute(stmt)
        return [
            RoleMenuGrant(role_id=RoleId(row["role_id"]), menu_id=MenuId(row["menu_id"]))
            for row in result.mappings().all()
        ]
