"""SQL repository implementations for profile domain."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.domain.auth.model.value import AdminId
from backoffice.domain.profile.model.config import AdminConfig
from backoffice.domain.profile.port.repository import AdminConfigRepository
from backoffice.infrastructure.persistence.dialect import upsert_insert
from backoffice.infrastructure.persistence.tables import admin_configs_table


def _row_to_config(row: dict) -> AdminConfig:
    return AdminConfig(
        admin_id=AdminId(row["admin_id"]),
        settings=row["settings"] or {},
        updated_at=row["updated_at"],
    )


class PostgresAdminConfigRepository(AdminConfigRepository):
    """SQL implementation of AdminConfigRepository (PostgreSQL or SQLite)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_admin_id(self, admin_id: AdminId) -> AdminConfig | None:
        stmt = select(admin_configs_table).where(admin_configs_table.c.admin_id == admin_id.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_config(dict(row)) if row else None

    async def upsert(self, config: AdminConfig) -> AdminConfig:
        stmt = upsert_insert(self.session, admin_configs_table).values(
            admin_id=config.admin_id.root,
            settings=config.settings,
            updated_at=config.updated_at,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[admin_configs_table.c.admin_id],
            set_={
                "settings": stmt.excluded.settings,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return config
