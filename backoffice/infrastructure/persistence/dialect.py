"""Dialect-native INSERT constructs for upserts."""

from sqlalchemy import Table
from sqlalchemy.dialects.postgresql import Insert as PgInsert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import Insert as SqliteInsert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.domain.shared.error import ConfigurationError


def upsert_insert(session: AsyncSession, table: Table) -> PgInsert | SqliteInsert:
    """INSERT for `table` supporting ``on_conflict_do_update`` / ``on_conflict_do_nothing``.

    Raises:
        ConfigurationError: The session is bound to a dialect without ON CONFLICT
    """
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return pg_insert(table)
    if dialect == "sqlite":
        return sqlite_insert(table)
    raise ConfigurationError(f"Unsupported database dialect for upsert: {dialect}")
