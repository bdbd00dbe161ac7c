"""Fixtures for persistence integration tests against in-memory SQLite."""

from datetime import UTC, datetime

import pytest_asyncio
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from backoffice.infrastructure.persistence.tables import (
    admins_table,
    authority_items_table,
    menus_table,
    metadata,
    role_menus_table,
    roles_table,
)


@pytest_asyncio.fixture
async def engine():
    """Per-test in-memory database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded(engine: AsyncEngine) -> None:
    """Two roles, three menus with authority items on one, a grant and two admins."""
    now = datetime.now(UTC)
    async with engine.begin() as conn:
        await conn.execute(
            insert(roles_table),
            [
                {"id": 1, "name": "Head office", "parent_id": None, "display_order": 0,
                 "available": True, "created_at": now},
                {"id": 2, "name": "Operations", "parent_id": 1, "display_order": 0,
                 "available": True, "created_at": now},
            ],
        )
        await conn.execute(
            insert(menus_table),
            [
                {"id": 10, "name": "Dashboard", "type": "GROUP", "parent_id": None,
                 "display_order": 0, "url": None, "icon": "home", "created_at": now},
                {"id": 11, "name": "Reports", "type": "PAGE", "parent_id": 10,
                 "display_order": 0, "url": "/reports", "icon": None, "created_at": now},
                {"id": 12, "name": "Docs", "type": "NEW_TAB", "parent_id": None,
                 "display_order": 1, "url": "https://example.org", "icon": None,
                 "created_at": now},
            ],
        )
        await conn.execute(
            insert(authority_items_table),
            [
                {"menu_id": 11, "authority": "REPORT_VIEW", "types": ["VIEW"],
                 "display_order": 1, "created_at": now},
                {"menu_id": 11, "authority": "REPORT_EDIT", "types": ["WRITE", "DELETE"],
                 "display_order": 0, "created_at": now},
            ],
        )
        await conn.execute(insert(role_menus_table), [{"role_id": 2, "menu_id": 11}])
        await conn.execute(
            insert(admins_table),
            [
                {"id": 1, "login_id": "root", "name": "Root", "password_hash": "h-root",
                 "role_id": None, "is_super_admin": True, "available": True,
                 "created_at": now},
                {"id": 2, "login_id": "jane", "name": "Jane", "password_hash": "h-jane",
                 "role_id": 2, "is_super_admin": False, "available": True,
                 "created_at": now},
            ],
        )


@pytest_asyncio.fixture
async def file_engine(tmp_path):
    """File-backed database where every session opens its own connection."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'concurrency.db'}",
        poolclass=NullPool,
        connect_args={"timeout": 30},
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        await conn.execute(
            insert(admins_table),
            [
                {"id": 2, "login_id": "jane", "name": "Jane", "password_hash": "h-jane",
                 "role_id": None, "is_super_admin": True, "available": True,
                 "created_at": datetime.now(UTC)},
            ],
        )
    yield engine
    await engine.dispose()
