"""Fixtures for HTTP-level tests: a migrated SQLite file and a TestClient."""

from datetime import UTC, datetime

import logfire
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, insert

from backoffice.application.api.rest.app import create_app
from backoffice.config import (
    AuthConfig,
    Config,
    DatabaseConfig,
    JwtConfig,
    PasswordConfig,
)
from backoffice.infrastructure.auth.credential_store import PasslibCredentialStore
from backoffice.infrastructure.persistence.tables import (
    admins_table,
    authority_items_table,
    menus_table,
    role_menus_table,
    roles_table,
)

logfire.configure(send_to_logfire=False, console=False)

PASSWORDS = {"root": "root-pass", "jane": "jane-pass"}


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(
        database=DatabaseConfig(url=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}"),
        auth=AuthConfig(
            jwt=JwtConfig(secret="api-test-secret-with-enough-length"),
            password=PasswordConfig(pbkdf2_rounds=1000),
        ),
    )


def _seed(config: Config) -> None:
    credentials = PasslibCredentialStore(config.auth.password)
    now = datetime.now(UTC)
    engine = create_engine(config.database.url.replace("+aiosqlite", ""))
    with engine.begin() as conn:
        conn.execute(
            insert(roles_table),
            [
                {"id": 1, "name": "Head office", "parent_id": None, "display_order": 0,
                 "available": True, "created_at": now},
                {"id": 2, "name": "Operations", "parent_id": 1, "display_order": 0,
                 "available": True, "created_at": now},
                {"id": 3, "name": "Night shift", "parent_id": 2, "display_order": 0,
                 "available": True, "created_at": now},
            ],
        )
        conn.execute(
            insert(menus_table),
            [
                {"id": 10, "name": "Dashboard", "type": "GROUP", "parent_id": None,
                 "display_order": 0, "url": None, "icon": None, "created_at": now},
                {"id": 11, "name": "Reports", "type": "PAGE", "parent_id": 10,
                 "display_order": 0, "url": "/reports", "icon": None, "created_at": now},
                {"id": 12, "name": "Settings", "type": "PAGE", "parent_id": None,
                 "display_order": 1, "url": "/settings", "icon": None, "created_at": now},
            ],
        )
        conn.execute(
            insert(authority_items_table),
            [
                {"menu_id": 11, "authority": "REPORT_VIEW", "types": ["VIEW"],
                 "display_order": 1, "created_at": now},
                {"menu_id": 11, "authority": "REPORT_EXPORT", "types": ["VIEW", "EXPORT"],
                 "display_order": 0, "created_at": now},
            ],
        )
        conn.execute(insert(role_menus_table), [{"role_id": 2, "menu_id": 11}])
        conn.execute(
            insert(admins_table),
            [
                {"id": 1, "login_id": "root", "name": "Root",
                 "password_hash": credentials.hash(PASSWORDS["root"]),
                 "role_id": None, "is_super_admin": True, "available": True,
                 "created_at": now},
                {"id": 2, "login_id": "jane", "name": "Jane",
                 "password_hash": credentials.hash(PASSWORDS["jane"]),
                 "role_id": 2, "is_super_admin": False, "available": True,
                 "created_at": now},
            ],
        )
    engine.dispose()


@pytest.fixture
def client(config: Config):
    app = create_app(config)
    _seed(config)
    with TestClient(app) as client:
        yield client
