"""SQL repository implementations for auth domain."""

from datetime import datetime

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.domain.access.model.value import RoleId
from backoffice.domain.auth.model.admin import Admin
from backoffice.domain.auth.model.token import RevokedToken
from backoffice.domain.auth.model.value import AdminId
from backoffice.domain.auth.port.repository import AdminRepository, RevokedTokenRepository
from backoffice.infrastructure.persistence.dialect import upsert_insert
from backoffice.infrastructure.persistence.tables import admins_table, revoked_tokens_table


def _row_to_admin(row: dict) -> Admin:
    """Convert a database row to an Admin model."""
    return Admin(
        id=AdminId(row["id"]),
        login_id=row["login_id"],
        name=row["name"],
        password_hash=row["password_hash"],
        role_id=RoleId(row["role_id"]) if row["role_id"] is not None else None,
        is_super_admin=row["is_super_admin"],
        available=row["available"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        password_changed_at=row["password_changed_at"],
    )


def _admin_to_dict(admin: Admin) -> dict:
    """Convert an Admin model to a database row dict, without its id."""
    return {
        "login_id": admin.login_id,
        "name": admin.name,
        "password_hash": admin.password_hash,
        "role_id": admin.role_id.root if admin.role_id is not None else None,
        "is_super_admin": admin.is_super_admin,
        "available": admin.available,
        "created_at": admin.created_at,
        "updated_at": admin.updated_at,
        "password_changed_at": admin.password_changed_at,
    }


# Only update_password writes these on an existing row
_CREDENTIAL_COLUMNS = ("password_hash", "password_changed_at")


class PostgresAdminRepository(AdminRepository):
    """SQL implementation of AdminRepository (PostgreSQL or SQLite)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, admin_id: AdminId) -> Admin | None:
        stmt = select(admins_table).where(admins_table.c.id == admin_id.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_admin(dict(row)) if row else None

    async def get_by_login_id(self, login_id: str) -> Admin | None:
        stmt = select(admins_table).where(admins_table.c.login_id == login_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_admin(dict(row)) if row else None

    async def save(self, admin: Admin) -> Admin:
        """Insert when `admin.id` is 0 (not yet assigned), update otherwise."""
        admin_dict = _admin_to_dict(admin)

        if admin.id.root:
            for column in _CREDENTIAL_COLUMNS:
                admin_dict.pop(column)
            stmt = (
                update(admins_table)
                .where(admins_table.c.id == admin.id.root)
                .values(**admin_dict)
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return admin

        result = await self.session.execute(
            insert(admins_table).values(**admin_dict).returning(admins_table.c.id)
        )
        new_id = result.scalar_one()
        await self.session.flush()
        return admin.model_copy(update={"id": AdminId(new_id)})

    async def rename(self, admin_id: AdminId, name: str, updated_at: datetime) -> None:
        stmt = (
            update(admins_table)
            .where(admins_table.c.id == admin_id.root)
            .values(name=name, updated_at=updated_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def update_password(
        self, admin_id: AdminId, password_hash: str, changed_at: datetime
    ) -> None:
        stmt = (
            update(admins_table)
            .where(admins_table.c.id == admin_id.root)
            .values(
                password_hash=password_hash,
                password_changed_at=changed_at,
                updated_at=changed_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()


class PostgresRevokedTokenRepository(RevokedTokenRepository):
    """SQL implementation of RevokedTokenRepository (PostgreSQL or SQLite)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def is_revoked(self, token_id: str) -> bool:
        stmt = select(revoked_tokens_table.c.token_id).where(
            revoked_tokens_table.c.token_id == token_id
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def revoke(self, token: RevokedToken) -> None:
        stmt = (
            upsert_insert(self.session, revoked_tokens_table)
            .values(
                token_id=token.token_id,
                admin_id=token.admin_id.root,
                expires_at=token.expires_at,
                revoked_at=token.revoked_at,
            )
            .on_conflict_do_nothing(index_elements=[revoked_tokens_table.c.token_id])
        )
        await self.session.execute(stmt)
        await self.session.flush()
