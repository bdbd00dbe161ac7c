"""Integration tests for PostgresRevokedTokenRepository on SQLite."""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import func, select

from backoffice.domain.auth.model.token import RevokedToken
from backoffice.domain.auth.model.value import AdminId
from backoffice.infrastructure.persistence.repository.auth import PostgresRevokedTokenRepository
from backoffice.infrastructure.persistence.tables import revoked_tokens_table


def make_revocation(token_id: str = "jti-1") -> RevokedToken:
    return RevokedToken.create(
        token_id=token_id,
        admin_id=AdminId(2),
        expires_at=datetime.now(UTC) + timedelta(hours=1),
    )


class TestRevokedTokenRepository:
    @pytest.mark.asyncio
    async def test_unknown_token_is_not_revoked(self, session, seeded):
        assert await PostgresRevokedTokenRepository(session).is_revoked("nope") is False

    @pytest.mark.asyncio
    async def test_revoke_marks_token(self, session, seeded):
        repo = PostgresRevokedTokenRepository(session)

        await repo.revoke(make_revocation())

        assert await repo.is_revoked("jti-1") is True
        assert await repo.is_revoked("jti-2") is False

    @pytest.mark.asyncio
    async def test_revoke_twice_is_idempotent(self, session, seeded):
        repo = PostgresRevokedTokenRepository(session)

        await repo.revoke(make_revocation())
        await repo.revoke(make_revocation())

        count = await session.scalar(select(func.count()).select_from(revoked_tokens_table))
        assert count == 1
