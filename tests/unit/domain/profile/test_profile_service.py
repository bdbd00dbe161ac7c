"""Unit tests for ProfileService."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from backoffice.domain.access.model.value import RoleId
from backoffice.domain.auth.model.admin import Admin
from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.auth.model.value import AdminId
from backoffice.domain.auth.port.credential_store import CredentialStore
from backoffice.domain.profile.model.config import AdminConfig
from backoffice.domain.profile.service.profile import ProfileService
from backoffice.domain.shared.error import (
    AuthorizationError,
    PasswordMismatchError,
    ValidationError,
)

CALLER = CallerContext(admin_id=AdminId(5), role_id=RoleId(2), is_super_admin=False, token_id="t")


class FakeCredentialStore(CredentialStore):
    def hash(self, plaintext: str) -> str:
        return f"hashed:{plaintext}"

    def verify(self, stored_hash: str, candidate: str) -> bool:
        return stored_hash == f"hashed:{candidate}"

    def dummy_verify(self) -> None:
        pass


def make_admin(password: str = "old-pass") -> Admin:
    return Admin(
        id=AdminId(5),
        login_id="jane",
        name="Jane",
        password_hash=f"hashed:{password}",
        role_id=RoleId(2),
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
    )


def make_profile_service(
    admin: Admin | None = None,
    admin_repo: AsyncMock | None = None,
    config_repo: AsyncMock | None = None,
) -> ProfileService:
    """Create a ProfileService with mocked dependencies."""
    if admin_repo is None:
        admin_repo = AsyncMock()
        admin_repo.get.return_value = admin
        admin_repo.save.side_effect = lambda a: a
    if config_repo is None:
        config_repo = AsyncMock()
        config_repo.get_by_admin_id.return_value = None
        config_repo.upsert.side_effect = lambda c: c

    return ProfileService(
        _admin_repo=admin_repo,
        _config_repo=config_repo,
        _credentials=FakeCredentialStore(),
    )


class TestGetMyInfo:
    @pytest.mark.asyncio
    async def test_returns_profile_without_credentials(self):
        service = make_profile_service(make_admin())

        profile = await service.get_my_info(CALLER)

        assert profile.id == 5
        assert profile.login_id == "jane"
        assert profile.role_id == 2
        assert "password_hash" not in profile.model_dump()

    @pytest.mark.asyncio
    async def test_missing_admin_is_not_authorized(self):
        service = make_profile_service(admin=None)

        with pytest.raises(AuthorizationError) as exc_info:
            await service.get_my_info(CALLER)

        assert exc_info.value.code == "not_authorized"


class TestEditProfile:
    @pytest.mark.asyncio
    async def test_renames_after_password_check(self):
        admin_repo = AsyncMock()
        admin_repo.get.return_value = make_admin()
        service = make_profile_service(admin_repo=admin_repo)

        profile = await service.edit_profile(CALLER, "  Janet ", "old-pass")

        assert profile.name == "Janet"
        assert profile.updated_at is not None
        admin_repo.rename.assert_awaited_once_with(AdminId(5), "Janet", profile.updated_at)
        admin_repo.save.assert_not_called()
        admin_repo.update_password.assert_not_called()

    @pytest.mark.asyncio
    async def test_wrong_password_does_not_rename(self):
        admin_repo = AsyncMock()
        admin_repo.get.return_value = make_admin()
        service = make_profile_service(admin_repo=admin_repo)

        with pytest.raises(PasswordMismatchError):
            await service.edit_profile(CALLER, "Janet", "nope")

        admin_repo.rename.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self):
        service = make_profile_service(make_admin())

        with pytest.raises(ValidationError) as exc_info:
            await service.edit_profile(CALLER, "   ", "old-pass")

        assert exc_info.value.field == "name"


class TestChangePassword:
    @pytest.mark.asyncio
    async def test_updates_hash_in_one_call(self):
        admin_repo = AsyncMock()
        admin_repo.get.return_value = make_admin()
        service = make_profile_service(admin_repo=admin_repo)

        await service.change_password(CALLER, "old-pass", "new-pass")

        admin_repo.update_password.assert_awaited_once()
        admin_id, new_hash, changed_at = admin_repo.update_password.await_args.args
        assert admin_id == AdminId(5)
        assert new_hash == "hashed:new-pass"
        assert changed_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_wrong_old_password_leaves_hash_unchanged(self):
        admin = make_admin()
        admin_repo = AsyncMock()
        admin_repo.get.return_value = admin
        service = make_profile_service(admin_repo=admin_repo)

        with pytest.raises(PasswordMismatchError):
            await service.change_password(CALLER, "wrong", "new-pass")

        admin_repo.update_password.assert_not_called()
        admin_repo.save.assert_not_called()
        assert admin.password_hash == "hashed:old-pass"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("new_password", ["", "old-pass"])
    async def test_empty_or_unchanged_new_password_rejected(self, new_password):
        admin_repo = AsyncMock()
        admin_repo.get.return_value = make_admin()
        service = make_profile_service(admin_repo=admin_repo)

        with pytest.raises(ValidationError):
            await service.change_password(CALLER, "old-pass", new_password)

        admin_repo.update_password.assert_not_called()


class TestVerifyPassword:
    @pytest.mark.asyncio
    async def test_correct_password_passes(self):
        service = make_profile_service(make_admin())

        await service.verify_password(CALLER, "old-pass")

    @pytest.mark.asyncio
    async def test_wrong_password_raises_mismatch(self):
        service = make_profile_service(make_admin())

        with pytest.raises(PasswordMismatchError):
            await service.verify_password(CALLER, "nope")


class TestConfig:
    @pytest.mark.asyncio
    async def test_get_config_defaults_without_writing(self):
        config_repo = AsyncMock()
        config_repo.get_by_admin_id.return_value = None
        service = make_profile_service(make_admin(), config_repo=config_repo)

        config = await service.get_config(CALLER)

        assert config.settings == {}
        assert config.updated_at is None
        config_repo.upsert.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_config_returns_stored(self):
        stored = AdminConfig.create(AdminId(5), {"theme": "dark"})
        config_repo = AsyncMock()
        config_repo.get_by_admin_id.return_value = stored
        service = make_profile_service(make_admin(), config_repo=config_repo)

        assert await service.get_config(CALLER) == stored

    @pytest.mark.asyncio
    async def test_upsert_replaces_settings_for_caller(self):
        config_repo = AsyncMock()
        config_repo.upsert.side_effect = lambda c: c
        service = make_profile_service(make_admin(), config_repo=config_repo)

        saved = await service.upsert_config(CALLER, {"page_size": 50})

        assert saved.admin_id == AdminId(5)
        assert saved.settings == {"page_size": 50}
        assert saved.updated_at is not None

    @pytest.mark.asyncio
    async def test_upsert_for_missing_admin_is_not_authorized(self):
        config_repo = AsyncMock()
        service = make_profile_service(admin=None, config_repo=config_repo)

        with pytest.raises(AuthorizationError):
            await service.upsert_config(CALLER, {"x": 1})

        config_repo.upsert.assert_not_called()
