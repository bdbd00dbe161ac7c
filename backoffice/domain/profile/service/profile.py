"""Profile service: the caller's own account, password and UI config."""

import logging
from datetime import UTC, datetime
from typing import Any

from backoffice.domain.auth.model.admin import Admin
from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.auth.port.credential_store import CredentialStore
from backoffice.domain.auth.port.repository import AdminRepository
from backoffice.domain.profile.model.config import AdminConfig
from backoffice.domain.profile.model.profile import AdminProfile
from backoffice.domain.profile.port.repository import AdminConfigRepository
from backoffice.domain.shared.error import (
    PasswordMismatchError,
    ValidationError,
    not_authorized,
)
from backoffice.domain.shared.service import Service

logger = logging.getLogger(__name__)


class ProfileService(Service):
    """Operations an admin performs on their own account.

    Every operation takes the caller explicitly and re-reads the admin record;
    a caller whose record has disappeared gets NotAuthorized.
    """

    _admin_repo: AdminRepository
    _config_repo: AdminConfigRepository
    _credentials: CredentialStore

    async def get_my_info(self, caller: CallerContext) -> AdminProfile:
        admin = await self._require_admin(caller)
        return AdminProfile.from_admin(admin)

    async def edit_profile(
        self, caller: CallerContext, new_name: str, current_password: str
    ) -> AdminProfile:
        """Rename the caller after confirming their password."""
        name = new_name.strip()
        if not name:
            raise ValidationError("Name must not be empty", field="name")

        admin = await self._require_admin(caller)
        self._check_password(admin, current_password)

        admin.rename(name)
        await self._admin_repo.rename(admin.id, admin.name, admin.updated_at or datetime.now(UTC))
        logger.info("Profile updated: admin_id=%s", admin.id)
        return AdminProfile.from_admin(admin)

    async def change_password(
        self, caller: CallerContext, old_password: str, new_password: str
    ) -> None:
        """Replace the caller's password.

        The stored hash is only touched once the old password has been verified.
        """
        if not new_password:
            raise ValidationError("New password must not be empty", field="new_password")
        if new_password == old_password:
            raise ValidationError(
                "New password must differ from the current one", field="new_password"
            )

        admin = await self._require_admin(caller)
        self._check_password(admin, old_password)

        await self._admin_repo.update_password(
            admin.id,
            self._credentials.hash(new_password),
            datetime.now(UTC),
        )
        logger.info("Password changed: admin_id=%s", admin.id)

    async def verify_password(self, caller: CallerContext, password: str) -> None:
        admin = await self._require_admin(caller)
        self._check_password(admin, password)

    async def get_config(self, caller: CallerContext) -> AdminConfig:
        """The caller's stored config, or an empty default. Never writes."""
        stored = await self._config_repo.get_by_admin_id(caller.admin_id)
        return stored if stored is not None else AdminConfig.default(caller.admin_id)

    async def upsert_config(self, caller: CallerContext, settings: dict[str, Any]) -> AdminConfig:
        await self._require_admin(caller)
        saved = await self._config_repo.upsert(AdminConfig.create(caller.admin_id, settings))
        logger.info("Config saved: admin_id=%s, keys=%d", caller.admin_id, len(settings))
        return saved

    async def _require_admin(self, caller: CallerContext) -> Admin:
        admin = await self._admin_repo.get(caller.admin_id)
        if admin is None:
            raise not_authorized()
        return admin

    def _check_password(self, admin: Admin, password: str) -> None:
        if not self._credentials.verify(admin.password_hash, password):
            logger.info("Password check failed: admin_id=%s", admin.id)
            raise PasswordMismatchError()
