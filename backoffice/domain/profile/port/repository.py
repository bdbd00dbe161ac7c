"""Repository ports for the profile domain."""

from abc import abstractmethod
from typing import Protocol

from backoffice.domain.auth.model.value import AdminId
from backoffice.domain.profile.model.config import AdminConfig
from backoffice.domain.shared.port import Port


class AdminConfigRepository(Port, Protocol):
    """Repository for per-admin UI configuration."""

    @abstractmethod
    async def get_by_admin_id(self, admin_id: AdminId) -> AdminConfig | None:
        """Get an admin's stored config, or None if never written."""
        ...

    @abstractmethod
    async def upsert(self, config: AdminConfig) -> AdminConfig:
        """Insert or replace the config of `config.admin_id` in one statement.

        Concurrent upserts for the same admin never create a second row; the
        last write wins.
        """
        ...
