"""Per-admin UI configuration."""

from datetime import UTC, datetime
from typing import Any

from backoffice.domain.auth.model.value import AdminId
from backoffice.domain.shared.model.entity import Entity


class AdminConfig(Entity):
    """UI preferences owned by one admin.

    At most one exists per admin. A write replaces `settings` as a whole.
    `updated_at` is None for the default, never-stored config.
    """

    admin_id: AdminId
    settings: dict[str, Any] = {}
    updated_at: datetime | None = None

    @classmethod
    def default(cls, admin_id: AdminId) -> "AdminConfig":
        return cls(admin_id=admin_id)

    @classmethod
    def create(cls, admin_id: AdminId, settings: dict[str, Any]) -> "AdminConfig":
        return cls(admin_id=admin_id, settings=dict(settings), updated_at=datetime.now(UTC))
