"""Repository ports for the auth domain."""

from abc import abstractmethod
from datetime import datetime
from typing import Protocol

from backoffice.domain.auth.model.admin import Admin
from backoffice.domain.auth.model.token import RevokedToken
from backoffice.domain.auth.model.value import AdminId
from backoffice.domain.shared.port import Port


class AdminRepository(Port, Protocol):
    """Repository for Admin aggregate persistence."""

    @abstractmethod
    async def get(self, admin_id: AdminId) -> Admin | None:
        """Get an admin by ID."""
        ...

    @abstractmethod
    async def get_by_login_id(self, login_id: str) -> Admin | None:
        """Get an admin by login ID."""
        ...

    @abstractmethod
    async def save(self, admin: Admin) -> Admin:
        """Save an admin (create or update).

        Updates never touch the password columns; those change only through
        `update_password`. Returns the stored admin, with its assigned ID when
        newly created.
        """
        ...

    @abstractmethod
    async def rename(self, admin_id: AdminId, name: str, updated_at: datetime) -> None:
        """Change only the display name, in a single statement."""
        ...

    @abstractmethod
    async def update_password(
        self, admin_id: AdminId, password_hash: str, changed_at: datetime
    ) -> None:
        """Replace the stored password hash in a single statement."""
        ...


class RevokedTokenRepository(Port, Protocol):
    """Repository for signed-out access tokens."""

    @abstractmethod
    async def is_revoked(self, token_id: str) -> bool:
        """Check whether a token ID has been revoked."""
        ...

    @abstractmethod
    async def revoke(self, token: RevokedToken) -> None:
        """Record a revocation. Revoking an already revoked token is a no-op."""
        ...
