"""RevokedToken entity for the auth domain."""

from datetime import UTC, datetime

from backoffice.domain.auth.model.value import AdminId
from backoffice.domain.shared.model.entity import Entity


class RevokedToken(Entity):
    """Marks an access token as signed out.

    A token is Active until a RevokedToken exists for its `token_id`; from then on
    it is Invalidated for good. Rows are kept at least until `expires_at`, after
    which the JWT itself no longer validates.

    Invariants:
    - `token_id` is globally unique (the JWT "jti")
    - a row is never updated or removed before `expires_at`
    """

    token_id: str
    admin_id: AdminId
    expires_at: datetime
    revoked_at: datetime

    @classmethod
    def create(cls, token_id: str, admin_id: AdminId, expires_at: datetime) -> "RevokedToken":
        """Create a revocation for a signed-out token."""
        return cls(
            token_id=token_id,
            admin_id=admin_id,
            expires_at=expires_at,
            revoked_at=datetime.now(UTC),
        )
