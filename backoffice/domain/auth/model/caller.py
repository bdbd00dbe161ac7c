"""CallerContext: the authenticated admin, resolved per request."""

from dataclasses import dataclass

from backoffice.domain.access.model.value import RoleId
from backoffice.domain.auth.model.identity import Identity
from backoffice.domain.auth.model.value import AdminId


@dataclass(frozen=True)
class CallerContext(Identity):
    """The authenticated admin making the current request.

    Resolved once per request from a validated bearer token plus a fresh read of
    the admin record. Immutable after creation and never persisted. Passed
    explicitly into every operation that acts on behalf of the caller.

    `role_id` may only be None for a superadmin.
    """

    admin_id: AdminId
    role_id: RoleId | None
    is_super_admin: bool
    token_id: str

    def __post_init__(self) -> None:
        if self.role_id is None and not self.is_super_admin:
            raise ValueError("role_id is required for non-superadmin callers")
