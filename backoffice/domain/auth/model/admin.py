"""Admin aggregate for the auth domain."""

from datetime import UTC, datetime

from backoffice.domain.access.model.value import RoleId
from backoffice.domain.auth.model.value import AdminId
from backoffice.domain.shared.error import ValidationError
from backoffice.domain.shared.model.entity import Aggregate


class Admin(Aggregate):
    """A back-office operator.

    Invariants:
    - `login_id` is unique and immutable after creation
    - `password_hash` is never a plaintext password
    - `role_id` is None only when `is_super_admin` is set
    - `updated_at` is set on any modification
    """

    id: AdminId
    login_id: str
    name: str
    password_hash: str
    role_id: RoleId | None = None
    is_super_admin: bool = False
    available: bool = True
    created_at: datetime
    updated_at: datetime | None = None
    password_changed_at: datetime | None = None

    @classmethod
    def create(
        cls,
        login_id: str,
        name: str,
        password_hash: str,
        role_id: RoleId | None = None,
        is_super_admin: bool = False,
    ) -> "Admin":
        """Create a not-yet-stored admin. Its id stays 0 until the repository assigns one."""
        if role_id is None and not is_super_admin:
            raise ValidationError("A role is required unless the admin is a superadmin", "role_id")
        return cls(
            id=AdminId(0),
            login_id=login_id,
            name=name,
            password_hash=password_hash,
            role_id=role_id,
            is_super_admin=is_super_admin,
            created_at=datetime.now(UTC),
        )

    def rename(self, name: str) -> None:
        """Change the display name."""
        self.name = name
        self.updated_at = datetime.now(UTC)
