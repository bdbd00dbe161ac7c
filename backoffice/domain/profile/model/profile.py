"""Read model of an admin as shown to that admin."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from backoffice.domain.auth.model.admin import Admin


class AdminProfile(BaseModel):
    """Everything about an admin except credentials."""

    model_config = ConfigDict(frozen=True)

    id: int
    login_id: str
    name: str
    role_id: int | None
    is_super_admin: bool
    created_at: datetime
    updated_at: datetime | None
    password_changed_at: datetime | None

    @classmethod
    def from_admin(cls, admin: Admin) -> "AdminProfile":
        return cls(
            id=admin.id.root,
            login_id=admin.login_id,
            name=admin.name,
            role_id=admin.role_id.root if admin.role_id is not None else None,
            is_super_admin=admin.is_super_admin,
            created_at=admin.created_at,
            updated_at=admin.updated_at,
            password_changed_at=admin.password_changed_at,
        )
