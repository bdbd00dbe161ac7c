"""Unit tests for CallerContext and Admin construction rules."""

import dataclasses

import pytest

from backoffice.domain.access.model.value import RoleId
from backoffice.domain.auth.model.admin import Admin
from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.auth.model.value import AdminId
from backoffice.domain.shared.error import ValidationError


class TestCallerContext:
    def test_regular_caller_requires_role(self):
        with pytest.raises(ValueError, match="role_id"):
            CallerContext(admin_id=AdminId(1), role_id=None, is_super_admin=False, token_id="t")

    def test_superadmin_may_have_no_role(self):
        caller = CallerContext(admin_id=AdminId(1), role_id=None, is_super_admin=True, token_id="t")

        assert caller.role_id is None

    def test_is_immutable(self):
        caller = CallerContext(
            admin_id=AdminId(1), role_id=RoleId(2), is_super_admin=False, token_id="t"
        )

        with pytest.raises(dataclasses.FrozenInstanceError):
            caller.role_id = RoleId(3)  # type: ignore[misc]


class TestAdminCreate:
    def test_new_admin_has_unassigned_id(self):
        admin = Admin.create(login_id="jane", name="Jane", password_hash="h", role_id=RoleId(1))

        assert admin.id == AdminId(0)
        assert admin.available is True
        assert admin.password_changed_at is None

    def test_role_required_unless_superadmin(self):
        with pytest.raises(ValidationError):
            Admin.create(login_id="jane", name="Jane", password_hash="h")

    def test_rename_sets_updated_at(self):
        admin = Admin.create(login_id="root", name="Root", password_hash="h", is_super_admin=True)

        admin.rename("Boss")

        assert admin.name == "Boss"
        assert admin.updated_at is not None
