"""Unit tests for TokenService."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from backoffice.config import JwtConfig
from backoffice.domain.access.model.value import RoleId
from backoffice.domain.auth.model.admin import Admin
from backoffice.domain.auth.model.value import AdminId
from backoffice.domain.auth.service.token import TokenService

SECRET = "test-secret-key-256-bits-long-xx"


def make_token_service(**overrides) -> TokenService:
    config = JwtConfig(secret=SECRET, algorithm="HS256", access_token_expire_minutes=60)
    return TokenService(_config=config.model_copy(update=overrides))


def make_admin(role_id: int | None = 3, super_admin: bool = False) -> Admin:
    return Admin(
        id=AdminId(42),
        login_id="jane",
        name="Jane",
        password_hash="x",
        role_id=RoleId(role_id) if role_id is not None else None,
        is_super_admin=super_admin,
        created_at=datetime.now(UTC),
    )


class TestCreateAccessToken:
    def test_claims_carry_admin_role_and_superadmin_flag(self):
        service = make_token_service()

        issued = service.create_access_token(make_admin(role_id=3))
        payload = service.validate_access_token(issued.raw)

        assert payload["sub"] == "42"
        assert payload["role_id"] == 3
        assert payload["super_admin"] is False
        assert payload["jti"] == issued.token_id
        assert payload["aud"] == "backoffice"
        assert set(payload) == {"sub", "role_id", "super_admin", "aud", "iat", "exp", "jti"}

    def test_superadmin_without_role(self):
        service = make_token_service()

        payload = service.validate_access_token(
            service.create_access_token(make_admin(role_id=None, super_admin=True)).raw
        )

        assert payload["role_id"] is None
        assert payload["super_admin"] is True

    def test_token_ids_are_unique(self):
        service = make_token_service()
        admin = make_admin()

        assert service.create_access_token(admin).token_id != service.create_access_token(
            admin
        ).token_id

    def test_expiry_matches_config(self):
        service = make_token_service(access_token_expire_minutes=5)

        issued = service.create_access_token(make_admin())

        remaining = issued.expires_at - datetime.now(UTC)
        assert timedelta(minutes=4) < remaining <= timedelta(minutes=5)
        assert service.access_token_expire_seconds == 300


class TestValidateAccessToken:
    def test_rejects_expired_token(self):
        service = make_token_service(access_token_expire_minutes=-1)

        issued = service.create_access_token(make_admin())

        with pytest.raises(jwt.ExpiredSignatureError):
            service.validate_access_token(issued.raw)

    def test_rejects_wrong_secret(self):
        issued = make_token_service(secret="another-secret-256-bits-long-xxx").create_access_token(
            make_admin()
        )

        with pytest.raises(jwt.InvalidSignatureError):
            make_token_service().validate_access_token(issued.raw)

    def test_rejects_wrong_audience(self):
        issued = make_token_service(audience="elsewhere").create_access_token(make_admin())

        with pytest.raises(jwt.InvalidAudienceError):
            make_token_service().validate_access_token(issued.raw)

    def test_rejects_garbage(self):
        with pytest.raises(jwt.InvalidTokenError):
            make_token_service().validate_access_token("not-a-jwt")
