"""Token service for JWT creation and validation."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from backoffice.config import JwtConfig
from backoffice.domain.auth.model.admin import Admin
from backoffice.domain.auth.model.value import IssuedToken
from backoffice.domain.shared.service import Service


class TokenService(Service):
    """Service for JWT access tokens.

    - Access tokens are JWTs (HS256 by default) carrying the admin's id, role and
      superadmin flag
    - Every token gets a random "jti" so a single session can be revoked
    """

    _config: JwtConfig

    def create_access_token(self, admin: Admin) -> IssuedToken:
        """Create a JWT access token.

        Args:
            admin: The admin the token is issued to

        Returns:
            The encoded JWT plus its token id and expiry
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._config.access_token_expire_minutes)
        token_id = secrets.token_hex(16)

        payload = {
            "sub": str(admin.id),
            "role_id": admin.role_id.root if admin.role_id is not None else None,
            "super_admin": admin.is_super_admin,
            "aud": self._config.audience,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": token_id,
        }

        raw = jwt.encode(
            payload,
            self._config.secret,
            algorithm=self._config.algorithm,
        )
        return IssuedToken(
            raw=raw,
            token_id=token_id,
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )

    def validate_access_token(self, token: str) -> dict[str, Any]:
        """Validate and decode a JWT access token.

        Args:
            token: The JWT string to validate

        Returns:
            Decoded payload dict

        Raises:
            jwt.InvalidTokenError: If token is invalid or expired
        """
        return jwt.decode(
            token,
            self._config.secret,
            algorithms=[self._config.algorithm],
            audience=self._config.audience,
            options={"require": ["sub", "exp", "jti"]},
        )

    @property
    def access_token_expire_seconds(self) -> int:
        """Get access token expiry in seconds."""
        return self._config.access_token_expire_minutes * 60
