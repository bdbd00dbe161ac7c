"""Session service: sign-in, bearer token resolution and sign-out."""

import logging
from datetime import UTC, datetime
from typing import Any

import jwt

from backoffice.domain.auth.model.admin import Admin
from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.auth.model.token import RevokedToken
from backoffice.domain.auth.model.value import AdminId, IssuedToken
from backoffice.domain.auth.port.credential_store import CredentialStore
from backoffice.domain.auth.port.repository import AdminRepository, RevokedTokenRepository
from backoffice.domain.auth.service.token import TokenService
from backoffice.domain.shared.error import (
    AuthorizationError,
    InvalidTokenError,
    PasswordMismatchError,
)
from backoffice.domain.shared.service import Service

logger = logging.getLogger(__name__)


class SessionService(Service):
    """Owns the lifecycle of an access token.

    A token is Active from sign-in until it expires or is signed out; signing out
    moves it to Invalidated, which is terminal.
    """

    _admin_repo: AdminRepository
    _revoked_repo: RevokedTokenRepository
    _credentials: CredentialStore
    _token_service: TokenService

    async def sign_in(self, login_id: str, password: str) -> tuple[Admin, IssuedToken]:
        """Authenticate by login id and password and issue an access token.

        Raises:
            PasswordMismatchError: Unknown login id or wrong password (same error for both)
            AuthorizationError: The admin exists but has been made unavailable
        """
        admin = await self._admin_repo.get_by_login_id(login_id)
        if admin is None:
            self._credentials.dummy_verify()
            logger.info("Sign-in rejected: login_id=%s", login_id)
            raise PasswordMismatchError()
        if not self._credentials.verify(admin.password_hash, password):
            logger.info("Sign-in rejected: login_id=%s", login_id)
            raise PasswordMismatchError()

        if not admin.available:
            logger.info("Sign-in rejected for unavailable admin: admin_id=%s", admin.id)
            raise AuthorizationError("Admin is not available", code="admin_unavailable")

        token = self._token_service.create_access_token(admin)
        logger.info("Admin signed in: admin_id=%s, token_id=%s", admin.id, token.token_id)
        return admin, token

    async def resolve_caller_context(self, raw_token: str) -> CallerContext:
        """Turn a bearer token into the caller it authenticates.

        The role and superadmin flag are read from the current admin record.

        Raises:
            InvalidTokenError: Expired, malformed or revoked token, or an admin
                that no longer exists or is unavailable
        """
        caller, _ = await self._resolve(raw_token)
        return caller

    async def sign_out(self, raw_token: str | None) -> bool:
        """Invalidate the session named by `raw_token`.

        Never fails for a missing, invalid or already invalidated token; those
        are no-ops. Returns True only when this call invalidated the token.
        """
        if not raw_token:
            return False

        try:
            caller, payload = await self._resolve(raw_token)
        except InvalidTokenError as e:
            logger.debug("Sign-out ignored: %s", e.message)
            return False

        await self._revoked_repo.revoke(
            RevokedToken.create(
                token_id=caller.token_id,
                admin_id=caller.admin_id,
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        )
        logger.info("Admin signed out: admin_id=%s, token_id=%s", caller.admin_id, caller.token_id)
        return True

    async def _resolve(self, raw_token: str) -> tuple[CallerContext, dict[str, Any]]:
        try:
            payload = self._token_service.validate_access_token(raw_token)
            admin_id = AdminId(int(payload["sub"]))
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except (jwt.InvalidTokenError, KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError() from e

        token_id = str(payload["jti"])
        if await self._revoked_repo.is_revoked(token_id):
            raise InvalidTokenError("Token has been signed out")

        admin = await self._admin_repo.get(admin_id)
        if admin is None or not admin.available:
            raise InvalidTokenError()
        if admin.role_id is None and not admin.is_super_admin:
            logger.warning("Admin %s has no role and is not a superadmin", admin.id)
            raise InvalidTokenError()

        caller = CallerContext(
            admin_id=admin.id,
            role_id=admin.role_id,
            is_super_admin=admin.is_super_admin,
            token_id=token_id,
        )
        return caller, payload
