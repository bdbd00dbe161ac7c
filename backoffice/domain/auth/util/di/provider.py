"""DI provider for auth domain."""

import logging

from dishka import from_context, provide
from starlette.requests import Request

from backoffice.config import Config
from backoffice.domain.auth.command.sign_in import SignInHandler
from backoffice.domain.auth.command.sign_out import SignOutHandler
from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.auth.model.identity import Anonymous, Identity
from backoffice.domain.auth.service.session import SessionService
from backoffice.domain.auth.service.token import TokenService
from backoffice.domain.shared.error import AuthorizationError, InvalidTokenError
from backoffice.util.di.base import Provider
from backoffice.util.di.scope import Scope

logger = logging.getLogger(__name__)


def bearer_token(request: Request) -> str | None:
    """The raw token of an `Authorization: Bearer ...` header, if any."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        return None
    return auth_header[7:].strip() or None


class AuthProvider(Provider):
    """DI provider for auth domain services and handlers."""

    request = from_context(provides=Request, scope=Scope.UOW)

    # Command Handlers
    sign_in_handler = provide(SignInHandler, scope=Scope.UOW)
    sign_out_handler = provide(SignOutHandler, scope=Scope.UOW)

    # Services
    session_service = provide(SessionService, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_token_service(self, config: Config) -> TokenService:
        """Provide TokenService."""
        return TokenService(_config=config.auth.jwt)

    @provide(scope=Scope.UOW)
    async def get_identity(self, request: Request, session_service: SessionService) -> Identity:
        """Resolve Identity from the bearer token.

        Returns Anonymous for requests without a usable token, CallerContext otherwise.
        """
        token = bearer_token(request)
        if token is None:
            return Anonymous()

        try:
            caller = await session_service.resolve_caller_context(token)
        except InvalidTokenError as e:
            logger.debug("Bearer token rejected: %s", e.message)
            return Anonymous()

        logger.debug(
            "Identity resolved: admin_id=%s, role_id=%s, super_admin=%s",
            caller.admin_id,
            caller.role_id,
            caller.is_super_admin,
        )
        return caller

    @provide(scope=Scope.UOW)
    def get_caller(self, identity: Identity) -> CallerContext:
        """Extract CallerContext from Identity. Raises if not authenticated."""
        if isinstance(identity, CallerContext):
            return identity
        raise AuthorizationError("Authentication required", code="missing_token")
