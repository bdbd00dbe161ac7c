"""DI provider for auth infrastructure."""

from dishka import provide

from backoffice.config import Config
from backoffice.domain.auth.port.credential_store import CredentialStore
from backoffice.domain.auth.port.repository import AdminRepository, RevokedTokenRepository
from backoffice.infrastructure.auth.credential_store import PasslibCredentialStore
from backoffice.infrastructure.persistence.repository.auth import (
    PostgresAdminRepository,
    PostgresRevokedTokenRepository,
)
from backoffice.util.di.base import Provider
from backoffice.util.di.scope import Scope


class AuthInfraProvider(Provider):
    """DI provider for auth infrastructure adapters."""

    # Repository adapters
    admin_repo = provide(
        PostgresAdminRepository,
        scope=Scope.UOW,
        provides=AdminRepository,
    )
    revoked_token_repo = provide(
        PostgresRevokedTokenRepository,
        scope=Scope.UOW,
        provides=RevokedTokenRepository,
    )

    @provide(scope=Scope.APP)
    def get_credential_store(self, config: Config) -> CredentialStore:
        """One CryptContext for the application lifetime."""
        return PasslibCredentialStore(config.auth.password)
