from dishka import AsyncContainer, make_async_container

from backoffice.config import Config
from backoffice.domain.access.util.di import AccessProvider
from backoffice.domain.auth.util.di import AuthProvider
from backoffice.domain.profile.util.di import ProfileProvider
from backoffice.infrastructure.auth import AuthInfraProvider
from backoffice.infrastructure.persistence import PersistenceProvider
from backoffice.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        PersistenceProvider(),
        AuthInfraProvider(),
        AuthProvider(),
        AccessProvider(),
        ProfileProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
