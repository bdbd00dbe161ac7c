from typing import AsyncIterable

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from backoffice.config import Config
from backoffice.domain.access.port.repository import (
    MenuRepository,
    RoleMenuGrantRepository,
    RoleRepository,
)
from backoffice.domain.profile.port.repository import AdminConfigRepository
from backoffice.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from backoffice.infrastructure.persistence.repository.access import (
    PostgresMenuRepository,
    PostgresRoleMenuGrantRepository,
    PostgresRoleRepository,
)
from backoffice.infrastructure.persistence.repository.profile import (
    PostgresAdminConfigRepository,
)
from backoffice.util.di.base import Provider
from backoffice.util.di.scope import Scope


class PersistenceProvider(Provider):
    # APP-scoped factories
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per unit of work)
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    # Access repositories
    role_repo = provide(PostgresRoleRepository, scope=Scope.UOW, provides=RoleRepository)
    menu_repo = provide(PostgresMenuRepository, scope=Scope.UOW, provides=MenuRepository)
    grant_repo = provide(
        PostgresRoleMenuGrantRepository, scope=Scope.UOW, provides=RoleMenuGrantRepository
    )

    # Profile repositories
    admin_config_repo = provide(
        PostgresAdminConfigRepository, scope=Scope.UOW, provides=AdminConfigRepository
    )
