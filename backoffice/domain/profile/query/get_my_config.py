"""GetMyConfig query and handler."""

from datetime import datetime
from typing import Any

from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.profile.service.profile import ProfileService
from backoffice.domain.shared.authorization.gate import authenticated
from backoffice.domain.shared.query import Query, QueryHandler, Result


class GetMyConfig(Query):
    pass


class MyConfig(Result):
    """`updated_at` is None when nothing has been stored yet."""

    settings: dict[str, Any]
    updated_at: datetime | None


class GetMyConfigHandler(QueryHandler[GetMyConfig, MyConfig]):
    __auth__ = authenticated()
    caller: CallerContext
    profile_service: ProfileService

    async def run(self, query: GetMyConfig) -> MyConfig:
        config = await self.profile_service.get_config(self.caller)
        return MyConfig(settings=config.settings, updated_at=config.updated_at)
