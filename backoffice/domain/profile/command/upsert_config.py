"""UpsertConfig command and handler."""

from datetime import datetime
from typing import Any

from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.profile.service.profile import ProfileService
from backoffice.domain.shared.authorization.gate import authenticated
from backoffice.domain.shared.command import Command, CommandHandler, Result


class UpsertConfig(Command):
    settings: dict[str, Any]


class ConfigResult(Result):
    settings: dict[str, Any]
    updated_at: datetime | None


class UpsertConfigHandler(CommandHandler[UpsertConfig, ConfigResult]):
    __auth__ = authenticated()
    caller: CallerContext
    profile_service: ProfileService

    async def run(self, cmd: UpsertConfig) -> ConfigResult:
        config = await self.profile_service.upsert_config(self.caller, cmd.settings)
        return ConfigResult(settings=config.settings, updated_at=config.updated_at)
