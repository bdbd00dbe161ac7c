"""ChangePassword command and handler."""

from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.profile.service.profile import ProfileService
from backoffice.domain.shared.authorization.gate import authenticated
from backoffice.domain.shared.command import Command, CommandHandler, Result


class ChangePassword(Command):
    old_password: str
    new_password: str


class ChangePasswordResult(Result):
    pass


class ChangePasswordHandler(CommandHandler[ChangePassword, ChangePasswordResult]):
    __auth__ = authenticated()
    caller: CallerContext
    profile_service: ProfileService

    async def run(self, cmd: ChangePassword) -> ChangePasswordResult:
        await self.profile_service.change_password(
            self.caller, cmd.old_password, cmd.new_password
        )
        return ChangePasswordResult()
