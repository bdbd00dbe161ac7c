"""VerifyPassword command and handler."""

from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.profile.service.profile import ProfileService
from backoffice.domain.shared.authorization.gate import authenticated
from backoffice.domain.shared.command import Command, CommandHandler, Result


class VerifyPassword(Command):
    """Re-confirm the caller's password before a sensitive UI action."""

    password: str


class VerifyPasswordResult(Result):
    verified: bool = True


class VerifyPasswordHandler(CommandHandler[VerifyPassword, VerifyPasswordResult]):
    __auth__ = authenticated()
    caller: CallerContext
    profile_service: ProfileService

    async def run(self, cmd: VerifyPassword) -> VerifyPasswordResult:
        await self.profile_service.verify_password(self.caller, cmd.password)
        return VerifyPasswordResult()
