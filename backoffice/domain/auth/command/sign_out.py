"""SignOut command and handler."""

from backoffice.domain.auth.service.session import SessionService
from backoffice.domain.shared.authorization.gate import public
from backoffice.domain.shared.command import Command, CommandHandler, Result


class SignOut(Command):
    """Command to invalidate the presented access token, if any."""

    access_token: str | None = None


class SignOutResult(Result):
    """`invalidated` is False when there was nothing to sign out.

    Either way the caller no longer holds an authenticated context.
    """

    invalidated: bool


class SignOutHandler(CommandHandler[SignOut, SignOutResult]):
    __auth__ = public()

    session_service: SessionService

    async def run(self, cmd: SignOut) -> SignOutResult:
        invalidated = await self.session_service.sign_out(cmd.access_token)
        return SignOutResult(invalidated=invalidated)
