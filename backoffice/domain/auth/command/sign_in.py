"""SignIn command and handler."""

from backoffice.domain.auth.service.session import SessionService
from backoffice.domain.auth.service.token import TokenService
from backoffice.domain.shared.authorization.gate import public
from backoffice.domain.shared.command import Command, CommandHandler, Result


class SignIn(Command):
    """Command to exchange login credentials for an access token."""

    login_id: str
    password: str


class SignInResult(Result):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    admin_id: int
    name: str
    is_super_admin: bool


class SignInHandler(CommandHandler[SignIn, SignInResult]):
    __auth__ = public()

    session_service: SessionService
    token_service: TokenService

    async def run(self, cmd: SignIn) -> SignInResult:
        admin, token = await self.session_service.sign_in(cmd.login_id, cmd.password)
        return SignInResult(
            access_token=token.raw,
            expires_in=self.token_service.access_token_expire_seconds,
            admin_id=admin.id.root,
            name=admin.name,
            is_super_admin=admin.is_super_admin,
        )
