"""EditProfile command and handler."""

from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.profile.model.profile import AdminProfile
from backoffice.domain.profile.service.profile import ProfileService
from backoffice.domain.shared.authorization.gate import authenticated
from backoffice.domain.shared.command import Command, CommandHandler, Result


class EditProfile(Command):
    name: str
    password: str


class EditProfileResult(Result):
    profile: AdminProfile


class EditProfileHandler(CommandHandler[EditProfile, EditProfileResult]):
    __auth__ = authenticated()
    caller: CallerContext
    profile_service: ProfileService

    async def run(self, cmd: EditProfile) -> EditProfileResult:
        profile = await self.profile_service.edit_profile(self.caller, cmd.name, cmd.password)
        return EditProfileResult(profile=profile)
