"""DI provider for profile domain."""

from dishka import provide

from backoffice.domain.profile.command.change_password import ChangePasswordHandler
from backoffice.domain.profile.command.edit_profile import EditProfileHandler
from backoffice.domain.profile.command.upsert_config import UpsertConfigHandler
from backoffice.domain.profile.command.verify_password import VerifyPasswordHandler
from backoffice.domain.profile.query.get_my_config import GetMyConfigHandler
from backoffice.domain.profile.query.get_my_info import GetMyInfoHandler
from backoffice.domain.profile.service.profile import ProfileService
from backoffice.util.di.base import Provider
from backoffice.util.di.scope import Scope


class ProfileProvider(Provider):
    # Services
    profile_service = provide(ProfileService, scope=Scope.UOW)

    # Command Handlers
    edit_profile_handler = provide(EditProfileHandler, scope=Scope.UOW)
    change_password_handler = provide(ChangePasswordHandler, scope=Scope.UOW)
    verify_password_handler = provide(VerifyPasswordHandler, scope=Scope.UOW)
    upsert_config_handler = provide(UpsertConfigHandler, scope=Scope.UOW)

    # Query Handlers
    get_my_info_handler = provide(GetMyInfoHandler, scope=Scope.UOW)
    get_my_config_handler = provide(GetMyConfigHandler, scope=Scope.UOW)
