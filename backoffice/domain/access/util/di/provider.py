"""DI provider for access domain."""

from dishka import provide

from backoffice.domain.access.query.get_my_menus import GetMyMenusHandler
from backoffice.domain.access.query.get_my_role import GetMyRoleHandler
from backoffice.domain.access.query.get_my_role_selections import GetMyRoleSelectionsHandler
from backoffice.domain.access.query.get_my_roles import GetMyRolesHandler
from backoffice.domain.access.service.access import AccessService
from backoffice.util.di.base import Provider
from backoffice.util.di.scope import Scope


class AccessProvider(Provider):
    # Services
    access_service = provide(AccessService, scope=Scope.UOW)

    # Query Handlers
    get_my_menus_handler = provide(GetMyMenusHandler, scope=Scope.UOW)
    get_my_roles_handler = provide(GetMyRolesHandler, scope=Scope.UOW)
    get_my_role_selections_handler = provide(GetMyRoleSelectionsHandler, scope=Scope.UOW)
    get_my_role_handler = provide(GetMyRoleHandler, scope=Scope.UOW)
