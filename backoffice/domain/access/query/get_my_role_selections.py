"""GetMyRoleSelections query and handler."""

from backoffice.domain.access.query.dto import RoleSummary
from backoffice.domain.access.service.access import AccessService
from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.shared.authorization.gate import authenticated
from backoffice.domain.shared.query import Query, QueryHandler, Result


class GetMyRoleSelections(Query):
    pass


class RoleSelections(Result):
    items: list[RoleSummary]


class GetMyRoleSelectionsHandler(QueryHandler[GetMyRoleSelections, RoleSelections]):
    """Roles the caller may assign, in tree pre-order, for select boxes."""

    __auth__ = authenticated()
    caller: CallerContext
    access_service: AccessService

    async def run(self, query: GetMyRoleSelections) -> RoleSelections:
        roles = await self.access_service.role_selections(self.caller)
        return RoleSelections(items=[RoleSummary.from_role(r) for r in roles])
