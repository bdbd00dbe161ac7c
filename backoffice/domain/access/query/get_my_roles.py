"""GetMyRoles query and handler."""

from backoffice.domain.access.query.dto import RoleNode, role_nodes
from backoffice.domain.access.service.access import AccessService
from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.shared.authorization.gate import authenticated
from backoffice.domain.shared.query import Query, QueryHandler, Result


class GetMyRoles(Query):
    pass


class RoleTree(Result):
    items: list[RoleNode]


class GetMyRolesHandler(QueryHandler[GetMyRoles, RoleTree]):
    __auth__ = authenticated()
    caller: CallerContext
    access_service: AccessService

    async def run(self, query: GetMyRoles) -> RoleTree:
        forest = await self.access_service.role_tree(self.caller)
        return RoleTree(items=role_nodes(forest))
