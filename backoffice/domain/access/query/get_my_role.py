"""GetMyRole query and handler."""

from backoffice.domain.access.query.dto import RoleSummary
from backoffice.domain.access.service.access import AccessService
from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.shared.authorization.gate import authenticated
from backoffice.domain.shared.query import Query, QueryHandler, Result


class GetMyRole(Query):
    pass


class MyRole(Result):
    role: RoleSummary | None
    is_super_admin: bool
    menu_ids: list[int]


class GetMyRoleHandler(QueryHandler[GetMyRole, MyRole]):
    __auth__ = authenticated()
    caller: CallerContext
    access_service: AccessService

    async def run(self, query: GetMyRole) -> MyRole:
        role, menu_ids = await self.access_service.my_role(self.caller)
        return MyRole(
            role=RoleSummary.from_role(role) if role is not None else None,
            is_super_admin=self.caller.is_super_admin,
            menu_ids=[m.root for m in menu_ids],
        )
