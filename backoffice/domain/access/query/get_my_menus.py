"""GetMyMenus query and handler."""

from backoffice.domain.access.query.dto import MenuNode, menu_nodes
from backoffice.domain.access.service.access import AccessService
from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.shared.authorization.gate import authenticated
from backoffice.domain.shared.query import Query, QueryHandler, Result


class GetMyMenus(Query):
    pass


class MenuTree(Result):
    items: list[MenuNode]


class GetMyMenusHandler(QueryHandler[GetMyMenus, MenuTree]):
    __auth__ = authenticated()
    caller: CallerContext
    access_service: AccessService

    async def run(self, query: GetMyMenus) -> MenuTree:
        forest = await self.access_service.visible_menus(self.caller)
        return MenuTree(items=menu_nodes(forest))
