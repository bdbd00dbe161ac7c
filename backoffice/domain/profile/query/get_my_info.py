"""GetMyInfo query and handler."""

from backoffice.domain.auth.model.caller import CallerContext
from backoffice.domain.profile.model.profile import AdminProfile
from backoffice.domain.profile.service.profile import ProfileService
from backoffice.domain.shared.authorization.gate import authenticated
from backoffice.domain.shared.query import Query, QueryHandler, Result


class GetMyInfo(Query):
    pass


class MyInfo(Result):
    profile: AdminProfile


class GetMyInfoHandler(QueryHandler[GetMyInfo, MyInfo]):
    __auth__ = authenticated()
    caller: CallerContext
    profile_service: ProfileService

    async def run(self, query: GetMyInfo) -> MyInfo:
        return MyInfo(profile=await self.profile_service.get_my_info(self.caller))
