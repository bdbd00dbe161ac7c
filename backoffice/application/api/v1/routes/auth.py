"""Sign-in and sign-out routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from backoffice.domain.auth.command.sign_in import SignIn, SignInHandler, SignInResult
from backoffice.domain.auth.command.sign_out import SignOut, SignOutHandler
from backoffice.domain.auth.util.di.provider import bearer_token

router = APIRouter(tags=["Authentication"], route_class=DishkaRoute)


class SignInRequest(BaseModel):
    """Request body for sign-in."""

    login_id: str
    password: str


@router.post("/sign-in", response_model=SignInResult)
async def sign_in(
    body: SignInRequest,
    handler: FromDishka[SignInHandler],
) -> SignInResult:
    """Exchange login credentials for a bearer access token."""
    return await handler.run(SignIn(login_id=body.login_id, password=body.password))


@router.delete("/sign-out", status_code=204)
async def sign_out(
    request: Request,
    handler: FromDishka[SignOutHandler],
) -> Response:
    """Invalidate the presented token. Always succeeds, signed in or not."""
    await handler.run(SignOut(access_token=bearer_token(request)))
    return Response(status_code=204)
