from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import RedirectResponse

from workspace_service.api.error import raise_for_error
from workspace_service.api.utils.cookies import apply_cookies
from workspace_service.app.services.auth_provider import AuthUser, IAuthProvider
from workspace_service.app.services.route_guard import login_redirect
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.auth import AuthCallbackUseCase
from workspace_service.app.use_cases.invites import GetInviteByCodeUseCase, InviteInfo
from workspace_service.app.use_cases.profiles import (
    CurrentUserResponse,
    GetCurrentUserUseCase,
)
from workspace_service.depends import (
    get_auth_provider,
    get_current_user_optional,
    get_unit_of_work,
)

router = APIRouter(tags=["Pages"])


@router.get("/", status_code=status.HTTP_200_OK, response_model=CurrentUserResponse)
@router.get("/board", status_code=status.HTTP_200_OK, response_model=CurrentUserResponse)
async def board(
    user: Optional[AuthUser] = Depends(get_current_user_optional),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Board landing: the signed-in user's context (guarded by the session middleware)"""
    use_case = GetCurrentUserUseCase(uow)
    result = await use_case.execute(user)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/auth/callback")
async def auth_callback(
    code: Optional[str] = None,
    next_path: Optional[str] = Query(None, alias="next"),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Confirmation link target.

    Always redirects: onward into onboarding or `next` on success, back to
    login with an error flag on failure.
    """
    use_case = AuthCallbackUseCase(auth_provider, uow)
    result = await use_case.execute(code, next_path)

    if result.is_err():
        raise_for_error(result.error)

    response = RedirectResponse(result.value.redirect_to, status_code=307)
    apply_cookies(response, result.value.cookies_to_set)
    return response


@router.get("/invite/{code}", status_code=status.HTTP_200_OK, response_model=InviteInfo)
async def invite_landing(
    code: str,
    user: Optional[AuthUser] = Depends(get_current_user_optional),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Invite landing page.

    Invalid invites render their error. Signed-out visitors are sent to
    login and returned here afterwards.
    """
    use_case = GetInviteByCodeUseCase(uow)
    result = await use_case.execute(code)

    if result.is_err():
        raise_for_error(result.error)

    if user is None:
        return RedirectResponse(login_redirect(f"/invite/{code}"), status_code=307)

    return result.value
