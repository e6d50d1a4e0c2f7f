from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, Field

from workspace_service.api.error import raise_for_error
from workspace_service.api.utils.cookies import apply_cookies
from workspace_service.app.services.auth_provider import AuthUser, IAuthProvider
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    SignOutResponse,
    SignOutUseCase,
    SignUpResponse,
    SignUpUseCase,
)
from workspace_service.app.use_cases.profiles import (
    CurrentUserResponse,
    GetCurrentUserUseCase,
)
from workspace_service.depends import (
    get_auth_provider,
    get_current_user_optional,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignUpRequest(BaseModel):
    """
    Sign up HTTP request payload

    Field rules (valid email, password length, name length) are enforced by
    the use case so the error messages stay the same for every caller.
    """

    email: str = Field(..., description="User email address")
    password: str = Field(..., description="Password (min 6 chars)")
    full_name: str = Field(..., description="Display name (min 2 chars)")


class LoginRequest(BaseModel):
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="Password")
    redirect_to: Optional[str] = Field(
        None, description="Same-site path to continue to after login"
    )


@router.post("/signup", status_code=status.HTTP_200_OK, response_model=SignUpResponse)
async def signup(
    request: SignUpRequest,
    response: Response,
    auth_provider: IAuthProvider = Depends(get_auth_provider),
):
    """
    Sign Up

    Creates an account. When email confirmation is required no session is
    issued and `email_confirmation` is true.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 409 Conflict: EMAIL_ALREADY_EXISTS
    """
    use_case = SignUpUseCase(auth_provider)
    result = await use_case.execute(request.email, request.password, request.full_name)

    if result.is_err():
        raise_for_error(result.error)

    apply_cookies(response, result.value.cookies_to_set)
    return result.value


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    auth_provider: IAuthProvider = Depends(get_auth_provider),
):
    """
    Login

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 401 Unauthorized: INVALID_CREDENTIALS
        - 403 Forbidden: EMAIL_NOT_CONFIRMED
    """
    use_case = LoginUseCase(auth_provider)
    result = await use_case.execute(
        request.email, request.password, request.redirect_to
    )

    if result.is_err():
        raise_for_error(result.error)

    apply_cookies(response, result.value.cookies_to_set)
    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=SignOutResponse)
async def logout(
    request: Request,
    response: Response,
    auth_provider: IAuthProvider = Depends(get_auth_provider),
):
    """Revoke the current session and clear its cookies"""
    use_case = SignOutUseCase(auth_provider)
    result = await use_case.execute(dict(request.cookies))

    if result.is_err():
        raise_for_error(result.error)

    apply_cookies(response, result.value.cookies_to_set)
    return result.value


@router.get("/user", status_code=status.HTTP_200_OK, response_model=CurrentUserResponse)
async def current_user(
    user: Optional[AuthUser] = Depends(get_current_user_optional),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Current user, profile and first membership; all null when signed out"""
    use_case = GetCurrentUserUseCase(uow)
    result = await use_case.execute(user)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
