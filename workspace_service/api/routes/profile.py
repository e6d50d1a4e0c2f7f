from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from workspace_service.api.error import raise_for_error
from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.profiles import (
    UNSET,
    CompleteOnboardingUseCase,
    CreateProfileManuallyUseCase,
    GetProfileUseCase,
    ProfileActionResponse,
    ProfileResponse,
    UpdateProfileUseCase,
)
from workspace_service.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/profile", tags=["Profile"])


class CreateProfileRequest(BaseModel):
    full_name: str = Field(..., description="Display name (min 2 chars)")


class UpdateProfileRequest(BaseModel):
    """Omitted fields are left unchanged; avatar_url may be null to clear it"""

    full_name: Optional[str] = Field(None, description="Display name (min 2 chars)")
    avatar_url: Optional[str] = Field(None, description="http(s) avatar URL")


@router.get("", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_profile(
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(user)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_200_OK, response_model=ProfileActionResponse)
async def create_profile(
    request: CreateProfileRequest,
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Profile

    Fallback for accounts whose profile was not created at sign-up.
    Succeeds when the profile already exists.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 401 Unauthorized: NOT_AUTHENTICATED
    """
    use_case = CreateProfileManuallyUseCase(uow)
    result = await use_case.execute(user, request.full_name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("", status_code=status.HTTP_200_OK, response_model=ProfileActionResponse)
async def update_profile(
    request: UpdateProfileRequest,
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Profile

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 404 Not Found: PROFILE_NOT_FOUND
    """
    avatar_url = (
        request.avatar_url if "avatar_url" in request.model_fields_set else UNSET
    )

    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(user, request.full_name, avatar_url)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/onboarding-complete",
    status_code=status.HTTP_200_OK,
    response_model=ProfileActionResponse,
)
async def complete_onboarding(
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = CompleteOnboardingUseCase(uow)
    result = await use_case.execute(user)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
