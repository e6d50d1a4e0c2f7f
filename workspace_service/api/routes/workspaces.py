from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from workspace_service.api.error import raise_for_error
from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.workspaces import (
    AddMemberByEmailUseCase,
    CreateWorkspaceResponse,
    CreateWorkspaceUseCase,
    GetUserWorkspacesUseCase,
    GetWorkspaceMembershipUseCase,
    MembershipResponse,
    UpdateMemberRoleUseCase,
    UserWorkspacesResponse,
    WorkspaceMembershipResponse,
)
from workspace_service.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/workspaces", tags=["Workspaces"])


class CreateWorkspaceRequest(BaseModel):
    name: str = Field(..., description="Workspace name (min 2 chars)")
    slug: str = Field(
        ..., description="URL slug; lower-cased, whitespace becomes hyphens"
    )


class UpdateMemberRoleRequest(BaseModel):
    role: str = Field(..., description="admin, manager, member or viewer")


class AddMemberRequest(BaseModel):
    email: str = Field(..., description="Email of an existing user")
    role: str = Field("member", description="admin, manager, member or viewer")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateWorkspaceResponse)
async def create_workspace(
    request: CreateWorkspaceRequest,
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Workspace

    Creates the workspace with the caller as owner and completes onboarding.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 401 Unauthorized: NOT_AUTHENTICATED
        - 409 Conflict: SLUG_TAKEN
        - 500 Internal Server Error: MEMBERSHIP_SETUP_FAILED
    """
    use_case = CreateWorkspaceUseCase(uow)
    result = await use_case.execute(user, request.name, request.slug)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=UserWorkspacesResponse)
async def list_workspaces(
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetUserWorkspacesUseCase(uow)
    result = await use_case.execute(user)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{workspace_id}/membership",
    status_code=status.HTTP_200_OK,
    response_model=WorkspaceMembershipResponse,
)
async def get_membership(
    workspace_id: UUID,
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Caller's membership in the workspace, null when not a member"""
    use_case = GetWorkspaceMembershipUseCase(uow)
    result = await use_case.execute(user, workspace_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{workspace_id}/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=MembershipResponse,
)
async def update_member_role(
    workspace_id: UUID,
    user_id: UUID,
    request: UpdateMemberRoleRequest,
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Member Role

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: NOT_AUTHORIZED, CANNOT_CHANGE_OWNER
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
    """
    use_case = UpdateMemberRoleUseCase(uow)
    result = await use_case.execute(user, workspace_id, user_id, request.role)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{workspace_id}/members",
    status_code=status.HTTP_201_CREATED,
    response_model=MembershipResponse,
)
async def add_member(
    workspace_id: UUID,
    request: AddMemberRequest,
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add Member By Email

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, INVALID_ROLE
        - 403 Forbidden: NOT_AUTHORIZED
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER
    """
    use_case = AddMemberByEmailUseCase(uow)
    result = await use_case.execute(user, workspace_id, request.email, request.role)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
