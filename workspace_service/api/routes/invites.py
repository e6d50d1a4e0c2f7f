from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from workspace_service.api.error import raise_for_error
from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.invites import (
    AcceptInviteResponse,
    AcceptInviteUseCase,
    CreateInviteResponse,
    CreateInviteUseCase,
    DeleteInviteResponse,
    DeleteInviteUseCase,
    GetInviteByCodeUseCase,
    InviteInfo,
    ListInvitesResponse,
    ListWorkspaceInvitesUseCase,
)
from workspace_service.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["Invites"])


class CreateInviteRequest(BaseModel):
    """
    Create invite HTTP request payload

    Without an email the invite is an open link anyone can redeem.
    """

    email: Optional[str] = Field(None, description="Invitee email address")
    role: str = Field("member", description="admin, manager, member or viewer")


@router.post(
    "/workspaces/{workspace_id}/invites",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateInviteResponse,
)
async def create_invite(
    workspace_id: UUID,
    request: CreateInviteRequest,
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Invite

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, INVALID_ROLE
        - 403 Forbidden: NOT_AUTHORIZED (admin or owner only)
        - 500 Internal Server Error: INVITE_CODE_UNAVAILABLE
    """
    use_case = CreateInviteUseCase(uow)
    result = await use_case.execute(user, workspace_id, request.email, request.role)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/workspaces/{workspace_id}/invites",
    status_code=status.HTTP_200_OK,
    response_model=ListInvitesResponse,
)
async def list_invites(
    workspace_id: UUID,
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Pending invites of the workspace, newest first"""
    use_case = ListWorkspaceInvitesUseCase(uow)
    result = await use_case.execute(user, workspace_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/invites/{code}", status_code=status.HTTP_200_OK, response_model=InviteInfo)
async def get_invite(code: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Resolve Invite

    Public lookup, no session needed.

    Raises:
        - 404 Not Found: INVITE_NOT_FOUND
        - 409 Conflict: INVITE_ALREADY_USED
        - 410 Gone: INVITE_EXPIRED
    """
    use_case = GetInviteByCodeUseCase(uow)
    result = await use_case.execute(code)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/invites/{code}/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInviteResponse,
)
async def accept_invite(
    code: str,
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invite

    Raises:
        - 401 Unauthorized: NOT_AUTHENTICATED
        - 404 Not Found: INVITE_NOT_FOUND
        - 409 Conflict: INVITE_ALREADY_USED, ALREADY_MEMBER (with workspace_id)
        - 410 Gone: INVITE_EXPIRED
    """
    use_case = AcceptInviteUseCase(uow)
    result = await use_case.execute(user, code)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/invites/{invite_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteInviteResponse,
)
async def delete_invite(
    invite_id: UUID,
    user: AuthUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke Invite

    Raises:
        - 403 Forbidden: NOT_AUTHORIZED
        - 404 Not Found: INVITE_NOT_FOUND
    """
    use_case = DeleteInviteUseCase(uow)
    result = await use_case.execute(user, invite_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
