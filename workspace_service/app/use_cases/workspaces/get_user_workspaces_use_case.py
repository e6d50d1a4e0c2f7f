"""
Workspace Read Use Cases

Workspaces and memberships of the signed-in user.
"""

from typing import Optional
from uuid import UUID

from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.libs.result import Error, Result, Return

from .dtos import (
    MemberInfo,
    UserWorkspacesResponse,
    WorkspaceInfo,
    WorkspaceMembershipResponse,
)


class GetUserWorkspacesUseCase:
    """Use case for listing the workspaces the actor belongs to"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Optional[AuthUser]) -> Result[UserWorkspacesResponse]:
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        async with self.uow:
            workspaces = await self.uow.workspaces.get_by_member(actor.id)
            return Return.ok(
                UserWorkspacesResponse(
                    workspaces=[WorkspaceInfo.from_entity(w) for w in workspaces]
                )
            )


class GetWorkspaceMembershipUseCase:
    """Use case for reading the actor's own membership in a workspace"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Optional[AuthUser], workspace_id: UUID
    ) -> Result[WorkspaceMembershipResponse]:
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        async with self.uow:
            membership = await self.uow.members.get_by_workspace_and_user(
                workspace_id, actor.id
            )
            return Return.ok(
                WorkspaceMembershipResponse(
                    membership=MemberInfo.from_entity(membership) if membership else None
                )
            )
