"""
List Workspace Invites Use Case
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.domain.entities import WorkspaceRole
from workspace_service.domain.roles import has_role_permission
from workspace_service.libs.result import Error, Result, Return

from .dtos import InviteInfo, ListInvitesResponse


class ListWorkspaceInvitesUseCase:
    """
    Use case for listing the pending invites of a workspace.

    Only invites that are unaccepted and unexpired are returned, newest
    first. Codes grant access, so the caller must be an admin or owner.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Optional[AuthUser], workspace_id: UUID
    ) -> Result[ListInvitesResponse]:
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        async with self.uow:
            membership = await self.uow.members.get_by_workspace_and_user(
                workspace_id, actor.id
            )
            if not has_role_permission(
                membership.role if membership else None, WorkspaceRole.admin
            ):
                return Return.err(
                    Error("NOT_AUTHORIZED", "You do not have permission to view invites")
                )

            invites = await self.uow.invites.get_pending_by_workspace(
                workspace_id, datetime.utcnow()
            )
            return Return.ok(
                ListInvitesResponse(
                    invites=[InviteInfo.from_entity(invite) for invite in invites]
                )
            )
