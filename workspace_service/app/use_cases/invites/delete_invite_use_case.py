"""
Delete Invite Use Case

Revokes an invite by removing it.
"""

import logging
from typing import Optional
from uuid import UUID

from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.domain.entities import WorkspaceRole
from workspace_service.domain.roles import has_role_permission
from workspace_service.libs.result import Error, Result, Return

from .dtos import DeleteInviteResponse

logger = logging.getLogger(__name__)


class DeleteInviteUseCase:
    """
    Use case for revoking an invite.

    Business Rules:
    - Removal is unconditional with respect to the invite's state
      (pending, accepted or expired)
    - Actor must be an admin or owner of the invite's workspace
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Optional[AuthUser], invite_id: UUID
    ) -> Result[DeleteInviteResponse]:
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        async with self.uow:
            invite = await self.uow.invites.get_by_id(invite_id)
            if invite is None:
                return Return.err(Error("INVITE_NOT_FOUND", "Invite not found"))

            membership = await self.uow.members.get_by_workspace_and_user(
                invite.workspace_id, actor.id
            )
            if not has_role_permission(
                membership.role if membership else None, WorkspaceRole.admin
            ):
                return Return.err(
                    Error("NOT_AUTHORIZED", "You do not have permission to delete invites")
                )

            await self.uow.invites.delete(invite_id)
            await self.uow.commit()

            logger.info("Invite %s deleted by %s", invite_id, actor.id)
            return Return.ok(DeleteInviteResponse(success=True))
