"""
Update Member Role Use Case

Handles changing a member's role within a workspace.
"""

import logging
from typing import Optional
from uuid import UUID

from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.validators import validate_role
from workspace_service.domain.entities import WorkspaceRole
from workspace_service.domain.roles import has_role_permission
from workspace_service.libs.result import Error, Result, Return

from .dtos import MemberInfo, MembershipResponse

logger = logging.getLogger(__name__)


class UpdateMemberRoleUseCase:
    """
    Use case for changing a member's role within a workspace.

    Business Rules:
    - New role must be admin, manager, member or viewer
    - Actor must hold admin rank or higher in the workspace
    - Target must be a member
    - An owner's role is never changed here, whoever asks
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Optional[AuthUser],
        workspace_id: UUID,
        target_user_id: UUID,
        new_role: str,
    ) -> Result[MembershipResponse]:
        """
        Execute update member role use case.

        Args:
            actor: Signed-in user, or None
            workspace_id: Workspace ID
            target_user_id: User whose role is being changed
            new_role: Role to assign

        Returns:
            Result with the updated membership, or Error
        """
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        checked_role = validate_role(new_role)
        if checked_role.is_err():
            return checked_role

        async with self.uow:
            actor_membership = await self.uow.members.get_by_workspace_and_user(
                workspace_id, actor.id
            )
            if not has_role_permission(
                actor_membership.role if actor_membership else None,
                WorkspaceRole.admin,
            ):
                return Return.err(
                    Error(
                        "NOT_AUTHORIZED",
                        "You do not have permission to change roles",
                    )
                )

            target = await self.uow.members.get_by_workspace_and_user(
                workspace_id, target_user_id
            )
            if target is None:
                return Return.err(
                    Error(
                        "MEMBERSHIP_NOT_FOUND",
                        "User is not a member of this workspace",
                    )
                )

            if target.role == WorkspaceRole.owner:
                return Return.err(
                    Error("CANNOT_CHANGE_OWNER", "Cannot change the owner role")
                )

            old_role = target.role
            target.role = checked_role.value
            target = await self.uow.members.update(target)

            await self.uow.commit()

            logger.info(
                "Role of %s in workspace %s changed from %s to %s by %s",
                target_user_id,
                workspace_id,
                old_role.value,
                target.role.value,
                actor.id,
            )
            return Return.ok(
                MembershipResponse(success=True, membership=MemberInfo.from_entity(target))
            )
