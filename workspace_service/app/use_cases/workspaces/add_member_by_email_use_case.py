"""
Add Member By Email Use Case

Seats an existing account in a workspace directly, without an invite code.
"""

import logging
from typing import Optional
from uuid import UUID

from workspace_service.app.repositories.errors import ConflictError
from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.validators import validate_email, validate_role
from workspace_service.domain.entities import WorkspaceMember, WorkspaceRole
from workspace_service.domain.roles import has_role_permission
from workspace_service.libs.result import Error, Result, Return

from .dtos import MemberInfo, MembershipResponse

logger = logging.getLogger(__name__)


class AddMemberByEmailUseCase:
    """
    Use case for adding a signed-up user to a workspace by email.

    Business Rules:
    - Actor must hold admin rank or higher in the workspace
    - Role must be assignable (never owner)
    - Target must already have a profile, otherwise USER_NOT_FOUND
    - Existing members fail with ALREADY_MEMBER, including when a
      concurrent add wins the insert
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Optional[AuthUser],
        workspace_id: UUID,
        email: str,
        role: str = WorkspaceRole.member.value,
    ) -> Result[MembershipResponse]:
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        checked_email = validate_email(email)
        if checked_email.is_err():
            return checked_email

        checked_role = validate_role(role)
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
                        "You do not have permission to invite members",
                    )
                )

            target_profile = await self.uow.profiles.get_by_email(checked_email.value)
            if target_profile is None:
                return Return.err(
                    Error("USER_NOT_FOUND", "User not found. They must sign up first.")
                )
            target_user_id = target_profile.id

            existing = await self.uow.members.get_by_workspace_and_user(
                workspace_id, target_user_id
            )
            if existing is not None:
                return Return.err(
                    Error("ALREADY_MEMBER", "User is already a member of this workspace")
                )

            try:
                member = await self.uow.members.create(
                    WorkspaceMember(
                        workspace_id=workspace_id,
                        user_id=target_user_id,
                        role=checked_role.value,
                    )
                )
            except ConflictError:
                await self.uow.rollback()
                return Return.err(
                    Error("ALREADY_MEMBER", "User is already a member of this workspace")
                )

            await self.uow.commit()

            logger.info(
                "%s added to workspace %s as %s by %s",
                target_user_id,
                workspace_id,
                member.role.value,
                actor.id,
            )
            return Return.ok(
                MembershipResponse(success=True, membership=MemberInfo.from_entity(member))
            )
