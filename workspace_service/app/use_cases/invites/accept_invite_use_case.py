"""
Accept Invite Use Case

Joins the signed-in user to the invite's workspace.
"""

import logging
from datetime import datetime
from typing import Optional

from workspace_service.app.repositories.errors import ConflictError
from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.domain.entities import WorkspaceMember
from workspace_service.libs.result import Error, Result, Return

from .dtos import AcceptInviteResponse
from .get_invite_by_code_use_case import invite_not_found_error, invite_state_error

logger = logging.getLogger(__name__)


def already_member_error(workspace_id) -> Error:
    return Error(
        "ALREADY_MEMBER",
        "You are already a member of this workspace",
        {"workspace_id": str(workspace_id)},
    )


class AcceptInviteUseCase:
    """
    Use case for accepting a workspace invite.

    Business Rules:
    - Actor must be signed in
    - Invite must exist
    - An existing member of the invite's workspace gets ALREADY_MEMBER with
      the workspace id and nothing is written, even when the invite is
      already spent (accepting the same code twice)
    - Anyone else needs the invite unexpired and unused
    - Otherwise one transaction inserts the membership with the invite's
      role, marks the invite accepted and completes the actor's onboarding
    - The (workspace_id, user_id) key is the authority on duplicates: a
      concurrent acceptance that loses the insert race is reported as
      ALREADY_MEMBER, not as a failure
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Optional[AuthUser], code: str
    ) -> Result[AcceptInviteResponse]:
        """
        Execute accept invite use case.

        Args:
            actor: Signed-in user, or None
            code: Invite code

        Returns:
            Result with AcceptInviteResponse DTO, or Error
        """
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        async with self.uow:
            now = datetime.utcnow()
            invite = await self.uow.invites.get_by_code(code)
            if invite is None:
                return Return.err(invite_not_found_error())
            workspace_id = invite.workspace_id

            existing = await self.uow.members.get_by_workspace_and_user(
                workspace_id, actor.id
            )
            if existing is not None:
                return Return.err(already_member_error(workspace_id))

            unusable = invite_state_error(invite, now)
            if unusable is not None:
                return Return.err(unusable)

            workspace = await self.uow.workspaces.get_by_id(workspace_id)
            workspace_name = workspace.name if workspace else None

            try:
                await self.uow.members.create(
                    WorkspaceMember(
                        workspace_id=workspace_id,
                        user_id=actor.id,
                        role=invite.role,
                    )
                )
            except ConflictError:
                await self.uow.rollback()
                logger.info(
                    "Concurrent acceptance of invite %s by %s, already a member",
                    code,
                    actor.id,
                )
                return Return.err(already_member_error(workspace_id))

            invite.accepted_at = now
            invite.accepted_by = actor.id
            await self.uow.invites.update(invite)

            profile = await self.uow.profiles.get_by_id(actor.id)
            if profile is not None and not profile.onboarding_complete:
                profile.onboarding_complete = True
                profile.updated_at = now
                await self.uow.profiles.update(profile)

            await self.uow.commit()

            logger.info("Invite %s accepted by %s", invite.id, actor.id)
            return Return.ok(
                AcceptInviteResponse(
                    success=True,
                    workspace_id=str(workspace_id),
                    workspace_name=workspace_name,
                )
            )
