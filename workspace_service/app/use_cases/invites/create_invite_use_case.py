"""
Create Invite Use Case

Issues a short invite code granting a role in a workspace.
"""

import logging
import secrets
import string
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from config import ApplicationConfig
from workspace_service.app.repositories.errors import ConflictError
from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.validators import validate_email, validate_role
from workspace_service.domain.entities import WorkspaceInvite, WorkspaceRole
from workspace_service.domain.roles import has_role_permission
from workspace_service.libs.result import Error, Result, Return

from .dtos import CreateInviteResponse, InviteInfo

logger = logging.getLogger(__name__)

INVITE_CODE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
INVITE_CODE_LENGTH = 8


def generate_invite_code(length: int = INVITE_CODE_LENGTH) -> str:
    """Random code drawn uniformly from 62 alphanumeric characters"""
    return "".join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(length))


class CreateInviteUseCase:
    """
    Use case for creating a workspace invite.

    Business Rules:
    - Actor must be signed in and hold admin rank or higher in the workspace
    - Role defaults to member and can never be owner
    - Email is optional; when given it must be valid
    - Code is 8 characters; a code collision is retried a bounded number
      of times before giving up
    - Invite expires INVITE_TTL_DAYS after creation
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Optional[AuthUser],
        workspace_id: UUID,
        email: Optional[str] = None,
        role: str = WorkspaceRole.member.value,
    ) -> Result[CreateInviteResponse]:
        """
        Execute create invite use case.

        Args:
            actor: Signed-in user, or None
            workspace_id: Workspace to invite into
            email: Optional address the invite is meant for
            role: Role granted on acceptance

        Returns:
            Result with CreateInviteResponse DTO, or Error
        """
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        if email:
            checked_email = validate_email(email)
            if checked_email.is_err():
                return checked_email
            email = checked_email.value
        else:
            email = None

        checked_role = validate_role(role)
        if checked_role.is_err():
            return checked_role
        invite_role = checked_role.value

        async with self.uow:
            membership = await self.uow.members.get_by_workspace_and_user(
                workspace_id, actor.id
            )
            if not has_role_permission(
                membership.role if membership else None, WorkspaceRole.admin
            ):
                return Return.err(
                    Error(
                        "NOT_AUTHORIZED",
                        "You do not have permission to invite members",
                    )
                )

            max_attempts = max(1, int(ApplicationConfig.INVITE_CODE_MAX_ATTEMPTS))
            for attempt in range(1, max_attempts + 1):
                invite = WorkspaceInvite(
                    workspace_id=workspace_id,
                    email=email,
                    role=invite_role,
                    code=generate_invite_code(),
                    created_by=actor.id,
                    expires_at=datetime.utcnow()
                    + timedelta(days=ApplicationConfig.INVITE_TTL_DAYS),
                )
                try:
                    invite = await self.uow.invites.create(invite)
                except ConflictError:
                    # Code collision, discard the failed insert and draw again
                    await self.uow.rollback()
                    logger.warning(
                        "Invite code collision for workspace %s (attempt %d/%d)",
                        workspace_id,
                        attempt,
                        max_attempts,
                    )
                    continue

                await self.uow.commit()

                logger.info(
                    "Invite %s created for workspace %s by %s",
                    invite.id,
                    workspace_id,
                    actor.id,
                )
                return Return.ok(
                    CreateInviteResponse(
                        success=True,
                        invite=InviteInfo.from_entity(invite),
                        invite_link=f"{ApplicationConfig.SITE_URL}/invite/{invite.code}",
                    )
                )

            logger.error(
                "Could not allocate a unique invite code for workspace %s", workspace_id
            )
            return Return.err(
                Error("INVITE_CODE_UNAVAILABLE", "Failed to create invite")
            )
