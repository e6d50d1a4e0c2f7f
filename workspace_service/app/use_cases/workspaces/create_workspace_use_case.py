"""
Create Workspace Use Case

Creates a workspace and seats its creator as owner.
"""

import logging
from datetime import datetime
from typing import Optional

from workspace_service.app.repositories.errors import ConflictError
from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.validators import (
    validate_slug,
    validate_workspace_name,
)
from workspace_service.domain.entities import Workspace, WorkspaceMember, WorkspaceRole
from workspace_service.libs.result import Error, Result, Return

from .dtos import CreateWorkspaceResponse, WorkspaceInfo

logger = logging.getLogger(__name__)


class CreateWorkspaceUseCase:
    """
    Use case for creating a workspace.

    Business Rules:
    - Name needs at least 2 characters
    - Slug is lower-cased, whitespace becomes hyphens, then it must be at
      least 2 characters of [a-z0-9-]
    - A taken slug fails with SLUG_TAKEN and writes nothing
    - The creator becomes a member with role owner; if that insert fails the
      whole transaction is rolled back so no memberless workspace remains
    - The creator's onboarding is marked complete
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Optional[AuthUser], name: str, slug: str
    ) -> Result[CreateWorkspaceResponse]:
        """
        Execute create workspace use case.

        Args:
            actor: Signed-in user, or None
            name: Display name
            slug: URL-safe identifier, normalized before validation

        Returns:
            Result with CreateWorkspaceResponse DTO, or Error
        """
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        checked_name = validate_workspace_name(name)
        if checked_name.is_err():
            return checked_name

        checked_slug = validate_slug(slug)
        if checked_slug.is_err():
            return checked_slug
        slug = checked_slug.value

        async with self.uow:
            try:
                workspace = await self.uow.workspaces.create(
                    Workspace(name=checked_name.value, slug=slug, owner_id=actor.id)
                )
            except ConflictError:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        "SLUG_TAKEN",
                        f"A workspace with the slug '{slug}' already exists",
                        {"slug": slug},
                    )
                )

            try:
                await self.uow.members.create(
                    WorkspaceMember(
                        workspace_id=workspace.id,
                        user_id=actor.id,
                        role=WorkspaceRole.owner,
                    )
                )
            except ConflictError:
                # Discards the uncommitted workspace row along with the member
                await self.uow.rollback()
                logger.error(
                    "Error adding owner %s to new workspace %s", actor.id, slug
                )
                return Return.err(
                    Error(
                        "MEMBERSHIP_SETUP_FAILED",
                        "Failed to set up workspace membership",
                    )
                )

            profile = await self.uow.profiles.get_by_id(actor.id)
            if profile is not None and not profile.onboarding_complete:
                profile.onboarding_complete = True
                profile.updated_at = datetime.utcnow()
                await self.uow.profiles.update(profile)

            await self.uow.commit()

            logger.info("Workspace %s (%s) created by %s", workspace.id, slug, actor.id)
            return Return.ok(
                CreateWorkspaceResponse(
                    success=True,
                    workspace=WorkspaceInfo.from_entity(workspace),
                    redirect_to="/board",
                )
            )
