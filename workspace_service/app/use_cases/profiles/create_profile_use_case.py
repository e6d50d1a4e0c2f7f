"""
Create Profile Manually Use Case

Fallback for accounts whose profile was not created at signup.
"""

import logging
from typing import Optional

from workspace_service.app.repositories.errors import ConflictError
from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.validators import validate_full_name
from workspace_service.domain.entities import Profile
from workspace_service.libs.result import Error, Result, Return

from .dtos import ProfileActionResponse

logger = logging.getLogger(__name__)


class CreateProfileManuallyUseCase:
    """
    Use case for creating a missing profile.

    Business Rules:
    - Actor must be signed in
    - Idempotent: an existing profile, or one that appears concurrently
      (unique conflict on insert), counts as success
    - The new profile starts with onboarding incomplete
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Optional[AuthUser], full_name: str
    ) -> Result[ProfileActionResponse]:
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        checked_name = validate_full_name(full_name)
        if checked_name.is_err():
            return checked_name

        async with self.uow:
            existing = await self.uow.profiles.get_by_id(actor.id)
            if existing is not None:
                return Return.ok(ProfileActionResponse(success=True))

            try:
                await self.uow.profiles.create(
                    Profile(
                        id=actor.id,
                        email=actor.email,
                        full_name=checked_name.value,
                        onboarding_complete=False,
                    )
                )
            except ConflictError:
                # The signup path created it in the meantime
                await self.uow.rollback()
                logger.info("Profile for %s already exists", actor.id)
                return Return.ok(ProfileActionResponse(success=True))

            await self.uow.commit()

            logger.info("Profile for %s created manually", actor.id)
            return Return.ok(ProfileActionResponse(success=True))
