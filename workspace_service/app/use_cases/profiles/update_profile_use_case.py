"""
Profile Use Cases

Read and update the signed-in user's profile.
"""

from datetime import datetime
from typing import Optional

from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.validators import (
    validate_avatar_url,
    validate_full_name,
)
from workspace_service.libs.result import Error, Result, Return

from .dtos import ProfileActionResponse, ProfileInfo, ProfileResponse

# Distinguishes "leave avatar alone" from "clear avatar"
UNSET = object()


class GetProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Optional[AuthUser]) -> Result[ProfileResponse]:
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        async with self.uow:
            profile = await self.uow.profiles.get_by_id(actor.id)
            return Return.ok(
                ProfileResponse(
                    profile=ProfileInfo.from_entity(profile) if profile else None
                )
            )


class UpdateProfileUseCase:
    """
    Use case for editing the display name and avatar.

    Name, when given, needs at least 2 characters. Avatar may be set to an
    http(s) URL or cleared with None; omitting it leaves it unchanged.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Optional[AuthUser],
        full_name: Optional[str] = None,
        avatar_url=UNSET,
    ) -> Result[ProfileActionResponse]:
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        if full_name is not None:
            checked_name = validate_full_name(full_name)
            if checked_name.is_err():
                return checked_name
            full_name = checked_name.value

        if avatar_url is not UNSET:
            checked_avatar = validate_avatar_url(avatar_url)
            if checked_avatar.is_err():
                return checked_avatar

        async with self.uow:
            profile = await self.uow.profiles.get_by_id(actor.id)
            if profile is None:
                return Return.err(Error("PROFILE_NOT_FOUND", "Profile not found"))

            if full_name:
                profile.full_name = full_name
            if avatar_url is not UNSET:
                profile.avatar_url = avatar_url
            profile.updated_at = datetime.utcnow()

            await self.uow.profiles.update(profile)
            await self.uow.commit()

            return Return.ok(ProfileActionResponse(success=True))


class CompleteOnboardingUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Optional[AuthUser]) -> Result[ProfileActionResponse]:
        if actor is None:
            return Return.err(Error("NOT_AUTHENTICATED", "Not authenticated"))

        async with self.uow:
            profile = await self.uow.profiles.get_by_id(actor.id)
            if profile is None:
                return Return.err(Error("PROFILE_NOT_FOUND", "Profile not found"))

            profile.onboarding_complete = True
            profile.updated_at = datetime.utcnow()
            await self.uow.profiles.update(profile)
            await self.uow.commit()

            return Return.ok(ProfileActionResponse(success=True))
