"""
Get Current User Use Case

Signed-in user with profile and active workspace membership.
"""

from typing import Optional

from workspace_service.app.services.auth_provider import AuthUser
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.app.use_cases.workspaces.dtos import MemberInfo
from workspace_service.libs.result import Result, Return

from .dtos import CurrentUserInfo, CurrentUserResponse, ProfileInfo


class GetCurrentUserUseCase:
    """
    Use case for the "who am I" view.

    The active membership is the user's first (oldest) membership; there is
    no active-workspace selection yet. A signed-out caller gets an empty
    response rather than an error.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Optional[AuthUser]) -> Result[CurrentUserResponse]:
        if actor is None:
            return Return.ok(CurrentUserResponse())

        async with self.uow:
            profile = await self.uow.profiles.get_by_id(actor.id)
            memberships = await self.uow.members.get_by_user_id(actor.id)
            membership = memberships[0] if memberships else None

            return Return.ok(
                CurrentUserResponse(
                    user=CurrentUserInfo(id=str(actor.id), email=actor.email),
                    profile=ProfileInfo.from_entity(profile) if profile else None,
                    membership=MemberInfo.from_entity(membership) if membership else None,
                )
            )
