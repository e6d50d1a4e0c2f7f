"""
Get Invite By Code Use Case

Resolves an invite code to a still-acceptable invite.
"""

from datetime import datetime
from typing import Optional, Tuple

from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.domain.entities import Workspace, WorkspaceInvite
from workspace_service.libs.result import Error, Result, Return

from .dtos import InviteInfo


def invite_not_found_error() -> Error:
    return Error("INVITE_NOT_FOUND", "Invite not found")


def invite_state_error(invite: WorkspaceInvite, now: datetime) -> Optional[Error]:
    """Why the invite can no longer be accepted, None while it still can"""
    if invite.is_expired(now):
        return Error("INVITE_EXPIRED", "This invite has expired")
    if invite.is_accepted():
        return Error("INVITE_ALREADY_USED", "This invite has already been used")
    return None


async def resolve_invite(
    uow: UnitOfWork, code: str, now: Optional[datetime] = None
) -> Result[Tuple[WorkspaceInvite, Optional[Workspace]]]:
    """
    Look up an invite by code and check it can still be accepted.

    Expiry is checked before acceptance, so an expired invite reports
    INVITE_EXPIRED even if it was also used.
    """
    invite = await uow.invites.get_by_code(code)
    if invite is None:
        return Return.err(invite_not_found_error())

    unusable = invite_state_error(invite, now or datetime.utcnow())
    if unusable is not None:
        return Return.err(unusable)

    workspace = await uow.workspaces.get_by_id(invite.workspace_id)
    return Return.ok((invite, workspace))


class GetInviteByCodeUseCase:
    """
    Use case for looking up an invite from its code.

    Business Rules:
    - Unknown code fails with INVITE_NOT_FOUND
    - now >= expires_at fails with INVITE_EXPIRED
    - accepted_at set fails with INVITE_ALREADY_USED
    - Success carries the workspace name and slug for display
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, code: str) -> Result[InviteInfo]:
        async with self.uow:
            resolved = await resolve_invite(self.uow, code)
            if resolved.is_err():
                return resolved

            invite, workspace = resolved.value
            return Return.ok(InviteInfo.from_entity(invite, workspace))
