"""
Invite Use Cases

Invite code lifecycle: create, resolve, accept, list and revoke.
"""

from .accept_invite_use_case import AcceptInviteUseCase
from .create_invite_use_case import CreateInviteUseCase, generate_invite_code
from .delete_invite_use_case import DeleteInviteUseCase
from .dtos import (
    AcceptInviteResponse,
    CreateInviteResponse,
    DeleteInviteResponse,
    InviteInfo,
    ListInvitesResponse,
    WorkspaceSummary,
)
from .get_invite_by_code_use_case import GetInviteByCodeUseCase, resolve_invite
from .list_invites_use_case import ListWorkspaceInvitesUseCase

__all__ = [
    "CreateInviteUseCase",
    "GetInviteByCodeUseCase",
    "AcceptInviteUseCase",
    "ListWorkspaceInvitesUseCase",
    "DeleteInviteUseCase",
    "generate_invite_code",
    "resolve_invite",
    "AcceptInviteResponse",
    "CreateInviteResponse",
    "DeleteInviteResponse",
    "InviteInfo",
    "ListInvitesResponse",
    "WorkspaceSummary",
]
