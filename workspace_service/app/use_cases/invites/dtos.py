"""
Invite Use Case DTOs (Data Transfer Objects)

Response classes for the invite lifecycle.
"""

from typing import List, Optional

from pydantic import BaseModel

from workspace_service.domain.entities import Workspace, WorkspaceInvite


def _iso(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


class WorkspaceSummary(BaseModel):
    """Denormalized workspace data shown next to an invite"""

    id: str
    name: str
    slug: str

    @classmethod
    def from_entity(cls, workspace: Workspace) -> "WorkspaceSummary":
        return cls(id=str(workspace.id), name=workspace.name, slug=workspace.slug)


class InviteInfo(BaseModel):
    """Invite as returned to callers"""

    id: str
    workspace_id: str
    email: Optional[str] = None
    role: str
    code: str
    created_by: Optional[str] = None
    expires_at: str
    accepted_at: Optional[str] = None
    accepted_by: Optional[str] = None
    created_at: str
    workspace: Optional[WorkspaceSummary] = None

    @classmethod
    def from_entity(
        cls, invite: WorkspaceInvite, workspace: Optional[Workspace] = None
    ) -> "InviteInfo":
        return cls(
            id=str(invite.id),
            workspace_id=str(invite.workspace_id),
            email=invite.email,
            role=invite.role.value,
            code=invite.code,
            created_by=str(invite.created_by) if invite.created_by else None,
            expires_at=invite.expires_at.isoformat(),
            accepted_at=_iso(invite.accepted_at),
            accepted_by=str(invite.accepted_by) if invite.accepted_by else None,
            created_at=invite.created_at.isoformat(),
            workspace=WorkspaceSummary.from_entity(workspace) if workspace else None,
        )


class CreateInviteResponse(BaseModel):
    """Response for create invite use case"""

    success: bool
    invite: InviteInfo
    invite_link: str


class AcceptInviteResponse(BaseModel):
    """Response for accept invite use case"""

    success: bool
    workspace_id: str
    workspace_name: Optional[str] = None


class ListInvitesResponse(BaseModel):
    """Response for list workspace invites use case"""

    invites: List[InviteInfo]


class DeleteInviteResponse(BaseModel):
    """Response for delete invite use case"""

    success: bool
