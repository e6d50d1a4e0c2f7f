"""
Workspace Use Case DTOs (Data Transfer Objects)

Response classes for workspace creation and membership management.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from workspace_service.domain.entities import Workspace, WorkspaceMember
from workspace_service.domain.roles import role_display_name


class WorkspaceInfo(BaseModel):
    """Workspace as returned to callers"""

    id: str
    name: str
    slug: str
    owner_id: Optional[str] = None
    settings: Dict[str, Any] = Field(default_factory=dict)
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, workspace: Workspace) -> "WorkspaceInfo":
        return cls(
            id=str(workspace.id),
            name=workspace.name,
            slug=workspace.slug,
            owner_id=str(workspace.owner_id) if workspace.owner_id else None,
            settings=dict(workspace.settings or {}),
            created_at=workspace.created_at.isoformat(),
            updated_at=workspace.updated_at.isoformat(),
        )


class MemberInfo(BaseModel):
    """Membership as returned to callers"""

    workspace_id: str
    user_id: str
    role: str
    role_name: str
    job_title: Optional[str] = None
    joined_at: str

    @classmethod
    def from_entity(cls, member: WorkspaceMember) -> "MemberInfo":
        return cls(
            workspace_id=str(member.workspace_id),
            user_id=str(member.user_id),
            role=member.role.value,
            role_name=role_display_name(member.role),
            job_title=member.job_title,
            joined_at=member.joined_at.isoformat(),
        )


class CreateWorkspaceResponse(BaseModel):
    """Response for create workspace use case"""

    success: bool
    workspace: WorkspaceInfo
    redirect_to: str


class MembershipResponse(BaseModel):
    """Response for use cases that write a single membership"""

    success: bool
    membership: MemberInfo


class UserWorkspacesResponse(BaseModel):
    """Response for get user workspaces use case"""

    workspaces: List[WorkspaceInfo]


class WorkspaceMembershipResponse(BaseModel):
    """Response for get workspace membership use case"""

    membership: Optional[MemberInfo] = None
