"""
Workspace Use Cases

Workspace creation and membership management.
"""

from .add_member_by_email_use_case import AddMemberByEmailUseCase
from .create_workspace_use_case import CreateWorkspaceUseCase
from .dtos import (
    CreateWorkspaceResponse,
    MemberInfo,
    MembershipResponse,
    UserWorkspacesResponse,
    WorkspaceInfo,
    WorkspaceMembershipResponse,
)
from .get_user_workspaces_use_case import (
    GetUserWorkspacesUseCase,
    GetWorkspaceMembershipUseCase,
)
from .update_member_role_use_case import UpdateMemberRoleUseCase

__all__ = [
    "CreateWorkspaceUseCase",
    "UpdateMemberRoleUseCase",
    "AddMemberByEmailUseCase",
    "GetUserWorkspacesUseCase",
    "GetWorkspaceMembershipUseCase",
    "CreateWorkspaceResponse",
    "MemberInfo",
    "MembershipResponse",
    "UserWorkspacesResponse",
    "WorkspaceInfo",
    "WorkspaceMembershipResponse",
]
