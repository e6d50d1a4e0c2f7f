"""
Workspace Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import WorkspaceRole

# Export all entities
from .account import Account
from .session import AuthSession
from .profile import Profile
from .workspace import Workspace
from .workspace_member import WorkspaceMember
from .workspace_invite import WorkspaceInvite

__all__ = [
    # Enums
    "WorkspaceRole",
    # Entities
    "Account",
    "AuthSession",
    "Profile",
    "Workspace",
    "WorkspaceMember",
    "WorkspaceInvite",
]
