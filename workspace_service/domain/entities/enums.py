"""
Workspace Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class WorkspaceRole(str, Enum):
    """Member role within a workspace, highest first"""

    owner = "owner"
    admin = "admin"
    manager = "manager"
    member = "member"
    viewer = "viewer"
