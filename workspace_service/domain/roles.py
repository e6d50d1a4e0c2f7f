"""
Role Hierarchy

Total order over workspace roles used by every authorization check.
"""

from typing import Dict, Optional, Union

from .entities.enums import WorkspaceRole

ROLE_HIERARCHY: Dict[WorkspaceRole, int] = {
    WorkspaceRole.owner: 5,
    WorkspaceRole.admin: 4,
    WorkspaceRole.manager: 3,
    WorkspaceRole.member: 2,
    WorkspaceRole.viewer: 1,
}

# Roles that invites, direct adds and role changes may grant
ASSIGNABLE_ROLES = (
    WorkspaceRole.admin,
    WorkspaceRole.manager,
    WorkspaceRole.member,
    WorkspaceRole.viewer,
)

_DISPLAY_NAMES: Dict[WorkspaceRole, str] = {
    WorkspaceRole.owner: "Owner",
    WorkspaceRole.admin: "Admin",
    WorkspaceRole.manager: "Manager",
    WorkspaceRole.member: "Member",
    WorkspaceRole.viewer: "Viewer",
}


def role_rank(role: Union[WorkspaceRole, str]) -> int:
    """Integer rank of a role, owner highest"""
    return ROLE_HIERARCHY[WorkspaceRole(role)]


def has_role_permission(
    role: Optional[Union[WorkspaceRole, str]], required: WorkspaceRole
) -> bool:
    """
    Check if a role has at least the required permission level.

    An absent role (not signed in, or not a member) is never permitted.
    """
    if role is None:
        return False
    return role_rank(role) >= role_rank(required)


def is_admin_role(role: Optional[WorkspaceRole]) -> bool:
    return has_role_permission(role, WorkspaceRole.admin)


def can_manage_team_role(role: Optional[WorkspaceRole]) -> bool:
    return has_role_permission(role, WorkspaceRole.manager)


def can_write_role(role: Optional[WorkspaceRole]) -> bool:
    return has_role_permission(role, WorkspaceRole.member)


def role_display_name(role: WorkspaceRole) -> str:
    return _DISPLAY_NAMES[WorkspaceRole(role)]
