import pytest

from workspace_service.domain.entities import WorkspaceRole
from workspace_service.domain.roles import (
    ROLE_HIERARCHY,
    can_manage_team_role,
    can_write_role,
    has_role_permission,
    is_admin_role,
    role_display_name,
    role_rank,
)

ORDER = [
    WorkspaceRole.viewer,
    WorkspaceRole.member,
    WorkspaceRole.manager,
    WorkspaceRole.admin,
    WorkspaceRole.owner,
]


def test_hierarchy_is_strict_total_order():
    ranks = [ROLE_HIERARCHY[role] for role in ORDER]

    assert ranks == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("role", ORDER)
@pytest.mark.parametrize("required", ORDER)
def test_permission_follows_rank(role, required):
    assert has_role_permission(role, required) is (role_rank(role) >= role_rank(required))


def test_permission_is_reflexive():
    for role in ORDER:
        assert has_role_permission(role, role)


def test_absent_role_never_permitted():
    assert has_role_permission(None, WorkspaceRole.viewer) is False
    assert is_admin_role(None) is False


def test_accepts_role_strings():
    assert has_role_permission("admin", WorkspaceRole.manager) is True
    assert role_rank("viewer") == 1


def test_predicates():
    assert is_admin_role(WorkspaceRole.owner)
    assert is_admin_role(WorkspaceRole.admin)
    assert not is_admin_role(WorkspaceRole.manager)

    assert can_manage_team_role(WorkspaceRole.manager)
    assert not can_manage_team_role(WorkspaceRole.member)

    assert can_write_role(WorkspaceRole.member)
    assert not can_write_role(WorkspaceRole.viewer)


def test_display_names():
    assert [role_display_name(role) for role in reversed(ORDER)] == [
        "Owner",
        "Admin",
        "Manager",
        "Member",
        "Viewer",
    ]
