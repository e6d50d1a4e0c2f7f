from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from workspace_service.app.use_cases.invites import (
    DeleteInviteUseCase,
    GetInviteByCodeUseCase,
    ListWorkspaceInvitesUseCase,
    resolve_invite,
)
from workspace_service.domain.entities import (
    Workspace,
    WorkspaceInvite,
    WorkspaceMember,
    WorkspaceRole,
)


def _invite(workspace_id, **overrides):
    fields = dict(
        workspace_id=workspace_id,
        code="Ab3dE6gH",
        role=WorkspaceRole.member,
        expires_at=datetime.utcnow() + timedelta(days=7),
    )
    fields.update(overrides)
    return WorkspaceInvite(**fields)


@pytest.mark.asyncio
async def test_resolve_unknown_code(mock_uow):
    mock_uow.invites.get_by_code.return_value = None

    result = await resolve_invite(mock_uow, "missing1")

    assert result.is_err()
    assert result.error.code == "INVITE_NOT_FOUND"
    assert result.error.message == "Invite not found"


@pytest.mark.asyncio
async def test_resolve_expired_at_exact_boundary(mock_uow):
    """now == expires_at already counts as expired"""
    now = datetime.utcnow()
    mock_uow.invites.get_by_code.return_value = _invite(uuid4(), expires_at=now)

    result = await resolve_invite(mock_uow, "Ab3dE6gH", now)

    assert result.is_err()
    assert result.error.code == "INVITE_EXPIRED"


@pytest.mark.asyncio
async def test_resolve_reports_expiry_before_use(mock_uow):
    """An invite both expired and used reports INVITE_EXPIRED"""
    now = datetime.utcnow()
    mock_uow.invites.get_by_code.return_value = _invite(
        uuid4(),
        expires_at=now - timedelta(days=1),
        accepted_at=now - timedelta(days=2),
        accepted_by=uuid4(),
    )

    result = await resolve_invite(mock_uow, "Ab3dE6gH", now)

    assert result.error.code == "INVITE_EXPIRED"


@pytest.mark.asyncio
async def test_resolve_used_invite(mock_uow):
    mock_uow.invites.get_by_code.return_value = _invite(
        uuid4(), accepted_at=datetime.utcnow(), accepted_by=uuid4()
    )

    result = await resolve_invite(mock_uow, "Ab3dE6gH")

    assert result.is_err()
    assert result.error.code == "INVITE_ALREADY_USED"
    assert result.error.message == "This invite has already been used"


@pytest.mark.asyncio
async def test_get_invite_includes_workspace(mock_uow):
    # Arrange
    workspace = Workspace(name="Acme", slug="acme")
    mock_uow.invites.get_by_code.return_value = _invite(workspace.id)
    mock_uow.workspaces.get_by_id.return_value = workspace

    # Act
    result = await GetInviteByCodeUseCase(mock_uow).execute("Ab3dE6gH")

    # Assert
    assert result.is_ok()
    assert result.value.code == "Ab3dE6gH"
    assert result.value.workspace.name == "Acme"
    assert result.value.workspace.slug == "acme"


@pytest.mark.asyncio
async def test_list_invites_requires_admin(mock_uow, actor):
    workspace_id = uuid4()
    mock_uow.members.get_by_workspace_and_user.return_value = WorkspaceMember(
        workspace_id=workspace_id, user_id=actor.id, role=WorkspaceRole.member
    )

    result = await ListWorkspaceInvitesUseCase(mock_uow).execute(actor, workspace_id)

    assert result.is_err()
    assert result.error.code == "NOT_AUTHORIZED"
    mock_uow.invites.get_pending_by_workspace.assert_not_called()


@pytest.mark.asyncio
async def test_list_invites_returns_pending(mock_uow, actor):
    # Arrange
    workspace_id = uuid4()
    mock_uow.members.get_by_workspace_and_user.return_value = WorkspaceMember(
        workspace_id=workspace_id, user_id=actor.id, role=WorkspaceRole.owner
    )
    mock_uow.invites.get_pending_by_workspace.return_value = [
        _invite(workspace_id, code="NEWER123"),
        _invite(workspace_id, code="OLDER123"),
    ]

    # Act
    result = await ListWorkspaceInvitesUseCase(mock_uow).execute(actor, workspace_id)

    # Assert
    assert result.is_ok()
    assert [i.code for i in result.value.invites] == ["NEWER123", "OLDER123"]
    args = mock_uow.invites.get_pending_by_workspace.call_args[0]
    assert args[0] == workspace_id


@pytest.mark.asyncio
async def test_delete_missing_invite(mock_uow, actor):
    mock_uow.invites.get_by_id.return_value = None

    result = await DeleteInviteUseCase(mock_uow).execute(actor, uuid4())

    assert result.is_err()
    assert result.error.code == "INVITE_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_accepted_invite_by_admin(mock_uow, actor):
    """Removal ignores the invite's state"""
    # Arrange
    workspace_id = uuid4()
    invite = _invite(workspace_id, accepted_at=datetime.utcnow(), accepted_by=uuid4())
    mock_uow.invites.get_by_id.return_value = invite
    mock_uow.members.get_by_workspace_and_user.return_value = WorkspaceMember(
        workspace_id=workspace_id, user_id=actor.id, role=WorkspaceRole.admin
    )
    mock_uow.invites.delete.return_value = True

    # Act
    result = await DeleteInviteUseCase(mock_uow).execute(actor, invite.id)

    # Assert
    assert result.is_ok()
    assert result.value.success is True
    mock_uow.invites.delete.assert_called_once_with(invite.id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_by_viewer_rejected(mock_uow, actor):
    workspace_id = uuid4()
    invite = _invite(workspace_id)
    mock_uow.invites.get_by_id.return_value = invite
    mock_uow.members.get_by_workspace_and_user.return_value = WorkspaceMember(
        workspace_id=workspace_id, user_id=actor.id, role=WorkspaceRole.viewer
    )

    result = await DeleteInviteUseCase(mock_uow).execute(actor, invite.id)

    assert result.is_err()
    assert result.error.code == "NOT_AUTHORIZED"
    mock_uow.invites.delete.assert_not_called()
