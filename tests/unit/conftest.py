from uuid import uuid4
from unittest.mock import AsyncMock, MagicMock

import pytest

from workspace_service.app.services.auth_provider import AuthUser


def _repo(*methods):
    repo = MagicMock()
    for method in methods:
        setattr(repo, method, AsyncMock())
    return repo


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = _repo(
        "get_by_id", "get_by_email", "get_by_confirmation_code", "create", "update"
    )
    uow.sessions = _repo("get_by_id", "create", "update")
    uow.profiles = _repo("get_by_id", "get_by_email", "create", "update")
    uow.workspaces = _repo("get_by_id", "get_by_member", "create")
    uow.members = _repo(
        "get_by_workspace_and_user",
        "get_by_user_id",
        "create",
        "update",
    )
    uow.invites = _repo(
        "get_by_id",
        "get_by_code",
        "get_pending_by_workspace",
        "create",
        "update",
        "delete",
    )

    # Writes echo the entity back, like flush + refresh
    for repo in (uow.profiles, uow.workspaces, uow.members, uow.invites):
        repo.create.side_effect = lambda entity: entity
    for repo in (uow.profiles, uow.members, uow.invites):
        repo.update.side_effect = lambda entity: entity

    return uow


@pytest.fixture
def actor():
    return AuthUser(id=uuid4(), email="actor@example.com")
