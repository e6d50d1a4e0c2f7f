from abc import ABC, abstractmethod

from workspace_service.app.repositories.account_repository import IAccountRepository
from workspace_service.app.repositories.profile_repository import IProfileRepository
from workspace_service.app.repositories.session_repository import ISessionRepository
from workspace_service.app.repositories.workspace_invite_repository import (
    IWorkspaceInviteRepository,
)
from workspace_service.app.repositories.workspace_member_repository import (
    IWorkspaceMemberRepository,
)
from workspace_service.app.repositories.workspace_repository import IWorkspaceRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    sessions: ISessionRepository
    profiles: IProfileRepository
    workspaces: IWorkspaceRepository
    members: IWorkspaceMemberRepository
    invites: IWorkspaceInviteRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
