from sqlmodel.ext.asyncio.session import AsyncSession

from workspace_service.adapter.repositories.account_repository import AccountRepository
from workspace_service.adapter.repositories.profile_repository import ProfileRepository
from workspace_service.adapter.repositories.session_repository import SessionRepository
from workspace_service.adapter.repositories.workspace_invite_repository import (
    WorkspaceInviteRepository,
)
from workspace_service.adapter.repositories.workspace_member_repository import (
    WorkspaceMemberRepository,
)
from workspace_service.adapter.repositories.workspace_repository import WorkspaceRepository
from workspace_service.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.accounts = AccountRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.profiles = ProfileRepository(self.session)
        self.workspaces = WorkspaceRepository(self.session)
        self.members = WorkspaceMemberRepository(self.session)
        self.invites = WorkspaceInviteRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed inside the block is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
