from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from workspace_service.adapter.repositories._writes import flush_and_refresh
from workspace_service.app.repositories.workspace_repository import IWorkspaceRepository
from workspace_service.domain.entities import Workspace, WorkspaceMember


class WorkspaceRepository(IWorkspaceRepository):
    """Workspace repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, workspace_id: UUID) -> Optional[Workspace]:
        """Get workspace by ID"""
        stmt = select(Workspace).where(Workspace.id == workspace_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_member(self, user_id: UUID) -> List[Workspace]:
        """Get all workspaces the user is a member of"""
        stmt = (
            select(Workspace)
            .join(WorkspaceMember, WorkspaceMember.workspace_id == Workspace.id)
            .where(WorkspaceMember.user_id == user_id)
            .order_by(WorkspaceMember.joined_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, workspace: Workspace) -> Workspace:
        """Create a new workspace"""
        return await flush_and_refresh(self.session, workspace, "workspace")

