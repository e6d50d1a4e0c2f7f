from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from workspace_service.adapter.repositories._writes import flush_and_refresh
from workspace_service.app.repositories.workspace_member_repository import (
    IWorkspaceMemberRepository,
)
from workspace_service.domain.entities import WorkspaceMember


class WorkspaceMemberRepository(IWorkspaceMemberRepository):
    """Workspace member repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_workspace_and_user(
        self, workspace_id: UUID, user_id: UUID
    ) -> Optional[WorkspaceMember]:
        """Get membership by workspace and user"""
        stmt = select(WorkspaceMember).where(
            WorkspaceMember.workspace_id == workspace_id,
            WorkspaceMember.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> List[WorkspaceMember]:
        """Get all memberships for a user, oldest first"""
        stmt = (
            select(WorkspaceMember)
            .where(WorkspaceMember.user_id == user_id)
            .order_by(WorkspaceMember.joined_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, member: WorkspaceMember) -> WorkspaceMember:
        """Create a new membership"""
        return await flush_and_refresh(self.session, member, "workspace_member")

    async def update(self, member: WorkspaceMember) -> WorkspaceMember:
        """Update existing membership"""
        return await flush_and_refresh(self.session, member, "workspace_member")
