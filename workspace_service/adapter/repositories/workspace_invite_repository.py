from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from workspace_service.adapter.repositories._writes import flush_and_refresh
from workspace_service.app.repositories.workspace_invite_repository import (
    IWorkspaceInviteRepository,
)
from workspace_service.domain.entities import WorkspaceInvite


class WorkspaceInviteRepository(IWorkspaceInviteRepository):
    """Workspace invite repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invite_id: UUID) -> Optional[WorkspaceInvite]:
        """Get invite by ID"""
        stmt = select(WorkspaceInvite).where(WorkspaceInvite.id == invite_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_code(self, code: str) -> Optional[WorkspaceInvite]:
        """Get invite by code"""
        stmt = select(WorkspaceInvite).where(WorkspaceInvite.code == code)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_workspace(
        self, workspace_id: UUID, now: datetime
    ) -> List[WorkspaceInvite]:
        """Get unaccepted, unexpired invites for a workspace, newest first"""
        stmt = (
            select(WorkspaceInvite)
            .where(
                WorkspaceInvite.workspace_id == workspace_id,
                col(WorkspaceInvite.accepted_at).is_(None),
                col(WorkspaceInvite.expires_at) > now,
            )
            .order_by(col(WorkspaceInvite.created_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invite: WorkspaceInvite) -> WorkspaceInvite:
        """Create a new invite"""
        return await flush_and_refresh(self.session, invite, "workspace_invite")

    async def update(self, invite: WorkspaceInvite) -> WorkspaceInvite:
        """Update existing invite"""
        return await flush_and_refresh(self.session, invite, "workspace_invite")

    async def delete(self, invite_id: UUID) -> bool:
        """Delete an invite"""
        stmt = delete(WorkspaceInvite).where(WorkspaceInvite.id == invite_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
