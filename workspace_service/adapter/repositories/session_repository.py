from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from workspace_service.adapter.repositories._writes import flush_and_refresh
from workspace_service.app.repositories.session_repository import ISessionRepository
from workspace_service.domain.entities import AuthSession


class SessionRepository(ISessionRepository):
    """Auth session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: UUID) -> Optional[AuthSession]:
        """Get session by ID"""
        stmt = select(AuthSession).where(AuthSession.id == session_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, session_obj: AuthSession) -> AuthSession:
        """Create a new session"""
        return await flush_and_refresh(self.session, session_obj, "auth_session")

    async def update(self, session_obj: AuthSession) -> AuthSession:
        """Update existing session"""
        return await flush_and_refresh(self.session, session_obj, "auth_session")
