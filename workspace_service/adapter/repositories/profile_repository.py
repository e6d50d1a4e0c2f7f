from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from workspace_service.adapter.repositories._writes import flush_and_refresh
from workspace_service.app.repositories.profile_repository import IProfileRepository
from workspace_service.domain.entities import Profile


class ProfileRepository(IProfileRepository):
    """Profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by ID"""
        stmt = select(Profile).where(Profile.id == profile_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by email address"""
        stmt = select(Profile).where(Profile.email == email)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile"""
        return await flush_and_refresh(self.session, profile, "profile")

    async def update(self, profile: Profile) -> Profile:
        """Update existing profile"""
        return await flush_and_refresh(self.session, profile, "profile")
