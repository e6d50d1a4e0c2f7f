from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from workspace_service.domain.entities import Profile


class IProfileRepository(ABC):
    """Profile repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by ID (the account ID)"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by email address"""
        pass

    @abstractmethod
    async def create(self, profile: Profile) -> Profile:
        """Create a new profile, raises ConflictError if one already exists"""
        pass

    @abstractmethod
    async def update(self, profile: Profile) -> Profile:
        """Update existing profile"""
        pass
