from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from workspace_service.domain.entities import AuthSession


class ISessionRepository(ABC):
    """Auth session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[AuthSession]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def create(self, session_obj: AuthSession) -> AuthSession:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session_obj: AuthSession) -> AuthSession:
        """Update existing session"""
        pass
