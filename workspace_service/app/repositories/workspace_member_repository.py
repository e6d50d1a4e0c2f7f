from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from workspace_service.domain.entities import WorkspaceMember


class IWorkspaceMemberRepository(ABC):
    """Workspace member repository interface - application layer"""

    @abstractmethod
    async def get_by_workspace_and_user(
        self, workspace_id: UUID, user_id: UUID
    ) -> Optional[WorkspaceMember]:
        """Get membership by workspace and user"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[WorkspaceMember]:
        """Get all memberships for a user, oldest first"""
        pass

    @abstractmethod
    async def create(self, member: WorkspaceMember) -> WorkspaceMember:
        """Create a new membership, raises ConflictError if the user is already a member"""
        pass

    @abstractmethod
    async def update(self, member: WorkspaceMember) -> WorkspaceMember:
        """Update existing membership"""
        pass
