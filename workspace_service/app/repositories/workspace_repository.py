from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from workspace_service.domain.entities import Workspace


class IWorkspaceRepository(ABC):
    """Workspace repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, workspace_id: UUID) -> Optional[Workspace]:
        """Get workspace by ID"""
        pass

    @abstractmethod
    async def get_by_member(self, user_id: UUID) -> List[Workspace]:
        """Get all workspaces the user is a member of"""
        pass

    @abstractmethod
    async def create(self, workspace: Workspace) -> Workspace:
        """Create a new workspace, raises ConflictError on a taken slug"""
        pass
