from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from workspace_service.domain.entities import WorkspaceInvite


class IWorkspaceInviteRepository(ABC):
    """Workspace invite repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invite_id: UUID) -> Optional[WorkspaceInvite]:
        """Get invite by ID"""
        pass

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[WorkspaceInvite]:
        """Get invite by code"""
        pass

    @abstractmethod
    async def get_pending_by_workspace(
        self, workspace_id: UUID, now: datetime
    ) -> List[WorkspaceInvite]:
        """Get unaccepted, unexpired invites for a workspace, newest first"""
        pass

    @abstractmethod
    async def create(self, invite: WorkspaceInvite) -> WorkspaceInvite:
        """Create a new invite, raises ConflictError on a duplicate code"""
        pass

    @abstractmethod
    async def update(self, invite: WorkspaceInvite) -> WorkspaceInvite:
        """Update existing invite"""
        pass

    @abstractmethod
    async def delete(self, invite_id: UUID) -> bool:
        """Delete an invite, returns False if it did not exist"""
        pass
