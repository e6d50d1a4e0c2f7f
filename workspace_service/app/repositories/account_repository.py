from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from workspace_service.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address"""
        pass

    @abstractmethod
    async def get_by_confirmation_code(self, code: str) -> Optional[Account]:
        """Get account by email confirmation code"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account, raises ConflictError on duplicate email"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass
