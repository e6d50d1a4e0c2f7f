from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from workspace_service.adapter.repositories._writes import flush_and_refresh
from workspace_service.app.repositories.account_repository import IAccountRepository
from workspace_service.domain.entities import Account


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address"""
        stmt = select(Account).where(Account.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_confirmation_code(self, code: str) -> Optional[Account]:
        """Get account by email confirmation code"""
        stmt = select(Account).where(Account.confirmation_code == code)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, account: Account) -> Account:
        """Create a new account"""
        return await flush_and_refresh(self.session, account, "account")

    async def update(self, account: Account) -> Account:
        """Update existing account"""
        return await flush_and_refresh(self.session, account, "account")
