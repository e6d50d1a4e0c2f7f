"""
Profile Entity

Public, user-editable data attached one-to-one to an account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel


class Profile(SQLModel, table=True):
    """
    Profile entity - one per account, id equals the account id.

    Business Rules:
    - Created by the auth provider at signup, or manually as a fallback
    - onboarding_complete flips once the account creates or joins a workspace
    - Never deleted
    """

    __tablename__ = "profiles"

    id: UUID = Field(foreign_key="accounts.id", primary_key=True)
    email: str = Field(index=True, max_length=255)

    full_name: Optional[str] = Field(default=None, max_length=255)
    avatar_url: Optional[str] = Field(default=None, max_length=2048)
    onboarding_complete: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
