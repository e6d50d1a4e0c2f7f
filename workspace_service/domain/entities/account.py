"""
Account Entity

Identity record managed by the auth provider.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Account(SQLModel, table=True):
    """
    Account entity - an identity issued by the auth provider.

    Business Rules:
    - Email must be unique across all accounts
    - Password stored as bcrypt hash (cost factor 12)
    - Confirmation code is single-use and cleared once exchanged
    - Referenced by profiles, memberships and invites, never owned by them
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Email confirmation
    email_confirmed: bool = Field(default=False)
    confirmation_code: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    confirmation_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    last_sign_in_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_account_email_confirmed", "email_confirmed"),)
