"""
AuthSession Entity

Stores refresh-token sessions issued by the auth provider.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class AuthSession(SQLModel, table=True):
    """
    AuthSession entity - one signed-in browser.

    Business Rules:
    - Refresh secrets are hashed (bcrypt)
    - Secrets rotate on each refresh
    - Revoked or expired sessions cannot be refreshed
    """

    __tablename__ = "auth_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)

    refresh_token_hash: str = Field(max_length=60)
    revoked: bool = Field(default=False)
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_auth_session_expires_at", "expires_at"),
        Index("idx_auth_session_revoked", "revoked"),
    )
