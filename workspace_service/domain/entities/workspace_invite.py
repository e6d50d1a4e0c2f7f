"""
WorkspaceInvite Entity

Single-use joining ticket for a workspace.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import WorkspaceRole


class WorkspaceInvite(SQLModel, table=True):
    """
    WorkspaceInvite entity - a code that grants a role in a workspace.

    Business Rules:
    - Code is 8 random alphanumeric characters, unique
    - Acceptable only while now < expires_at and accepted_at is unset
    - There is no status column: expiry is computed when the invite is read
    - Accepting sets accepted_at/accepted_by exactly once
    """

    __tablename__ = "workspace_invites"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    workspace_id: UUID = Field(foreign_key="workspaces.id", nullable=False, index=True)
    email: Optional[str] = Field(default=None, max_length=255)

    role: WorkspaceRole = Field(default=WorkspaceRole.member, nullable=False)
    code: str = Field(unique=True, index=True, max_length=16)
    created_by: Optional[UUID] = Field(default=None, foreign_key="accounts.id")

    # Lifecycle
    expires_at: datetime = Field(sa_column=Column(DateTime))
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    accepted_by: Optional[UUID] = Field(default=None, foreign_key="accounts.id")

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_workspace_invite_expires_at", "expires_at"),)

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def is_accepted(self) -> bool:
        return self.accepted_at is not None
