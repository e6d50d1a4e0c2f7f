"""
WorkspaceMember Entity

Links an account to a workspace with a role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import WorkspaceRole


class WorkspaceMember(SQLModel, table=True):
    """
    WorkspaceMember entity - an account's seat in a workspace.

    Business Rules:
    - (workspace_id, user_id) is the primary key: one role per workspace
    - Only admins and owners change roles
    - The owner role is never reassigned through a role change
    """

    __tablename__ = "workspace_members"

    workspace_id: UUID = Field(foreign_key="workspaces.id", primary_key=True)
    user_id: UUID = Field(foreign_key="accounts.id", primary_key=True)

    role: WorkspaceRole = Field(nullable=False)
    job_title: Optional[str] = Field(default=None, max_length=255)

    joined_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_workspace_member_user_id", "user_id"),)
