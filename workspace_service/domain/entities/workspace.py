"""
Workspace Entity

A named collaboration space owning projects and members.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel


class Workspace(SQLModel, table=True):
    """
    Workspace entity - a tenant for projects and members.

    Business Rules:
    - Slug is URL-safe and unique across all workspaces
    - Creator becomes the first member with role owner
    """

    __tablename__ = "workspaces"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    slug: str = Field(unique=True, index=True, max_length=255)

    owner_id: Optional[UUID] = Field(default=None, foreign_key="accounts.id")
    settings: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
