"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime, Index, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    A blog belongs to exactly one user and one category. The reference
    columns carry no foreign key constraint; deleting a category or user
    leaves its blogs untouched.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (Index("ix_blogs_scope_created", "user_id", "category_id", "created_at"),)

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )
    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog title",
    )
    description: str | None = Field(
        default=None,
        sa_column=Column(Text),
        description="Blog description",
    )
    user_id: UUID = Field(
        nullable=False,
        index=True,
        description="Owner ID (references users.id, not enforced)",
    )
    category_id: UUID = Field(
        nullable=False,
        index=True,
        description="Category ID (references categories.id, not enforced)",
    )

    # Assigned once at creation, never updated
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Getting started with React",
                "description": "Hooks, state and effects in practice",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "category_id": "9b2f6c1e-3f0a-4c57-9d7e-2a1b3c4d5e6f",
            },
        },
    )
