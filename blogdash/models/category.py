"""Category database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class CategoryDB(SQLModel, table=True):
    """Category database model. Each category belongs to exactly one user."""

    __tablename__ = cast("declared_attr[str]", "categories")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Category ID",
    )
    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Category title",
    )
    user_id: UUID = Field(
        nullable=False,
        index=True,
        description="Owner ID (references users.id, not enforced)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )
