"""Base repository for database operations."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, asc
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from blogdash.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common CRUD operations.

    Subclasses set `model` and add the lookups specific to their entity.
    Writes flush immediately so store failures surface inside the request
    handler; the surrounding transaction commits.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        return await self._find_one(id_column == record_id)

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[ModelT]:
        """
        Get records ordered by creation time.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            list[ModelT]: List of records
        """
        statement = (
            select(self.model)
            .order_by(asc(getattr(self.model, "created_at")))
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def apply_update(self, record: ModelT, changes: dict[str, Any]) -> ModelT:
        """
        Set `changes` on `record`, stamp `updated_at` and flush.

        Args:
            record: Loaded record to modify
            changes: Field values to set

        Returns:
            ModelT: Refreshed record
        """
        for key, value in changes.items():
            setattr(record, key, value)
        setattr(record, "updated_at", datetime.now(tz=UTC))
        return await self._add_and_refresh(record)

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if record was deleted, False if not found
        """
        record = await self.get_by_id(record_id)
        if not record:
            return False

        try:
            await self.session.delete(record)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to delete record: {e}") from e
        return True

    async def _find_one(self, *conditions: ColumnElement[bool]) -> ModelT | None:
        statement = select(self.model).where(*conditions).limit(1)
        result = await self.session.exec(statement)
        return result.first()

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            DatabaseConnectionError: For any other store failure
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=self._duplicate_detail(error_msg)) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to save record: {e}") from e

    def _duplicate_detail(self, error_msg: str) -> str:
        """Message for a unique constraint violation. Overridden per entity."""
        return f"{self.model.__name__} already exists"
