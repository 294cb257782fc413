"""Category repository for database operations."""

from uuid import UUID

from sqlalchemy import asc
from sqlmodel import select

from blogdash.models import CategoryDB
from blogdash.repositories.base import BaseRepository
from blogdash.schemas.category import CategoryCreate, CategoryUpdate


class CategoryRepository(BaseRepository[CategoryDB]):
    """Repository for Category database operations."""

    model = CategoryDB

    async def create(self, category: CategoryCreate, user_id: UUID) -> CategoryDB:
        """
        Create a category owned by `user_id`.

        Args:
            category: Category schema with the title
            user_id: Owner UUID (existence checked by the caller)

        Returns:
            CategoryDB: Created category
        """
        db_category = CategoryDB(title=category.title, user_id=user_id)
        return await self._add_and_refresh(db_category)

    async def get_owned(self, category_id: UUID, user_id: UUID) -> CategoryDB | None:
        """
        Get a category only if it belongs to `user_id`.

        Returns:
            CategoryDB | None: None both when missing and when owned by someone else
        """
        return await self._find_one(CategoryDB.id == category_id, CategoryDB.user_id == user_id)

    async def list_by_user(self, user_id: UUID) -> list[CategoryDB]:
        """Get all categories of a user, oldest first."""
        statement = (
            select(CategoryDB)
            .where(CategoryDB.user_id == user_id)
            .order_by(asc(CategoryDB.created_at))
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def update(self, category: CategoryDB, category_update: CategoryUpdate) -> CategoryDB:
        """Change the title of a loaded category."""
        return await self.apply_update(category, {"title": category_update.title})
