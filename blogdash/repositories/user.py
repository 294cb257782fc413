"""User repository for database operations."""

from blogdash.models import UserDB
from blogdash.repositories.base import BaseRepository
from blogdash.schemas.user import UserCreate


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    This class implements the repository pattern for User entities,
    providing CRUD operations.
    """

    model = UserDB

    async def create(self, user: UserCreate) -> UserDB:
        """
        Create a new user in the database.

        Args:
            user: User schema with user data

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If username or email already exists
            DatabaseError: For other database errors
        """
        db_user = UserDB(username=user.username, email=str(user.email))
        return await self._add_and_refresh(db_user)

    async def rename(self, user: UserDB, new_username: str) -> UserDB:
        """
        Change the username of a loaded user.

        Raises:
            DuplicateEntryError: If the new username is taken
        """
        return await self.apply_update(user, {"username": new_username})

    def _duplicate_detail(self, error_msg: str) -> str:
        lowered = error_msg.lower()
        if "email" in lowered:
            return "Email already exists"
        if "username" in lowered:
            return "Username already exists"
        return "User already exists"
