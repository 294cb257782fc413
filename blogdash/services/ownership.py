"""Ownership validation chain shared by the category and blog endpoints."""

from dataclasses import dataclass
from uuid import UUID

from blogdash.errors.domain import NotFoundError
from blogdash.models import BlogDB, CategoryDB, UserDB
from blogdash.repositories import BlogRepository, CategoryRepository, UserRepository
from blogdash.utils.identifiers import parse_identifier


@dataclass(frozen=True, slots=True)
class ResolvedScope:
    """Records loaded by `OwnershipValidator.resolve_scope`."""

    user: UserDB
    category: CategoryDB | None = None
    blog: BlogDB | None = None


class OwnershipValidator:
    """
    Resolve request identifiers against the store before any listing or mutation.

    Checks run in a fixed order and stop at the first failure:

    1. every identifier present parses (`InvalidArgumentError`, no store access)
    2. the user exists
    3. the category exists (and belongs to the user when `category_owned`)
    4. the blog exists under the user (and the category when `blog_in_category`)

    A record owned by someone else is reported exactly like a missing one.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        category_repo: CategoryRepository,
        blog_repo: BlogRepository,
    ) -> None:
        self.user_repo = user_repo
        self.category_repo = category_repo
        self.blog_repo = blog_repo

    async def resolve_scope(
        self,
        user_id: str | None,
        category_id: str | None = None,
        blog_id: str | None = None,
        *,
        category_owned: bool = False,
        blog_in_category: bool = False,
    ) -> ResolvedScope:
        """
        Validate identifiers and load the records they name.

        Args:
            user_id: Owner identifier (required)
            category_id: Category identifier, checked when given
            blog_id: Blog identifier, checked when given
            category_owned: Require the category to belong to the user
            blog_in_category: Require the blog to sit in `category_id`

        Returns:
            ResolvedScope: The user plus the category and blog when requested

        Raises:
            InvalidArgumentError: If any identifier present is malformed
            NotFoundError: If the user, category or blog is not found in scope
        """
        owner_uuid = parse_identifier(user_id, "user")
        category_uuid = parse_identifier(category_id, "category") if category_id is not None else None
        blog_uuid = parse_identifier(blog_id, "blog") if blog_id is not None else None

        user = await self.user_repo.get_by_id(owner_uuid)
        if user is None:
            raise NotFoundError(detail="User not found")

        category = None
        if category_uuid is not None:
            category = await self._find_category(category_uuid, owner_uuid, owned=category_owned)
            if category is None:
                raise NotFoundError(detail="Category not found")

        blog = None
        if blog_uuid is not None:
            in_category = category_uuid if blog_in_category else None
            blog = await self.blog_repo.get_owned(blog_uuid, owner_uuid, in_category)
            if blog is None:
                raise NotFoundError(detail="Blog not found")

        return ResolvedScope(user=user, category=category, blog=blog)

    async def _find_category(
        self,
        category_id: UUID,
        owner_id: UUID,
        *,
        owned: bool,
    ) -> CategoryDB | None:
        if owned:
            return await self.category_repo.get_owned(category_id, owner_id)
        return await self.category_repo.get_by_id(category_id)
