"""Blog repository for database operations."""

from logging import getLogger
from uuid import UUID

from sqlalchemy import ColumnElement, asc, false, or_
from sqlmodel import select
from sqlmodel.sql.expression import SelectOfScalar

from blogdash.configs import file_logger
from blogdash.models import BlogDB
from blogdash.query import (
    AtLeast,
    AtMost,
    Between,
    BlogPredicate,
    DateRange,
    InvalidInstant,
    KeywordMatch,
    PageWindow,
    Unbounded,
)
from blogdash.query.filters import Instant
from blogdash.repositories.base import BaseRepository
from blogdash.schemas.blog import BlogCreate, BlogUpdate

logger = file_logger(getLogger(__name__))


def keyword_clause(term: KeywordMatch) -> ColumnElement[bool]:
    """title ILIKE %k% OR description ILIKE %k%, with k matched literally."""
    return or_(
        *(getattr(BlogDB, name).icontains(term.keyword, autoescape=True) for name in term.fields),
    )


def _bound(instant: Instant, compare: str) -> ColumnElement[bool]:
    if isinstance(instant, InvalidInstant):
        # An unparseable date never equals a stored timestamp
        return false()
    column = BlogDB.created_at
    return column >= instant if compare == "ge" else column <= instant


def date_range_clauses(created: DateRange) -> list[ColumnElement[bool]]:
    match created:
        case Unbounded():
            return []
        case AtLeast(start=start):
            return [_bound(start, "ge")]
        case AtMost(end=end):
            return [_bound(end, "le")]
        case Between(start=start, end=end):
            return [_bound(start, "ge"), _bound(end, "le")]


def predicate_clauses(predicate: BlogPredicate) -> list[ColumnElement[bool]]:
    """
    Translate a `BlogPredicate` into WHERE clauses, all combined with AND.

    Args:
        predicate: Listing predicate from `build_predicate`

    Returns:
        list[ColumnElement[bool]]: Scope equality, keyword and date clauses
    """
    clauses: list[ColumnElement[bool]] = [
        BlogDB.user_id == predicate.owner_id,
        BlogDB.category_id == predicate.category_id,
    ]
    if predicate.keyword is not None:
        clauses.append(keyword_clause(predicate.keyword))
    clauses.extend(date_range_clauses(predicate.created))
    return clauses


def listing_statement(predicate: BlogPredicate, window: PageWindow) -> SelectOfScalar[BlogDB]:
    """Build the sorted, bounded SELECT for one page of a blog listing."""
    order = asc(getattr(BlogDB, window.sort.field))
    return (
        select(BlogDB)
        .where(*predicate_clauses(predicate))
        .order_by(order)
        .offset(window.skip)
        .limit(window.take)
    )


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    This class implements the repository pattern for Blog entities,
    providing CRUD operations and the filtered, paginated listing.
    """

    model = BlogDB

    async def create(self, blog: BlogCreate, user_id: UUID, category_id: UUID) -> BlogDB:
        """
        Create a new blog in the database.

        Args:
            blog: Blog schema with title and description
            user_id: Owner UUID
            category_id: Category UUID

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            title=blog.title,
            description=blog.description,
            user_id=user_id,
            category_id=category_id,
        )
        return await self._add_and_refresh(db_blog)

    async def get_owned(
        self,
        blog_id: UUID,
        user_id: UUID,
        category_id: UUID | None = None,
    ) -> BlogDB | None:
        """
        Get a blog only if it belongs to `user_id` (and to `category_id` if given).

        Returns:
            BlogDB | None: None both when missing and when the scope does not match
        """
        conditions = [BlogDB.id == blog_id, BlogDB.user_id == user_id]
        if category_id is not None:
            conditions.append(BlogDB.category_id == category_id)
        return await self._find_one(*conditions)

    async def list_page(self, predicate: BlogPredicate, window: PageWindow) -> list[BlogDB]:
        """
        Fetch one page of blogs matching `predicate`, oldest first.

        Args:
            predicate: Scope, keyword and date range to select by
            window: Offset and page size

        Returns:
            list[BlogDB]: Possibly empty page of blogs
        """
        result = await self.session.exec(listing_statement(predicate, window))
        blogs = list(result.all())
        logger.info(
            f"Listed {len(blogs)} blogs for user {predicate.owner_id} "
            f"in category {predicate.category_id} (skip={window.skip}, take={window.take})",
        )
        return blogs

    async def update(self, blog: BlogDB, blog_update: BlogUpdate) -> BlogDB:
        """
        Update title and/or description of a loaded blog.

        Fields left out of `blog_update` keep their value; `created_at`,
        owner and category never change.
        """
        changes = blog_update.model_dump(exclude_unset=True, exclude_none=True)
        return await self.apply_update(blog, changes)
