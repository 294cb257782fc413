# tests/repositories/test_blog_repository.py
"""Tests for blogdash/repositories/blog.py against an in-memory SQLite database."""

from datetime import UTC, datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest
from sqlalchemy.dialects import sqlite
from sqlmodel.ext.asyncio.session import AsyncSession

from blogdash.models import BlogDB
from blogdash.query import BlogCriteria, BlogScope, build_predicate, window
from blogdash.repositories import BlogRepository, predicate_clauses
from blogdash.repositories.blog import listing_statement
from blogdash.schemas import BlogCreate, BlogUpdate

OWNER = uuid4()
CATEGORY = uuid4()
SCOPE = BlogScope(owner_id=OWNER, category_id=CATEGORY)
BASE = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


async def seed(
    session: AsyncSession,
    title: str,
    *,
    description: str | None = None,
    created_at: datetime = BASE,
    user_id: UUID = OWNER,
    category_id: UUID = CATEGORY,
) -> BlogDB:
    blog = BlogDB(
        title=title,
        description=description,
        user_id=user_id,
        category_id=category_id,
        created_at=created_at,
    )
    session.add(blog)
    await session.flush()
    return blog


async def titles(repo: BlogRepository, criteria: BlogCriteria, page: int = 1, limit: int = 10) -> list[str]:
    blogs = await repo.list_page(build_predicate(SCOPE, criteria), window(page, limit))
    return [blog.title for blog in blogs]


class TestPredicateClauses:
    """SQL translation of a predicate, without touching a database."""

    def test_scope_only_has_two_clauses(self) -> None:
        assert len(predicate_clauses(build_predicate(SCOPE, BlogCriteria()))) == 2

    def test_keyword_and_range_add_clauses(self) -> None:
        criteria = BlogCriteria(keyword="react", start_date="2024-01-01", end_date="2024-02-01")
        assert len(predicate_clauses(build_predicate(SCOPE, criteria))) == 5

    def test_keyword_is_escaped(self) -> None:
        predicate = build_predicate(SCOPE, BlogCriteria(keyword="50%"))
        compiled = listing_statement(predicate, window(1, 10)).compile(dialect=sqlite.dialect())
        assert "ESCAPE '/'" in str(compiled)
        assert "50/%" in compiled.params.values()

    def test_statement_orders_and_slices(self) -> None:
        sql = str(listing_statement(build_predicate(SCOPE, BlogCriteria()), window(3, 10)))
        assert "ORDER BY blogs.created_at ASC" in sql
        assert "LIMIT" in sql
        assert "OFFSET" in sql


class TestListPage:
    """Listing behavior on a real database."""

    async def test_scope_and_order(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        await seed(session, "second", created_at=BASE + timedelta(hours=1))
        await seed(session, "first", created_at=BASE)
        await seed(session, "other owner", user_id=uuid4())
        await seed(session, "other category", category_id=uuid4())

        assert await titles(repo, BlogCriteria()) == ["first", "second"]

    async def test_keyword_matches_title_or_description(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        await seed(session, "Learning REACT", created_at=BASE)
        await seed(session, "Frontend", description="react without classes", created_at=BASE + timedelta(1))
        await seed(session, "Vue", description="all about vue", created_at=BASE + timedelta(2))

        assert await titles(repo, BlogCriteria(keyword="react")) == ["Learning REACT", "Frontend"]

    async def test_wildcards_matched_literally(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        await seed(session, "100% coverage", created_at=BASE)
        await seed(session, "100 tests", created_at=BASE + timedelta(1))
        await seed(session, "snake_case", created_at=BASE + timedelta(2))
        await seed(session, "snakeXcase", created_at=BASE + timedelta(3))

        assert await titles(repo, BlogCriteria(keyword="%")) == ["100% coverage"]
        assert await titles(repo, BlogCriteria(keyword="e_c")) == ["snake_case"]

    async def test_date_range_inclusive(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        await seed(session, "b1", created_at=BASE)
        await seed(session, "b2", created_at=BASE + timedelta(days=1))
        await seed(session, "b3", created_at=BASE + timedelta(days=2))
        start = BASE.isoformat()
        end = (BASE + timedelta(days=1)).isoformat()

        assert await titles(repo, BlogCriteria(start_date=start, end_date=start)) == ["b1"]
        assert await titles(repo, BlogCriteria(start_date=start, end_date=end)) == ["b1", "b2"]
        assert await titles(repo, BlogCriteria(start_date=end)) == ["b2", "b3"]
        assert await titles(repo, BlogCriteria(end_date=end)) == ["b1", "b2"]

    async def test_unparseable_date_yields_empty_page(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        await seed(session, "b1")

        assert await titles(repo, BlogCriteria(start_date="not-a-date")) == []
        assert await titles(repo, BlogCriteria(end_date="2024-99-99")) == []
        assert await titles(repo, BlogCriteria(end_date="9999-12-31T23:59:59-01:00")) == []

    async def test_offset_bounds_compared_by_instant(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        await seed(session, "b1", created_at=BASE)
        await seed(session, "b2", created_at=BASE + timedelta(microseconds=1))
        plus_two = BASE.astimezone(timezone(timedelta(hours=2))).isoformat()

        assert await titles(repo, BlogCriteria(end_date=plus_two)) == ["b1"]
        assert await titles(repo, BlogCriteria(start_date=plus_two)) == ["b1", "b2"]

    async def test_pagination_window(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        for index in range(5):
            await seed(session, f"b{index}", created_at=BASE + timedelta(minutes=index))

        assert await titles(repo, BlogCriteria(), page=1, limit=2) == ["b0", "b1"]
        assert await titles(repo, BlogCriteria(), page=3, limit=2) == ["b4"]
        assert await titles(repo, BlogCriteria(), page=4, limit=2) == []

    async def test_repeated_query_is_stable(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        for index in range(3):
            await seed(session, f"b{index}", created_at=BASE + timedelta(seconds=index))

        first = await titles(repo, BlogCriteria(keyword="b"))
        assert first == await titles(repo, BlogCriteria(keyword="b"))


class TestBlogWrites:
    async def test_create_sets_scope_and_timestamp(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        blog = await repo.create(BlogCreate(title="Hello", description="World"), OWNER, CATEGORY)

        assert blog.user_id == OWNER
        assert blog.category_id == CATEGORY
        assert blog.created_at is not None
        assert blog.updated_at is None

    async def test_get_owned_hides_other_owners(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        blog = await seed(session, "mine")

        assert await repo.get_owned(blog.id, OWNER) is not None
        assert await repo.get_owned(blog.id, uuid4()) is None
        assert await repo.get_owned(blog.id, OWNER, CATEGORY) is not None
        assert await repo.get_owned(blog.id, OWNER, uuid4()) is None

    async def test_update_keeps_created_at(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        blog = await seed(session, "draft", description="keep me")
        created_at = blog.created_at

        updated = await repo.update(blog, BlogUpdate(title="final"))

        assert updated.title == "final"
        assert updated.description == "keep me"
        # SQLite hands timestamps back without tzinfo
        assert updated.created_at.replace(tzinfo=None) == created_at.replace(tzinfo=None)
        assert updated.updated_at is not None

    async def test_delete(self, session: AsyncSession) -> None:
        repo = BlogRepository(session)
        blog = await seed(session, "gone")

        assert await repo.delete(blog.id) is True
        assert await repo.get_by_id(blog.id) is None
        assert await repo.delete(blog.id) is False


@pytest.mark.parametrize("limit", [1, 3])
async def test_window_take_bounds_result(session: AsyncSession, limit: int) -> None:
    repo = BlogRepository(session)
    for index in range(4):
        await seed(session, f"b{index}", created_at=BASE + timedelta(seconds=index))

    assert len(await titles(repo, BlogCriteria(), limit=limit)) == limit
