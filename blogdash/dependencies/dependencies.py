"""Request dependencies: repositories, the ownership chain and listing parameters."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from blogdash.configs import settings
from blogdash.db import get_session
from blogdash.query import BlogCriteria
from blogdash.repositories import BlogRepository, CategoryRepository, UserRepository
from blogdash.services import OwnershipValidator

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_category_repository(session: SessionDep) -> CategoryRepository:
    return CategoryRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
CategoryRepoDep = Annotated[CategoryRepository, Depends(get_category_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_ownership_validator(
    user_repo: UserRepoDep,
    category_repo: CategoryRepoDep,
    blog_repo: BlogRepoDep,
) -> OwnershipValidator:
    """
    Build the ownership chain over the repositories of the current request.

    All three repositories share the request's session.
    """
    return OwnershipValidator(user_repo, category_repo, blog_repo)


OwnershipDep = Annotated[OwnershipValidator, Depends(get_ownership_validator)]


def positive_or_default(raw: str | None, default: int) -> int:
    """
    Coerce a page/limit query value.

    Missing, non-numeric and non-positive values fall back to `default`.
    There is no upper bound.
    """
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class BlogListQuery:
    """
    Query container for the blog listing.

    Parameters
    ----------
    user_id : str
        Owner identifier, validated by the ownership chain.
    category_id : str
        Category identifier, validated by the ownership chain.
    criteria : BlogCriteria
        Keyword and raw date bounds.
    page : int
        1-based page, already defaulted.
    limit : int
        Page size, already defaulted.
    """

    user_id: str
    category_id: str
    criteria: BlogCriteria
    page: int
    limit: int


def get_blog_list_query(
    user_id: Annotated[str, Query(alias="userId", description="Owner ID")] = "",
    category_id: Annotated[str, Query(alias="categoryId", description="Category ID")] = "",
    keywords: Annotated[
        str | None,
        Query(description="Case-insensitive substring of title or description"),
    ] = None,
    start_date: Annotated[
        str | None,
        Query(alias="startDate", description="Inclusive lower bound on creation date (ISO-8601)"),
    ] = None,
    end_date: Annotated[
        str | None,
        Query(alias="endDate", description="Inclusive upper bound on creation date (ISO-8601)"),
    ] = None,
    page: Annotated[str | None, Query(description="1-based page number")] = None,
    limit: Annotated[str | None, Query(description="Number of blogs per page")] = None,
) -> BlogListQuery:
    """
    Dependency to construct `BlogListQuery` from query parameters.

    Returns
    -------
    BlogListQuery
        Aggregated query parameters object.
    """
    return BlogListQuery(
        user_id=user_id,
        category_id=category_id,
        criteria=BlogCriteria(keyword=keywords, start_date=start_date, end_date=end_date),
        page=positive_or_default(page, settings.DEFAULT_PAGE),
        limit=positive_or_default(limit, settings.DEFAULT_LIMIT),
    )


BlogListQueryDep = Annotated[BlogListQuery, Depends(get_blog_list_query)]
