"""
Blog Routes.

Provides the filtered, paginated blog listing and CRUD endpoints for blogs.

Summary
-------
Endpoints include:
  - List blogs of a user's category (keyword, date range, page/limit)
  - Create blog
  - Get blog by id
  - Update blog
  - Delete blog

Dependencies
------------
  - `OwnershipDep`: Validates `userId` / `categoryId` / blog id before any read or write.
  - `BlogListQueryDep`: Listing parameters with page and limit already defaulted.

Rate Limiting
-------------
All endpoints define explicit limits and include `429` response examples. Tiered
limits apply when `X-API-Key` is present.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Body, Query, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from blogdash.configs import file_logger
from blogdash.decorators import timed
from blogdash.dependencies import BlogListQueryDep, BlogRepoDep, OwnershipDep
from blogdash.errors import store_failure
from blogdash.managers import limiter
from blogdash.models import BlogDB
from blogdash.query import BlogScope, build_predicate, window
from blogdash.schemas import (
    BlogCreate,
    BlogDetailResponse,
    BlogMessageResponse,
    BlogResponse,
    BlogUpdate,
    MessageResponse,
)
from blogdash.utils.helpers import response_datetime

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

UserIdQuery = Annotated[str, Query(alias="userId", description="Owner ID")]
CategoryIdQuery = Annotated[str, Query(alias="categoryId", description="Category ID")]

_BLOG_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "title": "Getting started with React",
    "description": "Hooks, state and effects in practice",
    "userId": "123e4567-e89b-12d3-a456-426614174111",
    "categoryId": "123e4567-e89b-12d3-a456-426614174222",
    "createdAt": "2025-01-01T08:30:00+00:00",
    "updatedAt": None,
}
_BAD_ID = {
    "description": "Bad request",
    "content": {"application/json": {"example": {"detail": "Invalid user id"}}},
}
_RATE_LIMITED = {
    "description": "Rate limit exceeded",
    "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
}


def _not_found(entity: str) -> dict:
    return {
        "description": "Not found",
        "content": {"application/json": {"example": {"detail": f"{entity} not found"}}},
    }


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse` with datetime serialization.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse.model_validate(response_datetime(db_blog))


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description=(
        "List the blogs of `userId` in `categoryId`, oldest first. `keywords` matches "
        "title or description case-insensitively; `startDate` and `endDate` are inclusive. "
        "`page` defaults to 1 and `limit` to 10."
    ),
    responses={
        200: {"content": {"application/json": {"example": [_BLOG_EXAMPLE]}}},
        400: _BAD_ID,
        404: _not_found("Category"),
        429: _RATE_LIMITED,
    },
    operation_id="blogs_list",
)
@timed("/blogs/list")
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def get_blogs(
    request: Request,
    response: Response,
    query: BlogListQueryDep,
    validator: OwnershipDep,
    repo: BlogRepoDep,
) -> list[BlogResponse]:
    """
    List one page of blogs.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    query : BlogListQuery
        Scope identifiers, criteria and page window inputs.
    validator : OwnershipValidator
        Ownership chain bound to the request session.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    list[BlogResponse]
        Matching blogs; an empty page is not an error.
    """
    with store_failure("Error fetching blogs"):
        scope = await validator.resolve_scope(query.user_id, query.category_id)
        predicate = build_predicate(BlogScope(scope.user.id, scope.category.id), query.criteria)
        blogs = await repo.list_page(predicate, window(query.page, query.limit))
    return [db_blog_to_response(blog) for blog in blogs]


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogMessageResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog for `userId` in `categoryId`.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {"message": "Blog created successfully", "blog": _BLOG_EXAMPLE},
                },
            },
        },
        400: _BAD_ID,
        404: _not_found("Category"),
        429: _RATE_LIMITED,
    },
    operation_id="blogs_create",
)
@timed("/blogs/create")
@limiter.limit(lambda key: "20/minute" if "apikey" in key else "5/minute")
async def create_blog(
    request: Request,
    response: Response,
    blog: Annotated[
        BlogCreate,
        Body(
            examples={
                "basic": {
                    "summary": "Basic blog creation",
                    "value": {
                        "title": "Getting started with React",
                        "description": "Hooks, state and effects in practice",
                    },
                },
            },
        ),
    ],
    validator: OwnershipDep,
    repo: BlogRepoDep,
    user_id: UserIdQuery = "",
    category_id: CategoryIdQuery = "",
) -> BlogMessageResponse:
    """
    Create a new blog.

    Only the category's existence is checked, not that it belongs to `userId`.

    Raises
    ------
    InvalidArgumentError
        If `userId` or `categoryId` is malformed.
    NotFoundError
        If the user or the category does not exist.
    """
    with store_failure("Error creating blog"):
        scope = await validator.resolve_scope(user_id, category_id)
        db_blog = await repo.create(blog, user_id=scope.user.id, category_id=scope.category.id)
    logger.info(f"Blog {db_blog.id} created in category {db_blog.category_id}")
    return BlogMessageResponse(
        message="Blog created successfully",
        blog=db_blog_to_response(db_blog),
    )


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogDetailResponse,
    summary="Get blog by ID",
    description="Retrieve a blog of `userId` in `categoryId`.",
    responses={
        200: {"content": {"application/json": {"example": {"blog": _BLOG_EXAMPLE}}}},
        400: _BAD_ID,
        404: _not_found("Blog"),
        429: _RATE_LIMITED,
    },
    operation_id="blogs_get_by_id",
)
@timed("/blogs/by-id")
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def get_blog(
    request: Request,
    response: Response,
    blog_id: str,
    validator: OwnershipDep,
    user_id: UserIdQuery = "",
    category_id: CategoryIdQuery = "",
) -> BlogDetailResponse:
    """
    Get a single blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    blog_id : str
        Blog identifier.
    validator : OwnershipValidator
        Ownership chain bound to the request session.
    user_id : str
        Owner identifier.
    category_id : str
        Category the blog must belong to.

    Returns
    -------
    BlogDetailResponse
        The blog wrapped in `{"blog": ...}`.
    """
    with store_failure("Error in fetching the specific blog"):
        scope = await validator.resolve_scope(
            user_id,
            category_id,
            blog_id,
            blog_in_category=True,
        )
    return BlogDetailResponse(blog=db_blog_to_response(scope.blog))


@router.patch(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogMessageResponse,
    summary="Update blog",
    description="Update title and/or description of a blog owned by `userId`.",
    responses={400: _BAD_ID, 404: _not_found("Blog"), 429: _RATE_LIMITED},
    operation_id="blogs_update",
)
@timed("/blogs/update")
@limiter.limit(lambda key: "20/minute" if "apikey" in key else "5/minute")
async def update_blog(
    request: Request,
    response: Response,
    blog_id: str,
    blog_update: BlogUpdate,
    validator: OwnershipDep,
    repo: BlogRepoDep,
    user_id: UserIdQuery = "",
) -> BlogMessageResponse:
    """Update a blog. The category it sits in is not re-checked."""
    with store_failure("Error in updating the blog"):
        scope = await validator.resolve_scope(user_id, blog_id=blog_id)
        db_blog = await repo.update(scope.blog, blog_update)
    return BlogMessageResponse(message="Blog updated", blog=db_blog_to_response(db_blog))


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete blog",
    description="Delete a blog owned by `userId`.",
    responses={400: _BAD_ID, 404: _not_found("Blog"), 429: _RATE_LIMITED},
    operation_id="blogs_delete",
)
@timed("/blogs/delete")
@limiter.limit(lambda key: "10/minute" if "apikey" in key else "2/minute")
async def delete_blog(
    request: Request,
    response: Response,
    blog_id: str,
    validator: OwnershipDep,
    repo: BlogRepoDep,
    user_id: UserIdQuery = "",
) -> MessageResponse:
    """
    Delete a blog.

    A blog owned by someone else is reported as "Blog not found" and left intact.
    """
    with store_failure("Error in deleting the blog"):
        scope = await validator.resolve_scope(user_id, blog_id=blog_id)
        await repo.delete(scope.blog.id)
    logger.info(f"Blog {blog_id} deleted by user {user_id}")
    return MessageResponse(message="Blog deleted")
