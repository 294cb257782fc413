"""
Category Routes.

Categories group a user's blogs. Every endpoint takes the owner as the
`userId` query parameter and runs the ownership chain before touching the
store. Update and delete only see categories owned by that user.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Query, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from blogdash.configs import file_logger
from blogdash.decorators import timed
from blogdash.dependencies import CategoryRepoDep, OwnershipDep
from blogdash.errors import store_failure
from blogdash.managers import limiter
from blogdash.models import CategoryDB
from blogdash.schemas import (
    CategoryCreate,
    CategoryMessageResponse,
    CategoryResponse,
    CategoryUpdate,
    MessageResponse,
)
from blogdash.utils.helpers import response_datetime

router = APIRouter(prefix="/categories", tags=["🗂️ Categories"])

logger = file_logger(getLogger(__name__))

UserIdQuery = Annotated[str, Query(alias="userId", description="Owner ID")]

_NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": "Category not found"}}},
}
_BAD_ID = {
    "description": "Bad request",
    "content": {"application/json": {"example": {"detail": "Invalid category id"}}},
}
_RATE_LIMITED = {
    "description": "Rate limit exceeded",
    "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
}


def db_category_to_response(db_category: CategoryDB) -> CategoryResponse:
    return CategoryResponse.model_validate(response_datetime(db_category))


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[CategoryResponse],
    summary="List categories of a user",
    description="Retrieve every category owned by `userId`, oldest first.",
    responses={400: _BAD_ID, 404: _NOT_FOUND, 429: _RATE_LIMITED},
    operation_id="categories_list",
)
@timed("/categories/list")
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def get_categories(
    request: Request,
    response: Response,
    validator: OwnershipDep,
    repo: CategoryRepoDep,
    user_id: UserIdQuery = "",
) -> list[CategoryResponse]:
    """
    List categories owned by a user.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    validator : OwnershipValidator
        Ownership chain bound to the request session.
    repo : CategoryRepository
        Repository dependency.
    user_id : str
        Owner identifier.

    Returns
    -------
    list[CategoryResponse]
        Categories, possibly empty.
    """
    with store_failure("Error fetching categories"):
        scope = await validator.resolve_scope(user_id)
        categories = await repo.list_by_user(scope.user.id)
    return [db_category_to_response(category) for category in categories]


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=CategoryMessageResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a category",
    description="Create a category owned by `userId`.",
    responses={400: _BAD_ID, 404: _NOT_FOUND, 429: _RATE_LIMITED},
    operation_id="categories_create",
)
@timed("/categories/create")
@limiter.limit(lambda key: "20/minute" if "apikey" in key else "5/minute")
async def create_category(
    request: Request,
    response: Response,
    category: CategoryCreate,
    validator: OwnershipDep,
    repo: CategoryRepoDep,
    user_id: UserIdQuery = "",
) -> CategoryMessageResponse:
    """Create a category for an existing user."""
    with store_failure("Error creating category"):
        scope = await validator.resolve_scope(user_id)
        db_category = await repo.create(category, scope.user.id)
    return CategoryMessageResponse(
        message="Category is created",
        category=db_category_to_response(db_category),
    )


@router.patch(
    "/{category_id}",
    response_class=ORJSONResponse,
    response_model=CategoryMessageResponse,
    summary="Update a category",
    description="Change the title of a category owned by `userId`.",
    responses={400: _BAD_ID, 404: _NOT_FOUND, 429: _RATE_LIMITED},
    operation_id="categories_update",
)
@timed("/categories/update")
@limiter.limit(lambda key: "20/minute" if "apikey" in key else "5/minute")
async def update_category(
    request: Request,
    response: Response,
    category_id: str,
    category_update: CategoryUpdate,
    validator: OwnershipDep,
    repo: CategoryRepoDep,
    user_id: UserIdQuery = "",
) -> CategoryMessageResponse:
    """
    Update a category title.

    A category owned by another user is reported as not found.
    """
    with store_failure("Error in updating the category"):
        scope = await validator.resolve_scope(user_id, category_id, category_owned=True)
        db_category = await repo.update(scope.category, category_update)
    return CategoryMessageResponse(
        message="Category is updated",
        category=db_category_to_response(db_category),
    )


@router.delete(
    "/{category_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete a category",
    description="Delete a category owned by `userId`. Its blogs are not removed.",
    responses={400: _BAD_ID, 404: _NOT_FOUND, 429: _RATE_LIMITED},
    operation_id="categories_delete",
)
@timed("/categories/delete")
@limiter.limit(lambda key: "10/minute" if "apikey" in key else "2/minute")
async def delete_category(
    request: Request,
    response: Response,
    category_id: str,
    validator: OwnershipDep,
    repo: CategoryRepoDep,
    user_id: UserIdQuery = "",
) -> MessageResponse:
    with store_failure("Error in deleting the category"):
        scope = await validator.resolve_scope(user_id, category_id, category_owned=True)
        await repo.delete(scope.category.id)
    logger.info(f"Category {category_id} deleted by user {user_id}")
    return MessageResponse(message="Category deleted")
