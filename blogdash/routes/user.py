"""
User Routes.

Provides CRUD endpoints for dashboard users with consistent documentation and
rate limiting aligned to the other route modules.

Summary
-------
Endpoints include:
  - List users
  - Create user
  - Rename user
  - Delete user

Dependencies
------------
  - `UserRepoDep`: Repository bound to the request session.

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
from blogdash.dependencies import UserRepoDep
from blogdash.errors import NotFoundError, store_failure
from blogdash.managers import limiter
from blogdash.models import UserDB
from blogdash.repositories import UserRepository
from blogdash.schemas import (
    MessageResponse,
    UserCreate,
    UserMessageResponse,
    UserResponse,
    UserUpdate,
)
from blogdash.utils.helpers import response_datetime
from blogdash.utils.identifiers import parse_identifier

router = APIRouter(prefix="/users", tags=["👤 Users"])

logger = file_logger(getLogger(__name__))

_USER_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "username": "johndoe",
    "email": "johndoe@gmail.com",
    "createdAt": "2025-01-01T08:30:00+00:00",
    "updatedAt": None,
}


def db_user_to_response(db_user: UserDB) -> UserResponse:
    """
    Convert a `UserDB` instance to `UserResponse` with datetime serialization.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.

    Returns
    -------
    UserResponse
        Validated response model.
    """
    return UserResponse.model_validate(response_datetime(db_user))


async def load_user(repo: UserRepository, user_id: str | None) -> UserDB:
    """Parse `user_id` and load the user, or raise 400/404."""
    user = await repo.get_by_id(parse_identifier(user_id, "user"))
    if user is None:
        raise NotFoundError(detail="User not found")
    return user


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="List users",
    description="Retrieve users ordered by creation time, oldest first.",
    responses={
        200: {"content": {"application/json": {"example": [_USER_EXAMPLE]}}},
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_list",
)
@timed("/users/list")
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def get_users(
    request: Request,
    response: Response,
    repo: UserRepoDep,
    skip: Annotated[int, Query(ge=0, description="Number of records to skip")] = 0,
    limit: Annotated[
        int,
        Query(ge=1, le=100, description="Maximum number of records to return"),
    ] = 100,
) -> list[UserResponse]:
    """
    Get users with pagination.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    repo : UserRepository
        Repository dependency.
    skip : int
        Number of records to skip.
    limit : int
        Maximum number of records to return.

    Returns
    -------
    list[UserResponse]
        Users, possibly empty.
    """
    with store_failure("Error fetching users"):
        db_users = await repo.get_all(skip=skip, limit=limit)
    return [db_user_to_response(user) for user in db_users]


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserMessageResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new user",
    description="Register a dashboard user. Username and email must be unique.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {"message": "User is created", "user": _USER_EXAMPLE},
                },
            },
        },
        409: {
            "description": "Conflict",
            "content": {"application/json": {"example": {"detail": "Email already exists"}}},
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_create",
)
@timed("/users/create")
@limiter.limit(lambda key: "15/minute" if "apikey" in key else "5/minute")
async def create_user(
    request: Request,
    response: Response,
    user: Annotated[
        UserCreate,
        Body(
            examples={
                "basic": {
                    "summary": "Basic user creation",
                    "value": {"username": "johndoe", "email": "johndoe@gmail.com"},
                },
            },
        ),
    ],
    repo: UserRepoDep,
) -> UserMessageResponse:
    """
    Create a new user.

    Raises
    ------
    ConflictError
        If the username or email is already taken.
    """
    with store_failure("Error creating user"):
        db_user = await repo.create(user)
    logger.info(f"User {db_user.id} created")
    return UserMessageResponse(message="User is created", user=db_user_to_response(db_user))


@router.patch(
    "",
    response_class=ORJSONResponse,
    response_model=UserMessageResponse,
    summary="Rename user",
    description="Change the username of the user given by `userId` in the body.",
    responses={
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"detail": "Invalid user id"}}},
        },
        404: {
            "description": "Not found",
            "content": {"application/json": {"example": {"detail": "User not found"}}},
        },
        409: {
            "description": "Conflict",
            "content": {"application/json": {"example": {"detail": "Username already exists"}}},
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_update",
)
@timed("/users/update")
@limiter.limit(lambda key: "20/minute" if "apikey" in key else "5/minute")
async def update_user(
    request: Request,
    response: Response,
    user_update: UserUpdate,
    repo: UserRepoDep,
) -> UserMessageResponse:
    """
    Rename a user.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for middleware/decorators.
    user_update : UserUpdate
        `userId` and `newUsername`.
    repo : UserRepository
        Repository dependency.

    Returns
    -------
    UserMessageResponse
        Confirmation with the updated user.
    """
    with store_failure("Error in updating the user"):
        db_user = await load_user(repo, user_update.user_id)
        db_user = await repo.rename(db_user, user_update.new_username)
    return UserMessageResponse(message="User is updated", user=db_user_to_response(db_user))


@router.delete(
    "",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete user",
    description="Delete the user given by `userId`. Categories and blogs are left in place.",
    responses={
        404: {
            "description": "Not found",
            "content": {"application/json": {"example": {"detail": "User not found"}}},
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_delete",
)
@timed("/users/delete")
@limiter.limit(lambda key: "10/minute" if "apikey" in key else "2/minute")
async def delete_user(
    request: Request,
    response: Response,
    repo: UserRepoDep,
    user_id: Annotated[str, Query(alias="userId", description="User ID")] = "",
) -> MessageResponse:
    """Delete a user by ID."""
    with store_failure("Error in deleting the user"):
        db_user = await load_user(repo, user_id)
        await repo.delete(db_user.id)
    logger.info(f"User {db_user.id} deleted")
    return MessageResponse(message="User is deleted")
