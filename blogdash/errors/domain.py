"""
Request outcome classes for the blog dashboard.

``NotFoundError`` covers both a missing record and a record owned by someone
else; callers never learn which one it was.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from logging import getLogger

from sqlalchemy.exc import SQLAlchemyError
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from blogdash.configs import file_logger
from blogdash.errors.base import BaseAppError, create_exception_handler
from blogdash.errors.database import DatabaseError

logger = file_logger(getLogger(__name__))


class InvalidArgumentError(BaseAppError):
    """Malformed identifier or malformed/missing required field."""

    def __init__(self, detail: str = "Invalid argument") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class NotFoundError(BaseAppError):
    """User, category or blog absent, or not owned by the caller."""

    def __init__(self, detail: str = "Not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class ConflictError(BaseAppError):
    """Write rejected because it collides with an existing record."""

    def __init__(self, detail: str = "Conflict") -> None:
        super().__init__(detail, HTTP_409_CONFLICT)


class InternalError(BaseAppError):
    """Unexpected persistence failure. `detail` is always a generic message."""

    def __init__(self, detail: str = "Internal Server Error") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


@contextmanager
def store_failure(message: str) -> Iterator[None]:
    """
    Translate unexpected store failures into `InternalError(message)`.

    Duplicate entries become `ConflictError` with the repository's message.
    Domain errors raised inside the block pass through untouched.
    """
    try:
        yield
    except DatabaseError as e:
        if e.status_code == HTTP_409_CONFLICT:
            raise ConflictError(detail=e.detail) from e
        logger.exception(message)
        raise InternalError(detail=message) from e
    except SQLAlchemyError as e:
        logger.exception(message)
        raise InternalError(detail=message) from e


domain_exception_handler = create_exception_handler(logger)
