from blogdash.errors.base import BaseAppError, create_exception_handler
from blogdash.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    database_exception_handler,
)
from blogdash.errors.domain import (
    ConflictError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    domain_exception_handler,
    store_failure,
)
from blogdash.errors.validation import validation_exception_handler

__all__ = [
    "BaseAppError",
    "ConflictError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "InternalError",
    "InvalidArgumentError",
    "NotFoundError",
    "create_exception_handler",
    "database_exception_handler",
    "domain_exception_handler",
    "store_failure",
    "validation_exception_handler",
]
