"""Identifier parsing for values crossing the HTTP boundary."""

from uuid import UUID

from blogdash.errors.domain import InvalidArgumentError


def parse_identifier(value: str | None, label: str) -> UUID:
    """
    Parse a store identifier or raise `InvalidArgumentError`.

    Args:
        value: Raw identifier from the request (may be missing)
        label: Entity name used in the error message ("user", "blog", ...)

    Returns:
        UUID: Parsed identifier

    Raises:
        InvalidArgumentError: If the value is missing or not a valid UUID
    """
    if not value:
        raise InvalidArgumentError(detail=f"Invalid {label} id")
    try:
        return UUID(value)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(detail=f"Invalid {label} id") from e
