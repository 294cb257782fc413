from collections.abc import MutableMapping
from datetime import datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route

from blogdash.models import BlogDB, CategoryDB, UserDB

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return the current local time as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(DATE_FORMAT)


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary


def response_datetime(db: UserDB | CategoryDB | BlogDB) -> dict[str, Any]:
    """
    Dump a database model with ISO-8601 timestamps.

    Args:
        db: Database model

    Returns:
        dict[str, Any]: Dictionary with formatted datetimes
    """
    db_dict = db.model_dump()

    db_dict["created_at"] = db.created_at.isoformat()
    db_dict["updated_at"] = db.updated_at.isoformat() if db.updated_at else None

    return db_dict
