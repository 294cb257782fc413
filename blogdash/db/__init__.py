"""Store client and session dependencies."""

from blogdash.db.database import Database, build_engine, get_database, get_session

__all__ = [
    "Database",
    "build_engine",
    "get_database",
    "get_session",
]
