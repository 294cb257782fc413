"""Database models for the application."""

from blogdash.models.blog import BlogDB
from blogdash.models.category import CategoryDB
from blogdash.models.user import UserDB

__all__ = ["BlogDB", "CategoryDB", "UserDB"]
