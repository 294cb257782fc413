"""Repository layer for database operations."""

from blogdash.repositories.blog import BlogRepository, predicate_clauses
from blogdash.repositories.category import CategoryRepository
from blogdash.repositories.user import UserRepository

__all__ = ["BlogRepository", "CategoryRepository", "UserRepository", "predicate_clauses"]
