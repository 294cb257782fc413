from blogdash.dependencies.dependencies import (
    BlogListQuery,
    BlogListQueryDep,
    BlogRepoDep,
    CategoryRepoDep,
    OwnershipDep,
    UserRepoDep,
    get_blog_list_query,
    get_blog_repository,
    get_category_repository,
    get_ownership_validator,
    get_user_repository,
    positive_or_default,
)

__all__ = [
    "BlogListQuery",
    "BlogListQueryDep",
    "BlogRepoDep",
    "CategoryRepoDep",
    "OwnershipDep",
    "UserRepoDep",
    "get_blog_list_query",
    "get_blog_repository",
    "get_category_repository",
    "get_ownership_validator",
    "get_user_repository",
    "positive_or_default",
]
