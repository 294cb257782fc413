from blogdash.schemas.blog import (
    BlogCreate,
    BlogDetailResponse,
    BlogMessageResponse,
    BlogResponse,
    BlogUpdate,
)
from blogdash.schemas.category import (
    CategoryCreate,
    CategoryMessageResponse,
    CategoryResponse,
    CategoryUpdate,
)
from blogdash.schemas.common import HealthCheckResponse, MessageResponse
from blogdash.schemas.user import UserCreate, UserMessageResponse, UserResponse, UserUpdate

__all__ = [
    "BlogCreate",
    "BlogDetailResponse",
    "BlogMessageResponse",
    "BlogResponse",
    "BlogUpdate",
    "CategoryCreate",
    "CategoryMessageResponse",
    "CategoryResponse",
    "CategoryUpdate",
    "HealthCheckResponse",
    "MessageResponse",
    "UserCreate",
    "UserMessageResponse",
    "UserResponse",
    "UserUpdate",
]
