from blogdash.routes.blog import router as blog_router
from blogdash.routes.category import router as category_router
from blogdash.routes.user import router as user_router

__all__ = ["blog_router", "category_router", "user_router"]
