from .stats_routes import router as stats_router
from .user_routes import router as user_router

__all__ = ["stats_router", "user_router"]
