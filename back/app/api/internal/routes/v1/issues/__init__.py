from .admin_routes import router as admin_router
from .issue_routes import router as issue_router
from .vote_routes import router as vote_router

__all__ = ["admin_router", "issue_router", "vote_router"]
