# Third-party imports
from fastapi import APIRouter

# Local application imports
from app.api.internal.routes.v1.issues import admin_router, issue_router, vote_router
from app.api.internal.routes.v1.stats import stats_router, user_router
from app.settings import settings

router = APIRouter(prefix=settings.API_V1_STR)

# Include all internal v1 routers
router.include_router(issue_router)
router.include_router(vote_router)
router.include_router(admin_router)
router.include_router(stats_router)
router.include_router(user_router)
