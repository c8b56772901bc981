# Standard library imports
from contextlib import asynccontextmanager

# Third-party imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from sqlalchemy import text

# Local application imports
from app.core.db import get_async_session
from app.core.monitoring.logging import get_logger
from app.core.monitoring.sentry import setup_sentry
from app.services.notifications import IssueNotifier, build_notifier
from app.settings import settings

# Set up the main application logger
logger = get_logger("app")


if setup_sentry():
    logger.info(f"Sentry initialized in {settings.ENVIRONMENT} environment")


# ---- FASTAPI APP CREATION ----
def custom_generate_unique_id(route: APIRoute) -> str:
    # Handle routes without tags
    if route.tags and len(route.tags) > 0:
        return f"{route.tags[0]}-{route.name}"
    else:
        return route.name or "unnamed_route"


def create_app(notifier: IssueNotifier | None = None) -> FastAPI:
    """Create and configure FastAPI application"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info("Starting up FastAPI application")
        yield
        # Shutdown
        logger.info("Shutting down FastAPI application")
        await app.state.notifier.aclose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Civic issue reporting with crowd verification and duplicate detection",
        openapi_url=f"{settings.API_V1_STR}/openapi.json" if settings.ENVIRONMENT != "production" else None,
        docs_url=f"{settings.API_V1_STR}/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url=f"{settings.API_V1_STR}/redoc" if settings.ENVIRONMENT != "production" else None,
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )

    # Built once per process and shared by every request
    app.state.notifier = notifier or build_notifier(settings)

    if settings.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Local application imports
    from app.api.internal.utils.exceptions import register_exception_handlers

    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": "1.0.0"}

    # Test database connection endpoint
    @app.get("/test-db")
    async def test_database():
        try:
            async for db in get_async_session():
                result = await db.execute(text("SELECT 1"))
                return {"status": "database_connected", "result": result.scalar()}
        except Exception as e:
            logger.error(f"Database check failed: {e}")
            return {"status": "database_error", "error": str(e)}

    # Local application imports
    from app.api.internal.routes.v1.routes import router as v1_router

    app.include_router(v1_router)

    return app


# Create the app instance
app = create_app()
