# Third-party imports
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Local application imports
from app.settings import settings

# Asynchronous Engine, postgres+asyncpg unless DATABASE_URL points elsewhere
async_engine: AsyncEngine = create_async_engine(
    settings.SQLALCHEMY_ASYNC_DATABASE_URI,
    echo=settings.DATABASE_ECHO,
    future=True,
)
