# Local application imports
from app.core.db.create_async_engine import async_engine
from app.core.db.get_async_session import AsyncSessionLocal, get_async_session

__all__ = [
    "AsyncSessionLocal",
    "async_engine",
    "get_async_session",
]
