"""
Pytest configuration and shared fixtures.

Every test gets a fresh in-memory SQLite database; API tests talk to the app
through httpx with the session dependency pointed at that database.
"""

import os

# Settings are read at import time, so the environment must be in place first
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("POSTGRES_SERVER", "localhost")
os.environ.setdefault("POSTGRES_PORT", "5432")
os.environ.setdefault("POSTGRES_USER", "civicreport")
os.environ.setdefault("POSTGRES_PASSWORD", "civicreport")
os.environ.setdefault("POSTGRES_DB", "civicreport_test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("DATABASE_ECHO", "false")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from datetime import UTC, datetime
import uuid

from httpx import ASGITransport, AsyncClient
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.core.db import get_async_session
from app.models.auth.user import User
from app.models.base import Base
from app.models.issues.issue import Issue, IssueCategory, IssueStatus
from app.services.verification import VerificationConfig

from .fakes import BANGALORE, RecordingNotifier


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


@pytest.fixture
def config() -> VerificationConfig:
    return VerificationConfig()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_user(db):
    async def _make_user(**overrides) -> User:
        suffix = uuid.uuid4().hex[:8]
        values = {"email": f"user-{suffix}@example.com", "username": f"user_{suffix}"}
        values.update(overrides)
        user = User(**values)
        db.add(user)
        await db.commit()
        await db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_issue(db, now):
    async def _make_issue(reporter: User, **overrides) -> Issue:
        values = {
            "title": "Big pothole near market",
            "description": "Deep pothole in the left lane",
            "category": IssueCategory.POTHOLE,
            "status": IssueStatus.REPORTED,
            "latitude": BANGALORE[0],
            "longitude": BANGALORE[1],
            "address": "MG Road, Bengaluru",
            "images": [],
            "reporter_id": reporter.id,
            "created_at": now,
            "updated_at": now,
        }
        values.update(overrides)
        issue = Issue(**values)
        db.add(issue)
        await db.commit()
        await db.refresh(issue)
        return issue

    return _make_issue


@pytest_asyncio.fixture
async def reporter(make_user) -> User:
    return await make_user(username="reporter", email="reporter@example.com")


@pytest_asyncio.fixture
async def admin(make_user) -> User:
    return await make_user(username="admin", email="admin@example.com", is_admin=True)


@pytest_asyncio.fixture
async def client(session_factory, notifier):
    from main import create_app

    app = create_app(notifier=notifier)

    async def override_get_async_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
