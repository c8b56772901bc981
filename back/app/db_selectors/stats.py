# Standard library imports
from collections.abc import Sequence
from typing import Any

# Third-party imports
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.models.auth.user import User
from app.models.issues.issue import Issue, IssueStatus
from app.models.issues.vote import Vote


async def count_issues_grouped_by(db: AsyncSession, column: Any) -> list[tuple[Any, int]]:
    """``(value, count)`` pairs for an issue column, largest group first."""
    count = func.count(Issue.id).label("count")
    result = await db.execute(select(column, count).group_by(column).order_by(count.desc(), column))
    return [(value, total) for value, total in result.all()]


async def count_issues(db: AsyncSession, status: IssueStatus | None = None) -> int:
    query = select(func.count(Issue.id))
    if status:
        query = query.where(Issue.status == status)
    result = await db.execute(query)
    return result.scalar() or 0


async def count_users(db: AsyncSession) -> int:
    result = await db.execute(select(func.count(User.id)))
    return result.scalar() or 0


async def count_votes(db: AsyncSession) -> int:
    result = await db.execute(select(func.count(Vote.id)))
    return result.scalar() or 0


async def get_recent_issues(db: AsyncSession, limit: int) -> Sequence[Issue]:
    result = await db.execute(select(Issue).order_by(Issue.created_at.desc()).limit(limit))
    return result.scalars().all()


async def get_users_newest_first(db: AsyncSession) -> Sequence[User]:
    result = await db.execute(select(User).order_by(User.created_at.desc()))
    return result.scalars().all()


async def get_top_reporters(db: AsyncSession, limit: int) -> Sequence[User]:
    """Active non-admin users by reputation, ties broken by username."""
    result = await db.execute(
        select(User)
        .where(User.is_admin.is_(False), User.is_active.is_(True))
        .order_by(User.reputation_score.desc(), User.username.asc())
        .limit(limit)
    )
    return result.scalars().all()
