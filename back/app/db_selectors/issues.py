# Standard library imports
from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

# Third-party imports
from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.models.auth.user import User
from app.models.issues.issue import TERMINAL_STATUSES, Issue, IssueCategory, IssuePriority, IssueStatus
from app.models.issues.vote import Vote
from app.services.verification.geo import bounding_box
from app.services.verification.types import GeoPoint


async def get_issue_by_id(db: AsyncSession, issue_id: UUID, for_update: bool = False) -> Issue | None:
    """Fetch an issue, optionally row-locking it for a read-modify-write."""
    query = select(Issue).where(Issue.id == issue_id)
    if for_update:
        query = query.with_for_update()
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_user_by_id(db: AsyncSession, user_id: UUID) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_vote(db: AsyncSession, issue_id: UUID, user_id: UUID) -> Vote | None:
    result = await db.execute(select(Vote).where(and_(Vote.issue_id == issue_id, Vote.user_id == user_id)))
    return result.scalar_one_or_none()


async def count_issues_by_reporter_since(db: AsyncSession, reporter_id: UUID, since: datetime) -> int:
    result = await db.execute(
        select(func.count(Issue.id)).where(and_(Issue.reporter_id == reporter_id, Issue.created_at >= since))
    )
    return result.scalar() or 0


def _within_box(center: GeoPoint, radius_meters: float) -> list:
    box = bounding_box(center, radius_meters)
    if box is None:
        return []
    min_lat, max_lat, min_lon, max_lon = box
    return [
        Issue.latitude.between(min_lat, max_lat),
        Issue.longitude.between(min_lon, max_lon),
    ]


async def get_open_issues_near(
    db: AsyncSession,
    category: IssueCategory,
    center: GeoPoint,
    radius_meters: float,
) -> Sequence[Issue]:
    """
    Open issues of ``category`` inside the bounding box around ``center``.

    The box is only a prefilter, exact distances are checked by the caller.
    """
    filters = [
        Issue.category == category,
        Issue.status.not_in(list(TERMINAL_STATUSES)),
        *_within_box(center, radius_meters),
    ]
    result = await db.execute(select(Issue).where(and_(*filters)).order_by(Issue.created_at.asc()))
    return result.scalars().all()


async def get_issues_in_box(
    db: AsyncSession,
    center: GeoPoint,
    radius_meters: float,
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
) -> Sequence[Issue]:
    filters = _within_box(center, radius_meters)
    if category:
        filters.append(Issue.category == category)
    if status:
        filters.append(Issue.status == status)

    query = select(Issue)
    if filters:
        query = query.where(and_(*filters))
    result = await db.execute(query)
    return result.scalars().all()


async def list_issues(
    db: AsyncSession,
    offset: int,
    limit: int,
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
    priority: IssuePriority | None = None,
    search: str | None = None,
) -> tuple[Sequence[Issue], int]:
    """Newest-first page of issues matching the filters, plus the total match count."""
    filters = []
    if category:
        filters.append(Issue.category == category)
    if status:
        filters.append(Issue.status == status)
    if priority:
        filters.append(Issue.priority == priority)
    if search:
        pattern = f"%{search}%"
        filters.append(
            or_(
                Issue.title.ilike(pattern),
                Issue.description.ilike(pattern),
                Issue.address.ilike(pattern),
            )
        )

    query = select(Issue)
    count_query = select(func.count()).select_from(Issue)
    if filters:
        query = query.where(and_(*filters))
        count_query = count_query.where(and_(*filters))

    total_result = await db.execute(count_query)
    total = total_result.scalar() or 0

    result = await db.execute(query.order_by(Issue.created_at.desc()).offset(offset).limit(limit))
    return result.scalars().all(), total


async def is_duplicate_target(db: AsyncSession, issue_id: UUID) -> bool:
    result = await db.execute(select(func.count(Issue.id)).where(Issue.duplicate_of_id == issue_id))
    return (result.scalar() or 0) > 0
