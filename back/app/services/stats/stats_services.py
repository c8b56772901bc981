# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.db_selectors.stats import (
    count_issues,
    count_issues_grouped_by,
    count_users,
    count_votes,
    get_recent_issues,
    get_top_reporters,
    get_users_newest_first,
)
from app.models.auth.user import User
from app.models.issues.issue import Issue, IssueStatus
from app.schemas.issues.issue_schemas import IssueResponse
from app.schemas.stats.stats_schemas import (
    AdminOverview,
    AdminStatisticsResponse,
    CategoryCount,
    OverviewStatsResponse,
    OverviewTotals,
    StatusCount,
)


def resolution_rate(resolved: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(resolved / total * 100, 1)


async def _category_counts(db: AsyncSession) -> list[CategoryCount]:
    return [
        CategoryCount(category=category, count=count)
        for category, count in await count_issues_grouped_by(db, Issue.category)
    ]


async def get_overview_stats(db: AsyncSession) -> OverviewStatsResponse:
    """Issue distribution by category and status plus the overall resolution rate."""
    statuses = [
        StatusCount(status=status, count=count) for status, count in await count_issues_grouped_by(db, Issue.status)
    ]
    total = sum(item.count for item in statuses)
    resolved = sum(item.count for item in statuses if item.status is IssueStatus.RESOLVED)

    return OverviewStatsResponse(
        categories=await _category_counts(db),
        statuses=statuses,
        totals=OverviewTotals(total=total, resolved=resolved, resolution_rate=resolution_rate(resolved, total)),
    )


async def get_admin_statistics(db: AsyncSession, recent_limit: int = 10) -> AdminStatisticsResponse:
    """Dashboard numbers for administrators, including the newest reports."""
    by_status = {IssueStatus(status): count for status, count in await count_issues_grouped_by(db, Issue.status)}

    overview = AdminOverview(
        total_issues=await count_issues(db),
        reported_issues=by_status.get(IssueStatus.REPORTED, 0),
        verified_issues=by_status.get(IssueStatus.VERIFIED, 0),
        in_progress_issues=by_status.get(IssueStatus.IN_PROGRESS, 0),
        resolved_issues=by_status.get(IssueStatus.RESOLVED, 0),
        rejected_issues=by_status.get(IssueStatus.REJECTED, 0),
        total_users=await count_users(db),
        total_votes=await count_votes(db),
    )
    recent = await get_recent_issues(db, recent_limit)

    return AdminStatisticsResponse(
        overview=overview,
        issues_by_category=await _category_counts(db),
        recent_issues=[IssueResponse.model_validate(issue) for issue in recent],
    )


async def list_users(db: AsyncSession) -> Sequence[User]:
    return await get_users_newest_first(db)


async def get_leaderboard(db: AsyncSession, limit: int = 10) -> Sequence[User]:
    return await get_top_reporters(db, limit)
