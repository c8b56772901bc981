# Standard library imports
from datetime import UTC, datetime
from uuid import UUID

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.monitoring.logging import get_contextual_logger
from app.db_selectors.issues import get_issue_by_id, get_user_by_id
from app.models.issues.issue import Issue, IssueStatus
from app.services.notifications import IssueNotifier
from app.services.service_errors import NotFoundError


async def update_issue_status(
    db: AsyncSession,
    issue_id: UUID,
    status: IssueStatus,
    notifier: IssueNotifier,
    admin_notes: str | None = None,
    reputation_points: int = 10,
    now: datetime | None = None,
) -> Issue:
    """
    Move an issue to ``status`` on behalf of an administrator.

    Marking an issue verified stamps ``verified_at`` the first time only.
    Moving it to resolved stamps ``resolved_at`` and awards the reporter
    ``reputation_points``. The reporter is notified afterwards.
    """
    now = now or datetime.now(UTC)
    status = IssueStatus(status)
    logger = get_contextual_logger(__name__, issue_id=issue_id)

    issue = await get_issue_by_id(db, issue_id, for_update=True)
    if issue is None:
        raise NotFoundError("Issue not found")

    previous_status = IssueStatus(issue.status)
    reporter = await get_user_by_id(db, issue.reporter_id)

    issue.status = status
    if admin_notes:
        issue.admin_notes = admin_notes

    if status is IssueStatus.VERIFIED and not issue.is_verified:
        issue.is_verified = True
        issue.verified_at = now

    if status is IssueStatus.RESOLVED and previous_status is not IssueStatus.RESOLVED:
        issue.resolved_at = now
        if reporter is not None:
            reporter.reputation_score += reputation_points

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    await db.refresh(issue)

    logger.info(f"Issue status changed from {previous_status.value} to {status.value}")

    try:
        await notifier.issue_status_changed(issue, reporter, status)
    except Exception as e:
        logger.error(f"Failed to send status notification: {e}")

    return issue
