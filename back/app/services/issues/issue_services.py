# Standard library imports
from datetime import UTC, datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.monitoring.logging import get_contextual_logger
from app.db_selectors.issues import (
    count_issues_by_reporter_since,
    get_issue_by_id,
    get_issues_in_box,
    get_open_issues_near,
    is_duplicate_target,
)
from app.models.auth.user import User
from app.models.issues.issue import Issue, IssueCategory, IssueStatus
from app.schemas.issues.issue_schemas import IssueCreate, IssueUpdate
from app.services.notifications import IssueNotifier
from app.services.service_errors import NotFoundError, PermissionDeniedError, RateLimitError, ValidationError
from app.services.verification import (
    GeoPoint,
    IssueSnapshot,
    VerificationConfig,
    calculate_verification_score,
    distance,
    find_duplicates,
    is_spamming,
    should_auto_verify,
    spam_window_start,
)

DUPLICATE_WARNING = "Similar issues found nearby"


class IssueSubmission(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    issue: Issue
    duplicate_warning: str | None = None
    duplicate_issues: list[Issue] = []


def validate_location(latitude: float, longitude: float) -> GeoPoint:
    if not -180 <= longitude <= 180:
        raise ValidationError("Invalid longitude")
    if not -90 <= latitude <= 90:
        raise ValidationError("Invalid latitude")
    return GeoPoint(latitude, longitude)


def parse_category(value: IssueCategory | str) -> IssueCategory:
    try:
        return IssueCategory(value)
    except ValueError:
        raise ValidationError(f"Invalid category: {value}")


async def get_issue(db: AsyncSession, issue_id: UUID) -> Issue:
    issue = await get_issue_by_id(db, issue_id)
    if issue is None:
        raise NotFoundError("Issue not found")
    return issue


def _ensure_can_modify(issue: Issue, user: User) -> None:
    if issue.reporter_id != user.id and not user.is_admin:
        raise PermissionDeniedError("Not authorized to modify this issue")


async def submit_issue(
    db: AsyncSession,
    issue_data: IssueCreate,
    reporter_id: UUID,
    config: VerificationConfig,
    notifier: IssueNotifier,
    now: datetime | None = None,
) -> IssueSubmission:
    """
    Create an issue after the spam and duplicate checks.

    Raises RateLimitError when the reporter already hit the hourly submission
    limit. A report that looks like an existing open issue is still created,
    flagged as a duplicate of the first match and returned with a warning.
    """
    now = now or datetime.now(UTC)
    logger = get_contextual_logger(__name__, reporter_id=reporter_id)

    location = validate_location(issue_data.latitude, issue_data.longitude)
    category = parse_category(issue_data.category)

    recent_count = await count_issues_by_reporter_since(db, reporter_id, spam_window_start(now))
    if is_spamming(reporter_id, recent_count, config.spam_threshold):
        raise RateLimitError("Too many issues reported. Please slow down.")

    candidates = await get_open_issues_near(db, category, location, config.duplicate_radius_meters)
    duplicates = find_duplicates(location, category, issue_data.title, candidates, config.duplicate_radius_meters)

    issue = Issue(
        **issue_data.model_dump(),
        reporter_id=reporter_id,
        status=IssueStatus.REPORTED,
        upvotes=0,
        downvotes=0,
        verification_score=0,
        is_duplicate=bool(duplicates),
        duplicate_of_id=duplicates[0].id if duplicates else None,
        created_at=now,
        updated_at=now,
    )
    db.add(issue)
    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    await db.refresh(issue)

    if duplicates:
        logger.info(f"Issue {issue.id} flagged as possible duplicate of {issue.duplicate_of_id}")

    try:
        await notifier.issue_created(issue)
    except Exception as e:
        logger.error(f"Failed to send new issue notification for {issue.id}: {e}")

    return IssueSubmission(
        issue=issue,
        duplicate_warning=DUPLICATE_WARNING if duplicates else None,
        duplicate_issues=list(duplicates),
    )


async def get_verification_score(db: AsyncSession, issue_id: UUID, now: datetime | None = None) -> int:
    issue = await get_issue(db, issue_id)
    return calculate_verification_score(IssueSnapshot.model_validate(issue), now)


async def check_auto_verify(
    db: AsyncSession,
    issue_id: UUID,
    config: VerificationConfig,
    now: datetime | None = None,
) -> bool:
    issue = await get_issue(db, issue_id)
    return should_auto_verify(IssueSnapshot.model_validate(issue), config.min_votes_for_verification, now)


async def update_issue(db: AsyncSession, issue_id: UUID, update_data: IssueUpdate, user: User) -> Issue:
    """Owner or admin edit of the free-text fields and priority."""
    issue = await get_issue(db, issue_id)
    _ensure_can_modify(issue, user)

    for field, value in update_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(issue, field, value)

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    await db.refresh(issue)
    return issue


async def delete_issue(db: AsyncSession, issue_id: UUID, user: User) -> None:
    issue = await get_issue(db, issue_id)
    _ensure_can_modify(issue, user)

    if await is_duplicate_target(db, issue_id):
        raise ValidationError("Issue is referenced by duplicate reports and cannot be deleted")

    await db.delete(issue)
    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise


async def find_nearby_issues(
    db: AsyncSession,
    center: GeoPoint,
    max_distance_meters: float,
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
    limit: int = 50,
) -> list[tuple[Issue, float]]:
    """Issues within ``max_distance_meters`` of ``center``, nearest first."""
    validate_location(center.latitude, center.longitude)
    nearby = []
    for issue in await get_issues_in_box(db, center, max_distance_meters, category, status):
        meters = distance(center, GeoPoint(issue.latitude, issue.longitude))
        if meters <= max_distance_meters:
            nearby.append((issue, meters))
    nearby.sort(key=lambda pair: pair[1])
    return nearby[:limit]
