# Standard library imports
from datetime import UTC, datetime, timedelta
from uuid import UUID

# Local application imports
from app.core.monitoring.logging import get_contextual_logger

SPAM_WINDOW = timedelta(hours=1)
DEFAULT_SPAM_THRESHOLD = 5


def spam_window_start(now: datetime | None = None) -> datetime:
    """Lower bound (inclusive) of the trailing window submissions are counted in."""
    return (now or datetime.now(UTC)) - SPAM_WINDOW


def is_spamming(
    reporter_id: UUID | str,
    recent_submission_count: int,
    threshold: int = DEFAULT_SPAM_THRESHOLD,
) -> bool:
    """
    True when the reporter already has ``threshold`` or more submissions in the
    trailing window. The count is re-derived by the caller on every check.
    """
    blocked = recent_submission_count >= threshold
    if blocked:
        logger = get_contextual_logger(__name__, reporter_id=reporter_id)
        logger.warning(f"Submission rate limit hit: {recent_submission_count} issues in the last hour")
    return blocked
