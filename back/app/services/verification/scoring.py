"""
Crowd verification score and the auto-verification rule built on it.

The score adds up independent components:

* votes (up to 50): ``net / total * 50`` once anyone has voted, negative when
  downvotes dominate
* evidence (up to 20): 10 points per attached image
* recency (up to 10): ``10 - age_in_days`` during the first week
* reporter reputation: not scored yet, contributes 0

The sum is rounded half-up and deliberately left unclamped.
"""

# Standard library imports
from datetime import UTC, datetime
import math

# Local application imports
from app.services.verification.types import IssueSnapshot

MAX_VOTE_POINTS = 50
MAX_EVIDENCE_POINTS = 20
POINTS_PER_IMAGE = 10
MAX_RECENCY_POINTS = 10
RECENCY_WINDOW_DAYS = 7

AUTO_VERIFY_MIN_SCORE = 60
DEFAULT_MIN_VOTES_FOR_VERIFICATION = 3
SECONDS_PER_DAY = 60 * 60 * 24


def vote_points(upvotes: int, downvotes: int) -> float:
    total = upvotes + downvotes
    if total <= 0:
        return 0.0
    return min(MAX_VOTE_POINTS, (upvotes - downvotes) / total * MAX_VOTE_POINTS)


def evidence_points(image_count: int) -> float:
    return min(MAX_EVIDENCE_POINTS, image_count * POINTS_PER_IMAGE)


def recency_points(created_at: datetime, now: datetime) -> float:
    age_days = (now - created_at).total_seconds() / SECONDS_PER_DAY
    if age_days < RECENCY_WINDOW_DAYS:
        return MAX_RECENCY_POINTS - age_days
    return 0.0


def reputation_points(issue: IssueSnapshot) -> float:
    # Placeholder until reporter history feeds into verification
    return 0.0


def calculate_verification_score(issue: IssueSnapshot, now: datetime | None = None) -> int:
    now = now or datetime.now(UTC)
    score = (
        vote_points(issue.upvotes, issue.downvotes)
        + evidence_points(len(issue.images))
        + recency_points(issue.created_at, now)
        + reputation_points(issue)
    )
    return math.floor(score + 0.5)


def should_auto_verify(
    issue: IssueSnapshot,
    min_votes_for_verification: int = DEFAULT_MIN_VOTES_FOR_VERIFICATION,
    now: datetime | None = None,
) -> bool:
    """
    True when the crowd signal is strong enough to promote the issue to verified.

    Requires a score of at least 60, at least ``min_votes_for_verification``
    votes in total, and more than twice as many upvotes as downvotes.
    """
    has_min_votes = issue.total_votes >= min_votes_for_verification
    has_positive_ratio = issue.upvotes > issue.downvotes * 2
    if not (has_min_votes and has_positive_ratio):
        return False
    return calculate_verification_score(issue, now) >= AUTO_VERIFY_MIN_SCORE
