"""
Issue verification pipeline: duplicate detection, crowd scoring,
auto-verification, vote transitions and submission rate limiting.

Everything here is pure; callers load state, apply the result and persist it.
"""

# Local application imports
from app.services.verification.config import VerificationConfig
from app.services.verification.duplicates import find_duplicates
from app.services.verification.geo import distance
from app.services.verification.ledger import apply_vote
from app.services.verification.scoring import calculate_verification_score, should_auto_verify
from app.services.verification.similarity import similarity
from app.services.verification.spam import is_spamming, spam_window_start
from app.services.verification.types import GeoPoint, IssueSnapshot, VoteOutcome, VoteWrite

__all__ = [
    "GeoPoint",
    "IssueSnapshot",
    "VerificationConfig",
    "VoteOutcome",
    "VoteWrite",
    "apply_vote",
    "calculate_verification_score",
    "distance",
    "find_duplicates",
    "is_spamming",
    "should_auto_verify",
    "similarity",
    "spam_window_start",
]
