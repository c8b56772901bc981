# Standard library imports
from datetime import UTC, datetime

# Local application imports
from app.models.issues.issue import IssueStatus
from app.models.issues.vote import VoteType
from app.services.verification.scoring import (
    DEFAULT_MIN_VOTES_FOR_VERIFICATION,
    calculate_verification_score,
    should_auto_verify,
)
from app.services.verification.types import IssueSnapshot, VoteOutcome, VoteWrite


def _count_field(vote_type: VoteType) -> str:
    return "upvotes" if vote_type is VoteType.UPVOTE else "downvotes"


def apply_vote(
    issue: IssueSnapshot,
    current_vote: VoteType | None,
    requested: VoteType,
    min_votes_for_verification: int = DEFAULT_MIN_VOTES_FOR_VERIFICATION,
    now: datetime | None = None,
) -> VoteOutcome:
    """
    Apply one user's vote to an issue and return the next issue state.

    * no vote yet: the vote is created and its counter incremented
    * same type again: the vote is retracted and its counter decremented
    * other type: the vote flips, moving one count across

    Counters never drop below zero. The verification score is recomputed after
    every transition, and an issue that now satisfies the auto-verification
    rule is marked verified (only the first time). Its status moves to verified
    only while it is still reported.
    """
    now = now or datetime.now(UTC)
    requested = VoteType(requested)
    current_vote = VoteType(current_vote) if current_vote is not None else None
    counts = {"upvotes": issue.upvotes, "downvotes": issue.downvotes}
    requested_field = _count_field(requested)

    if current_vote is None:
        counts[requested_field] += 1
        next_vote: VoteType | None = requested
        writes = [VoteWrite.CREATE_VOTE]
    elif current_vote is requested:
        counts[requested_field] = max(0, counts[requested_field] - 1)
        next_vote = None
        writes = [VoteWrite.DELETE_VOTE]
    else:
        previous_field = _count_field(current_vote)
        counts[previous_field] = max(0, counts[previous_field] - 1)
        counts[requested_field] += 1
        next_vote = requested
        writes = [VoteWrite.UPDATE_VOTE]

    next_issue = issue.model_copy(update=counts)
    next_issue = next_issue.model_copy(update={"verification_score": calculate_verification_score(next_issue, now)})

    auto_verified = False
    if not next_issue.is_verified and should_auto_verify(next_issue, min_votes_for_verification, now):
        update = {"is_verified": True, "verified_at": now}
        # Only a fresh report moves to verified, triage decisions are never undone by votes
        if next_issue.status is IssueStatus.REPORTED:
            update["status"] = IssueStatus.VERIFIED
        next_issue = next_issue.model_copy(update=update)
        auto_verified = True

    writes.append(VoteWrite.UPDATE_ISSUE)
    return VoteOutcome(issue=next_issue, vote_type=next_vote, writes=tuple(writes), auto_verified=auto_verified)
