# Standard library imports
from datetime import UTC, datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.monitoring.logging import get_contextual_logger
from app.db_selectors.issues import get_issue_by_id, get_vote
from app.models.issues.vote import Vote, VoteType
from app.services.service_errors import NotFoundError, ValidationError
from app.services.verification import IssueSnapshot, VerificationConfig, VoteWrite, apply_vote


class VoteResult(BaseModel):
    upvotes: int
    downvotes: int
    verification_score: int
    is_verified: bool
    vote_type: VoteType | None


def parse_vote_type(value: VoteType | str) -> VoteType:
    try:
        return VoteType(value)
    except ValueError:
        raise ValidationError('Invalid vote type. Must be "upvote" or "downvote"')


async def cast_vote(
    db: AsyncSession,
    issue_id: UUID,
    user_id: UUID,
    vote_type: VoteType | str,
    config: VerificationConfig,
    now: datetime | None = None,
) -> VoteResult:
    """
    Record, flip or retract a user's vote and refresh the issue's verification state.

    The issue row is locked for the whole read-modify-write so concurrent votes
    on the same issue cannot lose updates.
    """
    requested = parse_vote_type(vote_type)
    now = now or datetime.now(UTC)
    logger = get_contextual_logger(__name__, issue_id=issue_id, user_id=user_id)

    issue = await get_issue_by_id(db, issue_id, for_update=True)
    if issue is None:
        raise NotFoundError("Issue not found")

    vote = await get_vote(db, issue_id, user_id)
    outcome = apply_vote(
        IssueSnapshot.model_validate(issue),
        vote.vote_type if vote else None,
        requested,
        config.min_votes_for_verification,
        now,
    )

    for write in outcome.writes:
        if write is VoteWrite.CREATE_VOTE:
            db.add(Vote(issue_id=issue_id, user_id=user_id, vote_type=outcome.vote_type))
        elif write is VoteWrite.UPDATE_VOTE:
            vote.vote_type = outcome.vote_type
        elif write is VoteWrite.DELETE_VOTE:
            await db.delete(vote)
        elif write is VoteWrite.UPDATE_ISSUE:
            next_issue = outcome.issue
            issue.upvotes = next_issue.upvotes
            issue.downvotes = next_issue.downvotes
            issue.verification_score = next_issue.verification_score
            issue.is_verified = next_issue.is_verified
            issue.verified_at = next_issue.verified_at
            issue.status = next_issue.status

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    if outcome.auto_verified:
        logger.info(f"Issue auto-verified with score {outcome.issue.verification_score}")

    return VoteResult(
        upvotes=outcome.issue.upvotes,
        downvotes=outcome.issue.downvotes,
        verification_score=outcome.issue.verification_score,
        is_verified=outcome.issue.is_verified,
        vote_type=outcome.vote_type,
    )


async def get_user_vote(db: AsyncSession, issue_id: UUID, user_id: UUID) -> VoteType | None:
    vote = await get_vote(db, issue_id, user_id)
    return vote.vote_type if vote else None
