# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.db import get_async_session
from app.dependancies.common import get_current_user, get_verification_config
from app.models.auth.user import User
from app.schemas.issues.vote_schemas import UserVoteResponse, VoteCreate, VoteResultResponse
from app.services.issues import cast_vote, get_user_vote
from app.services.verification import VerificationConfig

router = APIRouter(prefix="/votes", tags=["Votes"])


@router.post("/{issue_id}", response_model=VoteResultResponse)
async def vote_issue(
    issue_id: UUID,
    vote_data: VoteCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
    config: VerificationConfig = Depends(get_verification_config),
):
    """Upvote or downvote an issue; repeating the same vote retracts it"""
    result = await cast_vote(db, issue_id, current_user.id, vote_data.vote_type, config)
    return VoteResultResponse(
        **result.model_dump(),
        message="Vote recorded" if result.vote_type else "Vote removed",
    )


@router.get("/{issue_id}", response_model=UserVoteResponse)
async def read_user_vote(
    issue_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
):
    """The current user's vote on an issue, if any"""
    return UserVoteResponse(vote_type=await get_user_vote(db, issue_id, current_user.id))
