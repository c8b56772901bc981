# Third-party imports
from pydantic import BaseModel

# Local application imports
from app.models.issues.vote import VoteType


class VoteCreate(BaseModel):
    vote_type: VoteType


class VoteResultResponse(BaseModel):
    upvotes: int
    downvotes: int
    verification_score: int
    is_verified: bool
    vote_type: VoteType | None
    message: str


class UserVoteResponse(BaseModel):
    vote_type: VoteType | None
