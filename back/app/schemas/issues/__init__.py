from .issue_schemas import (
    IssueCreate,
    IssueListResponse,
    IssueResponse,
    IssueStatusUpdate,
    IssueSubmissionResponse,
    IssueUpdate,
    IssueVerificationResponse,
    NearbyIssueResponse,
)
from .vote_schemas import UserVoteResponse, VoteCreate, VoteResultResponse

__all__ = [
    "IssueCreate",
    "IssueUpdate",
    "IssueStatusUpdate",
    "IssueResponse",
    "NearbyIssueResponse",
    "IssueListResponse",
    "IssueSubmissionResponse",
    "IssueVerificationResponse",
    "VoteCreate",
    "VoteResultResponse",
    "UserVoteResponse",
]
