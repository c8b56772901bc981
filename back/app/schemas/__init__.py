"""
Pydantic schemas package.

This package contains all Pydantic schemas for request/response
validation and serialization.
"""

# Local application imports
from app.schemas.common import BaseResponse
from app.schemas.issues import (
    IssueCreate,
    IssueResponse,
    IssueSubmissionResponse,
    VoteCreate,
    VoteResultResponse,
)

__all__ = [
    "BaseResponse",
    "IssueCreate",
    "IssueResponse",
    "IssueSubmissionResponse",
    "VoteCreate",
    "VoteResultResponse",
]
