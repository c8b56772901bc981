# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    username: str
    is_admin: bool
    is_active: bool
    reputation_score: int
    created_at: datetime


class UserListResponse(BaseModel):
    count: int
    users: list[UserResponse]


class LeaderboardEntry(BaseModel):
    """Public view of a reporter, no contact details."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    reputation_score: int
