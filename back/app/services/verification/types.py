# Standard library imports
from datetime import UTC, datetime
import enum
from typing import NamedTuple
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Local application imports
from app.models.issues.issue import IssueCategory, IssueStatus
from app.models.issues.vote import VoteType


class GeoPoint(NamedTuple):
    latitude: float
    longitude: float


class IssueSnapshot(BaseModel):
    """
    Immutable view of the issue fields the verification pipeline reads and writes.

    Built from an ORM ``Issue`` with ``IssueSnapshot.model_validate(issue)``;
    transitions return a new snapshot instead of mutating this one.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID | None = None
    title: str
    category: IssueCategory
    status: IssueStatus = IssueStatus.REPORTED
    latitude: float
    longitude: float
    images: tuple[str, ...] = ()
    upvotes: int = Field(0, ge=0)
    downvotes: int = Field(0, ge=0)
    verification_score: int = 0
    is_verified: bool = False
    verified_at: datetime | None = None
    created_at: datetime

    @field_validator("created_at", "verified_at")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        # SQLite hands timestamps back without tzinfo
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

    @property
    def total_votes(self) -> int:
        return self.upvotes + self.downvotes


class VoteWrite(str, enum.Enum):
    CREATE_VOTE = "create_vote"
    UPDATE_VOTE = "update_vote"
    DELETE_VOTE = "delete_vote"
    UPDATE_ISSUE = "update_issue"


class VoteOutcome(BaseModel):
    """Result of one vote transition: next issue state plus the writes to persist."""

    model_config = ConfigDict(frozen=True)

    issue: IssueSnapshot
    vote_type: VoteType | None
    writes: tuple[VoteWrite, ...]
    auto_verified: bool = False
