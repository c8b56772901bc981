# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Local application imports
from app.models.issues.issue import IssueCategory, IssuePriority, IssueStatus
from app.settings import settings


def strip_required_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Field cannot be blank")
    return value


class IssueCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=1000)
    category: IssueCategory
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: str = Field(..., min_length=1)
    priority: IssuePriority = IssuePriority.MEDIUM
    images: list[str] = Field(default_factory=list)

    @field_validator("title", "description", "address")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return strip_required_text(value)

    @field_validator("images")
    @classmethod
    def limit_images(cls, value: list[str]) -> list[str]:
        if len(value) > settings.MAX_ISSUE_IMAGES:
            raise ValueError(f"At most {settings.MAX_ISSUE_IMAGES} images can be attached")
        return value


class IssueUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, min_length=1, max_length=1000)
    priority: IssuePriority | None = None

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, value: str | None) -> str | None:
        # Omitted fields stay untouched, provided ones follow the create rules
        return strip_required_text(value) if value is not None else None


class IssueStatusUpdate(BaseModel):
    status: IssueStatus
    admin_notes: str | None = None


class IssueResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    category: IssueCategory
    priority: IssuePriority
    status: IssueStatus
    latitude: float
    longitude: float
    address: str
    images: list[str]
    reporter_id: UUID
    upvotes: int
    downvotes: int
    verification_score: int
    is_verified: bool
    verified_at: datetime | None
    is_duplicate: bool
    duplicate_of_id: UUID | None
    admin_notes: str | None
    resolved_at: datetime | None
    created_at: datetime
    updated_at: datetime


class NearbyIssueResponse(IssueResponse):
    distance_meters: float


class IssueListResponse(BaseModel):
    issues: list[IssueResponse]
    total: int
    page: int
    per_page: int
    pages: int


class IssueSubmissionResponse(BaseModel):
    issue: IssueResponse
    duplicate_warning: str | None = None
    duplicate_issues: list[IssueResponse] = Field(default_factory=list)


class IssueVerificationResponse(BaseModel):
    issue_id: UUID
    verification_score: int
    should_auto_verify: bool
    is_verified: bool
