# Standard library imports
import enum

# Third-party imports
from sqlalchemy import (
    JSON,
    TIMESTAMP,
    Boolean,
    CheckConstraint,
    Column,
    Enum as SQLEnum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship

# Local application imports
from app.models.base import Base
from app.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class IssueStatus(str, enum.Enum):
    REPORTED = "reported"
    VERIFIED = "verified"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    REJECTED = "rejected"


# Resolved and rejected issues are never live duplicate targets
TERMINAL_STATUSES = frozenset({IssueStatus.RESOLVED, IssueStatus.REJECTED})


class IssuePriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class IssueCategory(str, enum.Enum):
    POTHOLE = "pothole"
    STREETLIGHT = "streetlight"
    GARBAGE = "garbage"
    DRAINAGE = "drainage"
    WATER_SUPPLY = "water_supply"
    ROAD_DAMAGE = "road_damage"
    TRAFFIC_SIGNAL = "traffic_signal"
    PARK_MAINTENANCE = "park_maintenance"
    GRAFFITI = "graffiti"
    OTHER = "other"


class Issue(Base, UUIDTimeStampMixin):
    __tablename__ = "issues"
    __table_args__ = (
        CheckConstraint("upvotes >= 0", name="ck_issues_upvotes_non_negative"),
        CheckConstraint("downvotes >= 0", name="ck_issues_downvotes_non_negative"),
    )

    # Issue details
    title = Column(String(100), nullable=False)
    description = Column(String(1000), nullable=False)
    category = Column(SQLEnum(IssueCategory), nullable=False, index=True)
    priority = Column(SQLEnum(IssuePriority), nullable=False, default=IssuePriority.MEDIUM)
    status = Column(SQLEnum(IssueStatus), nullable=False, default=IssueStatus.REPORTED, index=True)

    # Location information
    latitude = Column(Float, nullable=False, index=True)
    longitude = Column(Float, nullable=False, index=True)
    address = Column(Text, nullable=False)

    # Evidence, ordered image references
    images = Column(JSON, nullable=False, default=list)

    # Reporter, never reassigned after creation
    reporter_id = Column(Uuid(as_uuid=True), ForeignKey("user.id"), nullable=False, index=True)

    # Crowd verification, written only by the vote flow
    upvotes = Column(Integer, nullable=False, default=0)
    downvotes = Column(Integer, nullable=False, default=0)
    verification_score = Column(Integer, nullable=False, default=0)
    is_verified = Column(Boolean, nullable=False, default=False)
    verified_at = Column(TIMESTAMP(timezone=True), nullable=True)

    # Duplicate link, a plain nullable back-reference to the canonical issue
    is_duplicate = Column(Boolean, nullable=False, default=False)
    duplicate_of_id = Column(Uuid(as_uuid=True), ForeignKey("issues.id", ondelete="RESTRICT"), nullable=True)

    # Administration
    admin_notes = Column(Text, nullable=True)
    resolved_at = Column(TIMESTAMP(timezone=True), nullable=True)

    votes = relationship("Vote", back_populates="issue", cascade="all, delete-orphan", passive_deletes=True)

    def __str__(self) -> str:
        return f"Issue: {self.title} ({self.category}, {self.status})"
