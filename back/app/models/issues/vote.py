# Standard library imports
import enum

# Third-party imports
from sqlalchemy import Column, Enum as SQLEnum, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

# Local application imports
from app.models.base import Base
from app.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class VoteType(str, enum.Enum):
    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class Vote(Base, UUIDTimeStampMixin):
    __tablename__ = "votes"
    __table_args__ = (UniqueConstraint("user_id", "issue_id", name="unique_voter_issue"),)

    user_id = Column(Uuid(as_uuid=True), ForeignKey("user.id"), nullable=False, index=True)
    issue_id = Column(Uuid(as_uuid=True), ForeignKey("issues.id", ondelete="CASCADE"), nullable=False, index=True)
    vote_type = Column(SQLEnum(VoteType), nullable=False)

    issue = relationship("Issue", back_populates="votes")
