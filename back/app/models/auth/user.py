# Third-party imports
from sqlalchemy import Boolean, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from app.models.base import Base
from app.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class User(UUIDTimeStampMixin, Base):
    __tablename__ = "user"

    email: Mapped[str] = mapped_column(
        String,
        index=True,
        unique=True,
        nullable=False,
        comment="User's email (acts as username for notifications)",
    )
    username: Mapped[str] = mapped_column(String(30), unique=True, nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, server_default=text("false"), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default=text("true"), nullable=False)

    # Incremented when one of the user's issues gets resolved
    reputation_score: Mapped[int] = mapped_column(Integer, default=0, server_default=text("0"), nullable=False)

    def __str__(self) -> str:
        return f"User: {self.username} - {self.email}"
