# Third-party imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from app.settings.common import CommonSettings


class VerificationConfig(BaseModel):
    """The tunables the verification pipeline depends on."""

    model_config = ConfigDict(frozen=True)

    duplicate_radius_meters: float = Field(100, gt=0)
    min_votes_for_verification: int = Field(3, ge=0)
    spam_threshold: int = Field(5, ge=1)

    @classmethod
    def from_settings(cls, settings: CommonSettings) -> "VerificationConfig":
        return cls(
            duplicate_radius_meters=settings.DUPLICATE_RADIUS_METERS,
            min_votes_for_verification=settings.MIN_VOTES_FOR_VERIFICATION,
            spam_threshold=settings.SPAM_THRESHOLD,
        )
