# Standard library imports
from typing import Annotated, Any, Literal

# Third-party imports
from pydantic import AnyUrl, BeforeValidator, computed_field
from pydantic_core import MultiHostUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",")]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class CommonSettings(BaseSettings):
    model_config = SettingsConfigDict(
        # Use top level .env file (one level above ./back/)
        env_file="../.env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # General settings
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal["dev", "staging", "production"] = "dev"
    DEBUG_MODE: bool = False
    PROJECT_NAME: str = "CivicReport"

    # Database settings
    POSTGRES_SERVER: str
    POSTGRES_PORT: int
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_DB: str

    # Full async URL override, e.g. sqlite+aiosqlite:///./civicreport.db for local runs
    DATABASE_URL: str | None = None
    DATABASE_ECHO: bool = False

    @property
    def SQLALCHEMY_ASYNC_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return str(
            MultiHostUrl.build(
                scheme="postgresql+asyncpg",  # async driver for async queries
                username=self.POSTGRES_USER,
                password=self.POSTGRES_PASSWORD,
                host=self.POSTGRES_SERVER,
                port=self.POSTGRES_PORT,
                path=self.POSTGRES_DB,
            )
        )

    # CORS settings
    BACKEND_CORS_ORIGINS: Annotated[list[AnyUrl] | str, BeforeValidator(parse_cors)] = [
        AnyUrl("http://localhost/"),
        AnyUrl("http://localhost:3000/"),
        AnyUrl("http://localhost:8000/"),
    ]

    @computed_field  # type: ignore[prop-decorator, misc]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS]

    # Logging and monitoring
    LOG_LEVEL: str | None = None
    LOG_COLOURS: bool = False
    SENTRY_DSN: str | None = None

    # JWT settings (tokens are issued by the identity service, only verified here)
    JWT_ALGORITHM: str = "HS256"
    JWT_SECRET_KEY: str

    # Admin settings
    ADMIN_EMAIL: str = "admin@civicreport.org"

    # Mailgun settings, notifications fall back to the log when unset
    MAILGUN_API_KEY: str | None = None
    MAILGUN_DOMAIN: str | None = None
    MAILGUN_BASE_URL: str = "https://api.mailgun.net/v3"

    # Verification settings
    DUPLICATE_RADIUS_METERS: int = 100
    MIN_VOTES_FOR_VERIFICATION: int = 3
    SPAM_THRESHOLD: int = 5

    # Issue lifecycle
    REPUTATION_POINTS_ON_RESOLVE: int = 10
    NEARBY_DEFAULT_DISTANCE_METERS: int = 5000
    NEARBY_MAX_RESULTS: int = 50

    # Reporting
    LEADERBOARD_SIZE: int = 10
    RECENT_ISSUES_LIMIT: int = 10

    # Issue input limits
    MAX_ISSUE_IMAGES: int = 5
