# Standard library imports
import os

# Local application imports
from app.settings.dev import DevSettings
from app.settings.production import ProductionSettings


def get_settings() -> DevSettings | ProductionSettings:
    """
    Return an instance of the settings class matching the ENVIRONMENT variable.
    Anything other than "production" runs with development settings.
    """
    env = os.environ.get("ENVIRONMENT", "dev").lower()
    if env == "production":
        return ProductionSettings()  # type: ignore[call-arg]
    return DevSettings()  # type: ignore[call-arg]


settings = get_settings()
