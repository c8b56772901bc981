# Local application imports
from app.settings.common import CommonSettings


class ProductionSettings(CommonSettings):
    DEBUG_MODE: bool = False
    MAILGUN_BASE_URL: str = "https://api.eu.mailgun.net/v3"
