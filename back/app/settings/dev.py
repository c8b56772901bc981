# Local application imports
from app.settings.common import CommonSettings


class DevSettings(CommonSettings):
    DEBUG_MODE: bool = True
    DATABASE_ECHO: bool = True
    LOG_COLOURS: bool = True
