# Local application imports
from app.models.auth.user import User

__all__ = ["User"]
