"""
Database models package.

This package contains all SQLAlchemy models for the application.
"""

# Local application imports
from app.models.auth import User
from app.models.issues import Issue, Vote

__all__ = [
    "User",
    "Issue",
    "Vote",
]
