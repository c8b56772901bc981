# Local application imports
from app.services.stats.stats_services import (
    get_admin_statistics,
    get_leaderboard,
    get_overview_stats,
    list_users,
    resolution_rate,
)

__all__ = ["get_admin_statistics", "get_leaderboard", "get_overview_stats", "list_users", "resolution_rate"]
