from .stats_schemas import (
    AdminOverview,
    AdminStatisticsResponse,
    CategoryCount,
    OverviewStatsResponse,
    OverviewTotals,
    StatusCount,
)

__all__ = [
    "AdminOverview",
    "AdminStatisticsResponse",
    "CategoryCount",
    "OverviewStatsResponse",
    "OverviewTotals",
    "StatusCount",
]
