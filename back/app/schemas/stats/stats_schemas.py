# Third-party imports
from pydantic import BaseModel

# Local application imports
from app.models.issues.issue import IssueCategory, IssueStatus
from app.schemas.issues.issue_schemas import IssueResponse


class CategoryCount(BaseModel):
    category: IssueCategory
    count: int


class StatusCount(BaseModel):
    status: IssueStatus
    count: int


class OverviewTotals(BaseModel):
    total: int
    resolved: int
    # Percentage with one decimal, 0 when there are no issues
    resolution_rate: float


class OverviewStatsResponse(BaseModel):
    categories: list[CategoryCount]
    statuses: list[StatusCount]
    totals: OverviewTotals


class AdminOverview(BaseModel):
    total_issues: int
    reported_issues: int
    verified_issues: int
    in_progress_issues: int
    resolved_issues: int
    rejected_issues: int
    total_users: int
    total_votes: int


class AdminStatisticsResponse(BaseModel):
    overview: AdminOverview
    issues_by_category: list[CategoryCount]
    recent_issues: list[IssueResponse]
