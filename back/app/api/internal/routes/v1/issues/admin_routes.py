# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.db import get_async_session
from app.dependancies.common import get_current_admin, get_notifier
from app.models.auth.user import User
from app.schemas.issues.issue_schemas import IssueResponse, IssueStatusUpdate
from app.schemas.stats.stats_schemas import AdminStatisticsResponse
from app.schemas.users.user_schemas import UserListResponse, UserResponse
from app.services.issues import update_issue_status
from app.services.notifications import IssueNotifier
from app.services.stats import get_admin_statistics, list_users
from app.settings import settings

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.put("/issues/{issue_id}/status", response_model=IssueResponse)
async def change_issue_status(
    issue_id: UUID,
    status_data: IssueStatusUpdate,
    _: User = Depends(get_current_admin),
    db: AsyncSession = Depends(get_async_session),
    notifier: IssueNotifier = Depends(get_notifier),
):
    """Triage an issue: verify, start work, resolve or reject it"""
    issue = await update_issue_status(
        db,
        issue_id,
        status_data.status,
        notifier,
        admin_notes=status_data.admin_notes,
        reputation_points=settings.REPUTATION_POINTS_ON_RESOLVE,
    )
    return IssueResponse.model_validate(issue)


@router.get("/stats", response_model=AdminStatisticsResponse)
async def read_admin_statistics(
    _: User = Depends(get_current_admin),
    db: AsyncSession = Depends(get_async_session),
):
    """Issue, user and vote totals with the newest reports"""
    return await get_admin_statistics(db, recent_limit=settings.RECENT_ISSUES_LIMIT)


@router.get("/users", response_model=UserListResponse)
async def read_users(
    _: User = Depends(get_current_admin),
    db: AsyncSession = Depends(get_async_session),
):
    users = await list_users(db)
    return UserListResponse(count=len(users), users=[UserResponse.model_validate(user) for user in users])
