# Standard library imports
import math
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.db import get_async_session
from app.db_selectors.issues import list_issues as select_issues
from app.dependancies.common import get_current_user, get_notifier, get_verification_config
from app.models.auth.user import User
from app.models.issues.issue import IssueCategory, IssuePriority, IssueStatus
from app.schemas.issues.issue_schemas import (
    IssueCreate,
    IssueListResponse,
    IssueResponse,
    IssueSubmissionResponse,
    IssueUpdate,
    IssueVerificationResponse,
    NearbyIssueResponse,
)
from app.services.issues import (
    check_auto_verify,
    delete_issue,
    find_nearby_issues,
    get_issue,
    get_verification_score,
    submit_issue,
    update_issue,
)
from app.services.notifications import IssueNotifier
from app.services.verification import GeoPoint, VerificationConfig
from app.settings import settings

router = APIRouter(prefix="/issues", tags=["Issues"])


@router.post("", response_model=IssueSubmissionResponse, status_code=status.HTTP_201_CREATED)
async def create_issue(
    issue_data: IssueCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
    config: VerificationConfig = Depends(get_verification_config),
    notifier: IssueNotifier = Depends(get_notifier),
):
    """Report a new issue, warning when similar open issues exist nearby"""
    submission = await submit_issue(db, issue_data, current_user.id, config, notifier)
    return IssueSubmissionResponse(
        issue=IssueResponse.model_validate(submission.issue),
        duplicate_warning=submission.duplicate_warning,
        duplicate_issues=[IssueResponse.model_validate(issue) for issue in submission.duplicate_issues],
    )


@router.get("", response_model=IssueListResponse)
async def list_issues(
    page: int = Query(1, ge=1),
    per_page: int = Query(50, ge=1, le=100),
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
    priority: IssuePriority | None = None,
    search: str | None = Query(None, max_length=100),
    db: AsyncSession = Depends(get_async_session),
):
    """List issues with filters, newest first"""
    issues, total = await select_issues(
        db,
        offset=(page - 1) * per_page,
        limit=per_page,
        category=category,
        status=status,
        priority=priority,
        search=search,
    )
    return IssueListResponse(
        issues=[IssueResponse.model_validate(issue) for issue in issues],
        total=total,
        page=page,
        per_page=per_page,
        pages=math.ceil(total / per_page),
    )


@router.get("/nearby", response_model=list[NearbyIssueResponse])
async def list_nearby_issues(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    max_distance: float = Query(settings.NEARBY_DEFAULT_DISTANCE_METERS, gt=0),
    category: IssueCategory | None = None,
    status: IssueStatus | None = None,
    db: AsyncSession = Depends(get_async_session),
):
    """Issues around a point, nearest first"""
    nearby = await find_nearby_issues(
        db,
        GeoPoint(latitude, longitude),
        max_distance,
        category=category,
        status=status,
        limit=settings.NEARBY_MAX_RESULTS,
    )
    return [
        NearbyIssueResponse(**IssueResponse.model_validate(issue).model_dump(), distance_meters=round(meters, 1))
        for issue, meters in nearby
    ]


@router.get("/{issue_id}", response_model=IssueResponse)
async def read_issue(issue_id: UUID, db: AsyncSession = Depends(get_async_session)):
    return IssueResponse.model_validate(await get_issue(db, issue_id))


@router.get("/{issue_id}/verification", response_model=IssueVerificationResponse)
async def read_issue_verification(
    issue_id: UUID,
    db: AsyncSession = Depends(get_async_session),
    config: VerificationConfig = Depends(get_verification_config),
):
    """Current verification score and whether the issue qualifies for auto-verification"""
    issue = await get_issue(db, issue_id)
    return IssueVerificationResponse(
        issue_id=issue.id,
        verification_score=await get_verification_score(db, issue_id),
        should_auto_verify=await check_auto_verify(db, issue_id, config),
        is_verified=issue.is_verified,
    )


@router.patch("/{issue_id}", response_model=IssueResponse)
async def edit_issue(
    issue_id: UUID,
    update_data: IssueUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
):
    """Update title, description or priority (only reporter or admin)"""
    return IssueResponse.model_validate(await update_issue(db, issue_id, update_data, current_user))


@router.delete("/{issue_id}")
async def remove_issue(
    issue_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
):
    """Delete issue (only reporter or admin)"""
    await delete_issue(db, issue_id, current_user)
    return {"message": "Issue deleted successfully"}
