# Third-party imports
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.db import get_async_session
from app.dependancies.common import get_current_user
from app.models.auth.user import User
from app.schemas.stats.stats_schemas import OverviewStatsResponse
from app.services.stats import get_overview_stats

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/overview", response_model=OverviewStatsResponse)
async def read_overview_stats(
    _: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
):
    """Issue counts by category and status with the overall resolution rate"""
    return await get_overview_stats(db)
