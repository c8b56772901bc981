# Third-party imports
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from app.core.db import get_async_session
from app.schemas.users.user_schemas import LeaderboardEntry
from app.services.stats import get_leaderboard
from app.settings import settings

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/leaderboard", response_model=list[LeaderboardEntry])
async def read_leaderboard(db: AsyncSession = Depends(get_async_session)):
    """Top reporters by reputation earned from resolved issues"""
    users = await get_leaderboard(db, limit=settings.LEADERBOARD_SIZE)
    return [LeaderboardEntry.model_validate(user) for user in users]
