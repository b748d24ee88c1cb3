"""
Stats Routes

Endpoints for the stats overview, goals and manual recalculation.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_async_db
from app.features.stats.schemas import (
    GoalsUpdate,
    RecalculateResponse,
    StatsOverview,
    UserStatsResponse,
)
from app.features.stats.service import StatsService

router = APIRouter()


@router.get("/users/{user_id}/stats", response_model=StatsOverview)
async def get_stats(user_id: str, db: AsyncSession = Depends(get_async_db)):
    """Stored stats plus monthly/yearly summaries and activity breakdown."""
    return await StatsService(db).get_overview(user_id)


@router.patch("/users/{user_id}/stats", response_model=UserStatsResponse)
async def update_goals(
    user_id: str,
    goals: GoalsUpdate,
    db: AsyncSession = Depends(get_async_db)
):
    """Set yearly/monthly goals."""
    return await StatsService(db).update_goals(user_id, goals)


@router.post("/users/{user_id}/stats/recalculate", response_model=RecalculateResponse)
async def recalculate_stats(user_id: str, db: AsyncSession = Depends(get_async_db)):
    """
    Manually trigger stats recalculation.

    Useful for fixing stats that got out of sync.
    """
    stats = await StatsService(db).recompute_for_user(user_id)
    return RecalculateResponse(
        success=True,
        message="Stats recalculated successfully",
        stats=UserStatsResponse.model_validate(stats),
    )
