"""
Stats schemas.

Pydantic models for the stats overview, goals and recalculation.
"""

from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import PositiveFloat, PositiveInt

from app.schemas.base import CamelModel


class UserStatsResponse(CamelModel):
    """Summary statistics of one user."""

    total_ascents: int = 0
    total_elevation_gain: float = 0
    total_distance: float = 0
    total_duration: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    last_ascent_date: Optional[datetime | date] = None

    # Goals (only present on stored rows)
    yearly_ascent_goal: Optional[int] = None
    yearly_elevation_goal: Optional[float] = None
    monthly_ascent_goal: Optional[int] = None


class RecentAscent(CamelModel):
    """Short ascent entry for the overview."""

    id: str
    date: datetime
    tour_name: Optional[str] = None
    activity: Optional[str] = None
    activity_label: Optional[str] = None
    distance: Optional[float] = None
    elevation_gain: Optional[float] = None
    duration: Optional[int] = None


class MonthlySummary(CamelModel):
    ascents: int
    elevation_gain: float
    goal: Optional[int] = None


class YearlySummary(CamelModel):
    ascents: int
    elevation_gain: float
    ascent_goal: Optional[int] = None
    elevation_goal: Optional[float] = None


class StatsOverview(CamelModel):
    """Everything the stats page shows."""

    stats: UserStatsResponse
    recent_ascents: List[RecentAscent] = []
    monthly: MonthlySummary
    yearly: YearlySummary
    activity_breakdown: Dict[str, int] = {}


class GoalsUpdate(CamelModel):
    """Request to set yearly/monthly goals; omitted goals stay as they are."""

    yearly_ascent_goal: Optional[PositiveInt] = None
    yearly_elevation_goal: Optional[PositiveFloat] = None
    monthly_ascent_goal: Optional[PositiveInt] = None


class RecalculateResponse(CamelModel):
    success: bool
    message: str
    stats: UserStatsResponse
