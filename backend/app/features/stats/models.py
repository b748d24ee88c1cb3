"""
Per-user statistics row.

Computed fields are overwritten on every recomputation; goal fields are
only changed by the user.
"""

from datetime import datetime

from sqlalchemy import Column, String, DateTime, Integer, Float

from app.models.base import Base


class UserStatsRecord(Base):
    """Stored summary statistics for one user."""

    __tablename__ = "user_stats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), unique=True, nullable=False, index=True)

    # Lifetime totals
    total_ascents = Column(Integer, nullable=False, default=0)
    total_elevation_gain = Column(Float, nullable=False, default=0)
    total_distance = Column(Float, nullable=False, default=0)
    total_duration = Column(Integer, nullable=False, default=0)  # minutes

    # Weekly streaks
    current_streak = Column(Integer, nullable=False, default=0)
    longest_streak = Column(Integer, nullable=False, default=0)
    last_ascent_date = Column(DateTime, nullable=True)

    # Goals
    yearly_ascent_goal = Column(Integer, nullable=True)
    yearly_elevation_goal = Column(Float, nullable=True)
    monthly_ascent_goal = Column(Integer, nullable=True)

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return (
            f"<UserStatsRecord user_id={self.user_id} "
            f"ascents={self.total_ascents} streak={self.current_streak}>"
        )
