"""
Tour and ascent models.

Models:
- Tour: a named route/objective owned by one user
- Ascent: one dated completion of a tour, optionally with a GPS track
"""

from datetime import datetime
import uuid

from sqlalchemy import Column, String, DateTime, Integer, Float, ForeignKey, Text
from sqlalchemy.orm import relationship, validates

from app.models.base import Base
from app.shared.constants import ACTIVITY_LABELS, Activity, Condition


class Tour(Base):
    """A tour a user may complete on multiple ascents."""

    __tablename__ = "tours"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    activity = Column(String(32), nullable=False)  # shared.constants.Activity
    condition = Column(String(16), nullable=True)  # shared.constants.Condition

    # Planned figures (from the tour description, not from tracks)
    elevation = Column(Float, nullable=True)
    distance = Column(Float, nullable=True)
    duration = Column(Integer, nullable=True)  # minutes

    created_at = Column(DateTime, default=datetime.utcnow)

    ascents = relationship("Ascent", back_populates="tour", cascade="all, delete-orphan")

    @validates("activity")
    def validate_activity(self, key, value):
        return Activity(value).value

    @validates("condition")
    def validate_condition(self, key, value):
        return Condition(value).value if value is not None else None

    def __repr__(self):
        return f"<Tour {self.id} ({self.name})>"


class Ascent(Base):
    """
    One recorded completion of a tour.

    `date` is the activity date (stored as naive UTC), not the upload time.
    Performance figures are either entered by hand or copied from an
    uploaded track.
    """

    __tablename__ = "ascents"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)
    tour_id = Column(String(36), ForeignKey("tours.id"), nullable=False)

    date = Column(DateTime, nullable=False, index=True)
    notes = Column(Text, nullable=True)

    # Wall-clock times entered by the user
    start_time = Column(DateTime, nullable=True)
    end_time = Column(DateTime, nullable=True)

    # Metrics
    distance = Column(Float, nullable=True)  # km
    elevation_gain = Column(Float, nullable=True)  # m
    elevation_loss = Column(Float, nullable=True)  # m
    duration = Column(Integer, nullable=True)  # minutes
    max_elevation = Column(Float, nullable=True)
    min_elevation = Column(Float, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    tour = relationship("Tour", back_populates="ascents")
    track_points = relationship(
        "TrackPointRecord",
        back_populates="ascent",
        cascade="all, delete-orphan",
        order_by="TrackPointRecord.sequence",
    )

    @property
    def activity(self) -> str | None:
        """Activity of the parent tour (requires the tour to be loaded)."""
        return self.tour.activity if self.tour is not None else None

    @property
    def activity_label(self) -> str | None:
        activity = self.activity
        return ACTIVITY_LABELS[Activity(activity)] if activity else None

    @property
    def tour_name(self) -> str | None:
        return self.tour.name if self.tour is not None else None

    def __repr__(self):
        return f"<Ascent {self.id} tour={self.tour_id} date={self.date}>"
