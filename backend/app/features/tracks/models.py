"""
Persisted GPS track points.

Points are children of an Ascent and are replaced wholesale on every
track upload.
"""

from sqlalchemy import Column, DateTime, Integer, Float, ForeignKey, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class TrackPointRecord(Base):
    """One stored GPS sample of an ascent's track."""

    __tablename__ = "track_points"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ascent_id = Column(
        String(36),
        ForeignKey("ascents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sequence = Column(Integer, nullable=False)  # position in the parsed track

    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    elevation = Column(Float, nullable=True)
    timestamp = Column(DateTime(timezone=True), nullable=True)

    ascent = relationship("Ascent", back_populates="track_points")

    def __repr__(self):
        return f"<TrackPointRecord ascent={self.ascent_id} #{self.sequence}>"
