"""
Tours and ascents module.

Usage:
    from app.features.ascents import Ascent, AscentRepository
    from app.features.ascents.service import AscentService, TourService

Components:
- Tour, Ascent: SQLAlchemy models
- TourRepository, AscentRepository: data access
- TourCreate, TourResponse, AscentCreate, AscentUpdate, AscentResponse:
  Pydantic schemas
"""

from .models import Tour, Ascent
from .repository import TourRepository, AscentRepository
from .schemas import (
    AscentCreate,
    AscentUpdate,
    AscentResponse,
    TourCreate,
    TourResponse,
    ascent_duration_minutes,
)

__all__ = [
    "Tour",
    "Ascent",
    "TourRepository",
    "AscentRepository",
    "AscentCreate",
    "AscentUpdate",
    "AscentResponse",
    "TourCreate",
    "TourResponse",
    "ascent_duration_minutes",
]
