"""
Ascent Routes

Endpoints for adding tours and for recording, editing and deleting ascents.
Each ascent change resyncs the user's stats.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_async_db
from app.features.ascents.schemas import (
    AscentCreate,
    AscentUpdate,
    AscentResponse,
    TourCreate,
    TourResponse,
)
from app.features.ascents.service import (
    AscentService,
    AscentNotFoundError,
    InvalidAscentTimesError,
    TourNotFoundError,
    TourService,
)

router = APIRouter()


@router.post("/users/{user_id}/tours", response_model=TourResponse, status_code=201)
async def create_tour(
    user_id: str,
    data: TourCreate,
    db: AsyncSession = Depends(get_async_db)
):
    """Add a tour that ascents can then be recorded for."""
    tour = await TourService(db).create_tour(user_id, data)
    return TourResponse.model_validate(tour)


@router.post("/users/{user_id}/ascents", response_model=AscentResponse, status_code=201)
async def create_ascent(
    user_id: str,
    data: AscentCreate,
    db: AsyncSession = Depends(get_async_db)
):
    """Record an ascent of one of the user's tours."""
    try:
        ascent = await AscentService(db).create_ascent(user_id, data)
    except TourNotFoundError:
        raise HTTPException(status_code=404, detail="Tour not found")
    return AscentResponse.model_validate(ascent)


@router.patch("/ascents/{ascent_id}", response_model=AscentResponse)
async def update_ascent(
    ascent_id: str,
    data: AscentUpdate,
    user_id: str = Query(...),
    db: AsyncSession = Depends(get_async_db)
):
    """Update an ascent."""
    try:
        ascent = await AscentService(db).update_ascent(user_id, ascent_id, data)
    except AscentNotFoundError:
        raise HTTPException(status_code=404, detail="Ascent not found")
    except InvalidAscentTimesError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return AscentResponse.model_validate(ascent)


@router.delete("/ascents/{ascent_id}")
async def delete_ascent(
    ascent_id: str,
    user_id: str = Query(...),
    db: AsyncSession = Depends(get_async_db)
):
    """Delete an ascent and its track."""
    try:
        await AscentService(db).delete_ascent(user_id, ascent_id)
    except AscentNotFoundError:
        raise HTTPException(status_code=404, detail="Ascent not found")
    return {"success": True}
