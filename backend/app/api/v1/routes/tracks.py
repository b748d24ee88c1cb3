"""
Track Routes

Endpoints for parsing GPX/TCX files and attaching them to ascents.
"""

import logging

from fastapi import APIRouter, UploadFile, File, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.db.session import get_async_db
from app.shared.constants import is_track_file
from app.features.ascents.schemas import AscentResponse
from app.features.ascents.service import AscentNotFoundError
from app.features.tracks import TrackParseError, parse_track
from app.features.tracks.schemas import TrackStatsResponse, TrackUploadResponse
from app.features.tracks.service import TrackUploadService

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_track_upload(file: UploadFile) -> bytes:
    """Validate type and size of an uploaded track and return its content."""
    if not is_track_file(file.filename, file.content_type):
        raise HTTPException(
            status_code=400,
            detail="Invalid file type. Please upload a GPX or TCX file."
        )

    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > settings.max_track_file_mb * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_track_file_mb}MB)"
        )

    return content


@router.post("/tracks/parse", response_model=TrackStatsResponse)
async def parse_track_file(file: UploadFile = File(...)):
    """
    Parse a GPX/TCX file without storing anything.

    Returns distance, elevation gain/loss, extremes, duration and points.
    """
    content = await _read_track_upload(file)

    try:
        track = parse_track(content, file.filename or "track.gpx")
    except TrackParseError as e:
        logger.warning(f"Rejected track {file.filename!r}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return TrackStatsResponse.model_validate(track)


@router.post("/ascents/{ascent_id}/track", response_model=TrackUploadResponse)
async def upload_ascent_track(
    ascent_id: str,
    user_id: str = Query(...),
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_async_db)
):
    """Attach a track to an ascent, replacing any previous one."""
    content = await _read_track_upload(file)

    service = TrackUploadService(db)
    try:
        ascent, track = await service.attach_track(
            user_id, ascent_id, content, file.filename or "track.gpx"
        )
    except AscentNotFoundError:
        raise HTTPException(status_code=404, detail="Ascent not found")
    except TrackParseError as e:
        logger.warning(f"Rejected track {file.filename!r} for ascent {ascent_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return TrackUploadResponse(
        ascent=AscentResponse.model_validate(ascent),
        stats=TrackStatsResponse.model_validate(track),
    )
