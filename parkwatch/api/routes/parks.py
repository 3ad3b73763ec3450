"""Park records routes."""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from parkwatch.api.deps import get_db
from parkwatch.api.schemas import ErrorResponse, ParksResponse
from parkwatch.config import settings
from parkwatch.data.parks import list_parks, parks_to_geojson

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["parks"])


@router.get(
    "/parks",
    response_model=ParksResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_parks(
    limit: int = Query(settings.parks_max_rows, ge=1, le=settings.parks_max_rows),
    db: AsyncSession = Depends(get_db),
):
    """All parks as a GeoJSON FeatureCollection of points."""
    try:
        parks = await list_parks(db, limit=limit)
    except SQLAlchemyError:
        logger.exception("Error loading parks")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal server error").model_dump(exclude_none=True),
        )
    return parks_to_geojson(parks)
