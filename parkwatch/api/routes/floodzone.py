"""Flood zone overlay routes."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from parkwatch.api.deps import get_flood_zone_resolver
from parkwatch.api.schemas import ErrorResponse, FloodZoneMeta, FloodZoneResponse
from parkwatch.config import settings
from parkwatch.data.resolver import FloodZoneResolver
from parkwatch.engine.flood_risk import feature_flood_zone, zone_tier
from parkwatch.errors import InvalidInputError, UpstreamQueryError
from parkwatch.models.geo import ResolutionResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["floodzone"])


def _cache_control() -> str:
    age = settings.cache_max_age_seconds
    return f"public, s-maxage={age}, stale-while-revalidate={age}"


def _response_body(result: ResolutionResult) -> dict:
    """Single-feature (or empty) FeatureCollection with strategy metadata."""
    meta = FloodZoneMeta(**result.meta)
    zone = feature_flood_zone(result.feature)
    if zone is not None:
        meta.flood_zone = zone
        meta.flood_tier = zone_tier(zone).value
    body = result.to_feature_collection()
    body["meta"] = meta.model_dump(exclude_none=True)
    return body


@router.get(
    "/api/v1/floodzone",
    response_model=FloodZoneResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
@router.get("/api/fema-floodzone", include_in_schema=False)
async def get_flood_zone(
    lat: str | None = None,
    lon: str | None = None,
    resolver: FloodZoneResolver = Depends(get_flood_zone_resolver),
):
    """Best-matching FEMA flood hazard polygon for a point, or an empty collection.

    An empty collection means no flood zone was found nearby; a 502 means the
    lookup itself failed and the caller should not read it as "no flood zone".
    """
    try:
        result = await resolver.resolve_coordinates(lat, lon)
    except InvalidInputError:
        return JSONResponse(status_code=400, content={"error": "Invalid lat/lon"})
    except UpstreamQueryError as e:
        logger.error("Flood zone lookup failed for %s,%s: %s", lat, lon, e)
        return JSONResponse(
            status_code=502,
            content=ErrorResponse(error="FEMA query failed", details=str(e)).model_dump(),
        )

    return JSONResponse(
        content=_response_body(result),
        headers={"Cache-Control": _cache_control()},
    )
