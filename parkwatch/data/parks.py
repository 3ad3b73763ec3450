"""Park records → GeoJSON point FeatureCollection."""

import logging
import math
from decimal import Decimal
from typing import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from parkwatch.config import settings
from parkwatch.engine.flood_risk import flood_tier
from parkwatch.models.db import PARK_PROPERTY_COLUMNS, ParkRecord

logger = logging.getLogger(__name__)


async def list_parks(session: AsyncSession, limit: int | None = None) -> list[ParkRecord]:
    """Fetch park rows ordered by id, up to limit (default settings.parks_max_rows)."""
    stmt = select(ParkRecord).order_by(ParkRecord.id).limit(limit or settings.parks_max_rows)
    result = await session.execute(stmt)
    parks = list(result.scalars().all())
    logger.debug("Loaded %d parks", len(parks))
    return parks


def park_id(props: dict) -> str:
    """Stable park identity: permit, else 'park_name|park_address'."""
    permit = props.get("permit")
    if permit is not None and permit != "":
        return str(permit)
    return f"{props.get('park_name') or ''}|{props.get('park_address') or ''}"


def _coordinate(value: Decimal | float | None) -> float | None:
    if value is None:
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def park_to_feature(park: ParkRecord) -> dict:
    props = {col: getattr(park, col) for col in PARK_PROPERTY_COLUMNS}
    props["park_id"] = park_id(props)
    props["flood_tier"] = flood_tier(park.flood_risk).value

    lon = _coordinate(park.longitude)
    lat = _coordinate(park.latitude)
    geometry = None
    if lon is not None and lat is not None:
        # GeoJSON uses [lon, lat]
        geometry = {"type": "Point", "coordinates": [lon, lat]}

    return {"type": "Feature", "geometry": geometry, "properties": props}


def parks_to_geojson(parks: Iterable[ParkRecord]) -> dict:
    return {
        "type": "FeatureCollection",
        "features": [park_to_feature(p) for p in parks],
    }
