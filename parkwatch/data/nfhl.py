"""FEMA National Flood Hazard Layer (NFHL) query client.

Queries the NFHL MapServer flood hazard zone layer through its ArcGIS REST
query endpoint and returns GeoJSON features with full polygon geometry.
Free, no API key required.

Any failure (HTTP error status, network error, deadline expiry, an ArcGIS error
body, or a body that is not a feature collection) raises; it is never reported
as an empty candidate set.
"""

import asyncio
import json
import logging

import httpx

from parkwatch.config import settings
from parkwatch.data.cache import cached
from parkwatch.errors import UpstreamQueryError, UpstreamUnavailableError
from parkwatch.models.geo import Envelope, Point

logger = logging.getLogger(__name__)

WGS84 = "4326"


class NFHLClient:
    def __init__(
        self,
        base_url: str | None = None,
        result_record_count: int | None = None,
        timeout: float | None = None,
        deadline: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url or settings.nfhl_url
        self.result_record_count = result_record_count or settings.nfhl_result_record_count
        self.timeout = timeout or settings.nfhl_timeout_seconds
        self.deadline = deadline or settings.nfhl_query_deadline_seconds
        self.http_client = http_client

    def build_params(self, geometry_type: str, geometry: str) -> dict[str, str]:
        """Full query string for one intersects query against the layer."""
        return {
            "f": "geojson",
            "returnGeometry": "true",
            "outSR": WGS84,
            "outFields": "*",
            "resultRecordCount": str(self.result_record_count),
            "geometryType": geometry_type,
            "geometry": geometry,
            "inSR": WGS84,
            "spatialRel": "esriSpatialRelIntersects",
        }

    async def point_query(self, point: Point) -> list[dict]:
        params = self.build_params("esriGeometryPoint", f"{point.longitude},{point.latitude}")
        return await self.query(params)

    async def envelope_query(self, envelope: Envelope) -> list[dict]:
        params = self.build_params("esriGeometryEnvelope", envelope.geometry)
        return await self.query(params)

    async def query(self, params: dict[str, str]) -> list[dict]:
        """Run one query, cache lookup included, under the per-query deadline."""
        try:
            return await asyncio.wait_for(self._cached_query(params), timeout=self.deadline)
        except asyncio.TimeoutError as e:
            logger.warning("FEMA NFHL query exceeded %.1fs deadline", self.deadline)
            raise UpstreamUnavailableError(
                f"FEMA query timed out after {self.deadline:g}s"
            ) from e

    @cached("nfhl:query", ttl_seconds=settings.nfhl_cache_ttl_seconds)
    async def _cached_query(self, params: dict[str, str]) -> list[dict]:
        return _features(await self._get(params))

    async def _get(self, params: dict[str, str]) -> dict:
        try:
            if self.http_client is not None:
                resp = await self.http_client.get(self.base_url, params=params)
                resp.raise_for_status()
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(self.base_url, params=params)
                    resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("FEMA NFHL request failed: %s", e)
            raise UpstreamQueryError(
                f"FEMA query failed: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.warning("FEMA NFHL request failed: %r", e)
            raise UpstreamUnavailableError(
                f"FEMA query failed: {type(e).__name__}: {e}"
            ) from e

        try:
            return json.loads(resp.content, parse_constant=_reject_constant)
        except ValueError as e:
            raise UpstreamQueryError("FEMA query returned an invalid JSON body") from e


def _features(data: object) -> list[dict]:
    if not isinstance(data, dict):
        raise UpstreamQueryError("FEMA query returned an unexpected body")

    # ArcGIS reports query errors with HTTP 200 and an error object
    error = data.get("error")
    if error:
        message = error.get("message", "unknown error") if isinstance(error, dict) else str(error)
        code = error.get("code") if isinstance(error, dict) else None
        logger.warning("FEMA NFHL returned error body: %s (code %s)", message, code)
        raise UpstreamQueryError(f"FEMA query failed: {message}", status_code=code)

    features = data.get("features")
    if not isinstance(features, list):
        raise UpstreamQueryError("FEMA query returned no feature collection")
    return [f for f in features if isinstance(f, dict)]


def _reject_constant(name: str) -> float:
    # NaN/Infinity are not JSON and cannot be re-serialized to the caller
    raise ValueError(f"non-finite JSON constant {name}")
