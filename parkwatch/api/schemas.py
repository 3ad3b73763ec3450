"""Pydantic schemas for API responses."""

from typing import Any

from pydantic import BaseModel


class FloodZoneMeta(BaseModel):
    method: str  # "point_intersects" | "envelope_fallback" | "none"
    radius_m: int | None = None
    reason: str | None = None
    flood_zone: str | None = None
    flood_tier: str | None = None


class FloodZoneResponse(BaseModel):
    type: str = "FeatureCollection"
    features: list[dict[str, Any]]
    meta: FloodZoneMeta


class ParksResponse(BaseModel):
    type: str = "FeatureCollection"
    features: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    status: str
    service: str
