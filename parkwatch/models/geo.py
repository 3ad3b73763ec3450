"""Point, envelope and resolution result types for the flood zone resolver."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from parkwatch.errors import InvalidInputError


class ResolutionMethod(str, Enum):
    POINT_INTERSECTS = "point_intersects"
    ENVELOPE_FALLBACK = "envelope_fallback"
    NONE = "none"


@dataclass(frozen=True)
class Point:
    """WGS84 point in decimal degrees."""
    latitude: float
    longitude: float

    def __post_init__(self):
        for value in (self.latitude, self.longitude):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInputError("Invalid lat/lon")
            if not math.isfinite(value):
                raise InvalidInputError("Invalid lat/lon")

    @classmethod
    def parse(cls, lat: Any, lon: Any) -> "Point":
        """Build a Point from raw query values, rejecting anything non-finite.

        Region bounds are not checked; only that both values are finite numbers.
        """
        return cls(latitude=_finite(lat), longitude=_finite(lon))


def _finite(value: Any) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidInputError("Invalid lat/lon")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise InvalidInputError("Invalid lat/lon")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError("Invalid lat/lon")
    if not math.isfinite(number):
        raise InvalidInputError("Invalid lat/lon")
    return number


@dataclass(frozen=True)
class Envelope:
    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @property
    def geometry(self) -> str:
        """ArcGIS envelope geometry parameter: xmin,ymin,xmax,ymax."""
        return f"{self.xmin},{self.ymin},{self.xmax},{self.ymax}"


@dataclass(frozen=True)
class ResolutionResult:
    method: ResolutionMethod
    feature: dict | None = None
    radius_m: int | None = None
    reason: str | None = None
    candidates: int = 0

    @property
    def resolved(self) -> bool:
        return self.feature is not None

    @property
    def meta(self) -> dict:
        meta: dict[str, Any] = {"method": self.method.value}
        if self.radius_m is not None:
            meta["radius_m"] = self.radius_m
        if self.reason is not None:
            meta["reason"] = self.reason
        return meta

    def to_feature_collection(self, extra_meta: dict | None = None) -> dict:
        """Valid GeoJSON with at most one feature, plus the strategy metadata."""
        meta = self.meta
        if extra_meta:
            meta.update(extra_meta)
        return {
            "type": "FeatureCollection",
            "features": [self.feature] if self.feature is not None else [],
            "meta": meta,
        }


@dataclass(frozen=True)
class ScoredCandidate:
    index: int
    score: float
    feature: dict = field(compare=False)
