"""Flood zone resolver: point → single best FEMA flood hazard polygon.

Flow: point intersects query → envelope fallback at each radius (300m → 1km → 3km)
→ empty result with a reason. Queries run strictly one after another; the
ladder stops at the first step that selects a feature.
"""

import logging
from typing import Sequence

from parkwatch.config import settings
from parkwatch.data.base import GeometryQuerySource
from parkwatch.engine.envelope import envelope_around, format_distance
from parkwatch.engine.scoring import choose_best_feature
from parkwatch.errors import InvalidInputError
from parkwatch.models.geo import Point, ResolutionMethod, ResolutionResult

logger = logging.getLogger(__name__)


class FloodZoneResolver:
    def __init__(
        self,
        source: GeometryQuerySource,
        radii_m: Sequence[int] | None = None,
        max_candidates: int | None = None,
    ):
        self.source = source
        radii = settings.fallback_radii_m if radii_m is None else radii_m
        self.radii_m = tuple(sorted(int(r) for r in radii))
        self.max_candidates = max_candidates or settings.nfhl_result_record_count

    def _bounded(self, features: list[dict]) -> list[dict]:
        # Layers without pagination support ignore resultRecordCount
        if len(features) > self.max_candidates:
            logger.debug("Trimming %d candidates to %d", len(features), self.max_candidates)
        return list(features[: self.max_candidates])

    async def resolve(self, point: Point) -> ResolutionResult:
        """Resolve a point into at most one flood zone feature.

        Raises InvalidInputError before any query for a bad point, and lets
        UpstreamQueryError from any step abort the whole resolution.
        """
        if not isinstance(point, Point):
            raise InvalidInputError("Invalid lat/lon")

        # Step 1: Direct point intersection
        features = self._bounded(await self.source.point_query(point))
        best = choose_best_feature(features, point)
        if best is not None:
            logger.info(
                "Flood zone at %s,%s: point intersects (%d candidates, score %.3g)",
                point.latitude, point.longitude, len(features), best.score,
            )
            return ResolutionResult(
                method=ResolutionMethod.POINT_INTERSECTS,
                feature=best.feature,
                candidates=len(features),
            )

        # Step 2: Progressive envelope fallback
        for radius_m in self.radii_m:
            envelope = envelope_around(point, radius_m)
            features = self._bounded(await self.source.envelope_query(envelope))
            best = choose_best_feature(features, point)
            if best is not None:
                logger.info(
                    "Flood zone at %s,%s: envelope fallback at %dm (%d candidates)",
                    point.latitude, point.longitude, radius_m, len(features),
                )
                return ResolutionResult(
                    method=ResolutionMethod.ENVELOPE_FALLBACK,
                    feature=best.feature,
                    radius_m=radius_m,
                    candidates=len(features),
                )
            logger.debug("No flood zone candidates within %dm of %s", radius_m, point)

        # Step 3: Coverage gap, unmapped area, or coordinates far from any polygon
        reason = (
            f"no_features_within_{format_distance(self.radii_m[-1])}"
            if self.radii_m else "no_features_at_point"
        )
        logger.info("No flood zone for %s,%s: %s", point.latitude, point.longitude, reason)
        return ResolutionResult(method=ResolutionMethod.NONE, reason=reason)

    async def resolve_coordinates(self, lat: object, lon: object) -> ResolutionResult:
        """Validate raw lat/lon values, then resolve."""
        return await self.resolve(Point.parse(lat, lon))
