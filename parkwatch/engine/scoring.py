"""Nearest-vertex candidate scoring.

The upstream service returns candidates in no particular proximity order, so
"first returned" is never taken as the answer. Each candidate is scored by the
squared planar distance, in degrees, from the query point to its closest
vertex, and the lowest score wins. Ties keep the earliest candidate, so the
choice is only as stable as the upstream ordering.
"""

import math
from typing import Iterable, Iterator

from parkwatch.models.geo import Point, ScoredCandidate

INFINITY = math.inf


def _rings(geometry: dict) -> list | None:
    coords = geometry.get("coordinates")
    if not isinstance(coords, list):
        return None
    gtype = geometry.get("type")
    if gtype == "Polygon":
        return coords
    if gtype == "MultiPolygon":
        return [ring for polygon in coords if isinstance(polygon, list) for ring in polygon]
    return None


def _vertices(rings: list) -> Iterator[tuple[float, float]]:
    for ring in rings:
        if not isinstance(ring, list):
            continue
        for vertex in ring:
            if not isinstance(vertex, (list, tuple)) or len(vertex) < 2:
                continue
            x, y = vertex[0], vertex[1]
            if isinstance(x, bool) or isinstance(y, bool):
                continue
            if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
                continue
            if not (math.isfinite(x) and math.isfinite(y)):
                continue
            yield x, y


def nearest_vertex_distance(feature: dict | None, point: Point) -> float:
    """Minimum squared degree distance from point to any vertex of the feature.

    Polygon rings and the rings of every MultiPolygon member all count.
    Features without a usable polygon geometry score infinity.
    """
    if not isinstance(feature, dict):
        return INFINITY
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict):
        return INFINITY
    rings = _rings(geometry)
    if not rings:
        return INFINITY

    best = INFINITY
    for x, y in _vertices(rings):
        dx = x - point.longitude
        dy = y - point.latitude
        d2 = dx * dx + dy * dy
        if d2 < best:
            best = d2
    return best


def score_candidates(features: Iterable[dict], point: Point) -> list[ScoredCandidate]:
    return [
        ScoredCandidate(index=i, score=nearest_vertex_distance(f, point), feature=f)
        for i, f in enumerate(features)
    ]


def choose_best_feature(features: Iterable[dict] | None, point: Point) -> ScoredCandidate | None:
    """Pick the candidate with the smallest nearest-vertex distance.

    Returns None for an empty set, or when no candidate has a finite score.
    """
    if not features:
        return None

    best: ScoredCandidate | None = None
    for candidate in score_candidates(features, point):
        if candidate.score < (best.score if best else INFINITY):
            best = candidate
    return best
