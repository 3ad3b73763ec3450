"""Shared fixtures for flood zone tests.

Fixture point: Tampa, FL (27.9506, -82.4572).
Features are square NFHL-style polygons around a center, in [lon, lat] order.
"""

import pytest

from parkwatch.models.geo import Point

TAMPA_LAT = 27.9506
TAMPA_LON = -82.4572


def square_feature(lon: float, lat: float, half: float, **properties) -> dict:
    ring = [
        [lon - half, lat - half],
        [lon + half, lat - half],
        [lon + half, lat + half],
        [lon - half, lat + half],
        [lon - half, lat - half],
    ]
    return {
        "type": "Feature",
        "geometry": {"type": "Polygon", "coordinates": [ring]},
        "properties": properties,
    }


class FakeGeometrySource:
    """In-memory stand-in for the NFHL client.

    envelope_responses holds one entry per envelope query, in call order;
    an entry may be an exception instance to raise instead.
    """

    def __init__(self, point_features=None, envelope_responses=None):
        self.point_features = point_features if point_features is not None else []
        self.envelope_responses = list(envelope_responses or [])
        self.calls: list[tuple] = []

    async def point_query(self, point):
        self.calls.append(("point", point))
        if isinstance(self.point_features, Exception):
            raise self.point_features
        return list(self.point_features)

    async def envelope_query(self, envelope):
        index = sum(1 for kind, _ in self.calls if kind == "envelope")
        self.calls.append(("envelope", envelope))
        response = self.envelope_responses[index] if index < len(self.envelope_responses) else []
        if isinstance(response, Exception):
            raise response
        return list(response)

    @property
    def envelope_calls(self) -> list:
        return [arg for kind, arg in self.calls if kind == "envelope"]


@pytest.fixture
def tampa() -> Point:
    return Point(latitude=TAMPA_LAT, longitude=TAMPA_LON)


@pytest.fixture
def make_square():
    return square_feature


@pytest.fixture
def fake_source():
    """Factory for FakeGeometrySource instances."""
    return FakeGeometrySource
