"""Protocol definitions for data sources.

The flood zone resolver only needs something that can run the two spatial
queries; tests substitute an in-memory fake for the FEMA client.
"""

from typing import Protocol, runtime_checkable

from parkwatch.models.geo import Envelope, Point


@runtime_checkable
class GeometryQuerySource(Protocol):
    async def point_query(self, point: Point) -> list[dict]:
        """Candidate features whose geometry intersects the point."""
        ...

    async def envelope_query(self, envelope: Envelope) -> list[dict]:
        """Candidate features whose geometry intersects the envelope."""
        ...
