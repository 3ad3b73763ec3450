"""Metric search radius → degree envelope conversion.

Planar approximation: one degree of latitude is taken as 111,320 m and the
longitude offset is widened by 1/cos(latitude). Near the poles cos(latitude)
collapses toward zero, so below MIN_COS_LAT the latitude offset is reused
unscaled.
"""

import math

from parkwatch.models.geo import Envelope, Point

METERS_PER_DEGREE_LAT = 111_320
MIN_COS_LAT = 0.2


def meters_to_degrees(meters: float, latitude: float) -> tuple[float, float]:
    """Return (lat_offset, lon_offset) in degrees for a radius at a latitude."""
    deg_lat = meters / METERS_PER_DEGREE_LAT
    cos_lat = math.cos(math.radians(latitude))
    deg_lon = deg_lat / cos_lat if cos_lat > MIN_COS_LAT else deg_lat
    return deg_lat, deg_lon


def envelope_around(point: Point, radius_m: float) -> Envelope:
    deg_lat, deg_lon = meters_to_degrees(radius_m, point.latitude)
    return Envelope(
        xmin=point.longitude - deg_lon,
        ymin=point.latitude - deg_lat,
        xmax=point.longitude + deg_lon,
        ymax=point.latitude + deg_lat,
    )


def format_distance(meters: int) -> str:
    """300 → '300m', 3000 → '3km'."""
    if meters >= 1000 and meters % 1000 == 0:
        return f"{meters // 1000}km"
    return f"{meters}m"
