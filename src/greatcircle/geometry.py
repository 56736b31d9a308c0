"""
Great-circle geometry on a spherical Earth.

This module provides the coordinate value type together with the haversine
distance and the spherical interpolation used to find points along the
great-circle arc between two coordinates.
"""

from typing import NamedTuple
import logging
import math

logger = logging.getLogger(__name__)

# Mean Earth radius, rounded independently for each unit
EARTH_RADIUS_MI = 3958
EARTH_RADIUS_KM = 6371


class Coordinate(NamedTuple):
    """Represents a geographic coordinate with latitude and longitude in degrees."""

    latitude: float
    longitude: float

    def intermediate_point_to(
        self, other: "Coordinate", fraction: float
    ) -> "Coordinate":
        """Return the point at the given fraction between this coordinate and other."""
        return intermediate_point(self, other, fraction)


class Distance(NamedTuple):
    """Great-circle distance expressed in miles and kilometers."""

    miles: float
    kilometers: float


def degrees_to_radians(d: float) -> float:
    return d * math.pi / 180


def radians_to_degrees(r: float) -> float:
    return r * 180 / math.pi


def central_angle(p: Coordinate, q: Coordinate) -> float:
    """
    Calculate the central angle between two coordinates using the haversine formula.

    Args:
        p: First coordinate
        q: Second coordinate

    Returns:
        Angle subtended at the centre of the Earth, in radians
    """
    lat1 = degrees_to_radians(p.latitude)
    lon1 = degrees_to_radians(p.longitude)
    lat2 = degrees_to_radians(q.latitude)
    lon2 = degrees_to_radians(q.longitude)

    diff_lat = lat2 - lat1
    diff_lon = lon2 - lon1

    a = (
        math.sin(diff_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(diff_lon / 2) ** 2
    )
    # Rounding can push a just past 1 for antipodal points
    a = min(a, 1.0)

    # atan2 form stays accurate for both tiny and near-antipodal separations
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance(p: Coordinate, q: Coordinate) -> Distance:
    """
    Calculate the shortest path between two coordinates on the surface of the Earth.

    Args:
        p: First coordinate
        q: Second coordinate

    Returns:
        Distance with the length in miles and in kilometers
    """
    c = central_angle(p, q)
    return Distance(miles=c * EARTH_RADIUS_MI, kilometers=c * EARTH_RADIUS_KM)


def intermediate_point(
    start: Coordinate, end: Coordinate, fraction: float
) -> Coordinate:
    """
    Calculate the point at a given fraction along the great-circle arc
    from start to end.

    The fraction is not clamped: values below 0 or above 1 extrapolate
    along the same great circle. When start and end coincide the arc has
    no direction, so start is returned unchanged for every fraction.

    Args:
        start: Coordinate at fraction 0
        end: Coordinate at fraction 1
        fraction: Position along the arc (0=start, 1=end)

    Returns:
        Coordinate on the great circle through start and end
    """
    d_between = central_angle(start, end)
    if d_between == 0:
        logger.debug(
            f"Coincident endpoints {start}, returning start for fraction {fraction}"
        )
        return start

    lat1 = degrees_to_radians(start.latitude)
    lon1 = degrees_to_radians(start.longitude)
    lat2 = degrees_to_radians(end.latitude)
    lon2 = degrees_to_radians(end.longitude)

    sin_d = math.sin(d_between)
    a = math.sin((1 - fraction) * d_between) / sin_d
    b = math.sin(fraction * d_between) / sin_d

    # Weighted sum of the endpoints as unit vectors
    x = a * math.cos(lat1) * math.cos(lon1) + b * math.cos(lat2) * math.cos(lon2)
    y = a * math.cos(lat1) * math.sin(lon1) + b * math.cos(lat2) * math.sin(lon2)
    z = a * math.sin(lat1) + b * math.sin(lat2)

    lat3 = math.atan2(z, math.sqrt(x * x + y * y))
    lon3 = math.atan2(y, x)

    return Coordinate(
        latitude=radians_to_degrees(lat3), longitude=radians_to_degrees(lon3)
    )
