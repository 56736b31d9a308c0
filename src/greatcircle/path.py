"""
Sampling of great-circle arcs into Shapely geometries.

This module provides helper functions for turning the arc between two
coordinates into a Shapely LineString and for reading coordinates back
out of such a LineString.
"""

from typing import List
import logging
from shapely.geometry import LineString

from .geometry import Coordinate, intermediate_point

logger = logging.getLogger(__name__)


def great_circle_path(
    start: Coordinate, end: Coordinate, segments: int = 64
) -> LineString:
    """
    Sample the great-circle arc from start to end into a LineString.

    Args:
        start: First endpoint of the arc
        end: Second endpoint of the arc
        segments: Number of equal-fraction segments to split the arc into

    Returns:
        LineString of (longitude, latitude) tuples with segments + 1 points

    Raises:
        ValueError: If segments is less than 1
    """
    if segments < 1:
        raise ValueError("At least one segment is required to sample a path.")

    coord_tuples = []
    for i in range(segments + 1):
        point = intermediate_point(start, end, i / segments)
        coord_tuples.append((point.longitude, point.latitude))

    logger.debug(f"Sampled {len(coord_tuples)} points from {start} to {end}")
    return LineString(coord_tuples)


def path_coordinates(linestring: LineString) -> List[Coordinate]:
    """Convert a (longitude, latitude) LineString back into Coordinates."""
    return [Coordinate(latitude=lat, longitude=lon) for lon, lat in linestring.coords]
