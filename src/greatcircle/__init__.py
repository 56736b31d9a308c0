#!/usr/bin/env python3
"""
Greatcircle - Great-circle distance and interpolation on a spherical Earth.

This package computes haversine distances between geographic coordinates,
finds points along the great-circle arc between them, and can render the
arc on an interactive map.
"""
import importlib.metadata

__version__ = importlib.metadata.version("greatcircle")

# Import main classes for public API
from .geometry import (
    Coordinate,
    Distance,
    EARTH_RADIUS_KM,
    EARTH_RADIUS_MI,
    degrees_to_radians,
    radians_to_degrees,
    central_angle,
    distance,
    intermediate_point,
)
from .path import great_circle_path, path_coordinates

__all__ = [
    "Coordinate",
    "Distance",
    "EARTH_RADIUS_KM",
    "EARTH_RADIUS_MI",
    "degrees_to_radians",
    "radians_to_degrees",
    "central_angle",
    "distance",
    "intermediate_point",
    "great_circle_path",
    "path_coordinates",
]
