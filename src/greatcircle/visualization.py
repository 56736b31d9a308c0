#!/usr/bin/env python3
"""
Great-circle path visualization using folium maps.
"""

from typing import List
import logging
import folium
from shapely.geometry import LineString

from .geometry import Coordinate, distance
from .path import path_coordinates

logger = logging.getLogger(__name__)


def unwrap_longitudes(coords: List[Coordinate]) -> List[List[float]]:
    """
    Convert coordinates to [lat, lon] pairs for folium, shifting longitudes
    by multiples of 360 so consecutive points never jump across the antimeridian.

    Args:
        coords: Coordinates along the path, in order

    Returns:
        List of [latitude, longitude] pairs with continuous longitudes
    """
    pairs: List[List[float]] = []
    offset = 0.0
    previous = None
    for coord in coords:
        if previous is not None:
            jump = coord.longitude - previous
            if jump > 180.0:
                offset -= 360.0
            elif jump < -180.0:
                offset += 360.0
        previous = coord.longitude
        pairs.append([coord.latitude, coord.longitude + offset])
    return pairs


def create_path_map(
    start: Coordinate,
    end: Coordinate,
    path: LineString,
    output_filename: str,
) -> None:
    """
    Create an interactive map showing the great-circle path, save as HTML.

    Args:
        start: First endpoint of the path
        end: Second endpoint of the path
        path: LineString of (longitude, latitude) samples along the arc
        output_filename: Path where HTML map file should be saved

    Raises:
        ValueError: If path has no coordinates
    """
    coordinates = unwrap_longitudes(path_coordinates(path))
    if not coordinates:
        raise ValueError("Cannot create map for empty path")

    lats = [lat for lat, _ in coordinates]
    lons = [lon for _, lon in coordinates]
    south, west, north, east = min(lats), min(lons), max(lats), max(lons)

    center_lat = (south + north) / 2
    center_lon = (west + east) / 2

    logger.debug(f"Creating map centered at ({center_lat:.4f}, {center_lon:.4f})")

    path_map = folium.Map(
        location=[center_lat, center_lon],
        tiles=None,
    )

    # Add Standard layer (CartoDB positron)
    folium.TileLayer(
        tiles="CartoDB positron",
        attr=(
            "&copy; <a href='https://www.openstreetmap.org/copyright'>OpenStreetMap</a> "
            "contributors &copy; <a href='https://carto.com/attributions'>CARTO</a>"
        ),
        name="Standard",
        control=True,
        show=True,
    ).add_to(path_map)

    # Add Satellite layer (Esri World Imagery)
    folium.TileLayer(
        tiles="https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
        attr=(
            "Tiles &copy; Esri &mdash; Source: Esri, i-cubed, USDA, USGS, AEX, GeoEye, "
            "Getmapping, Aerogrid, IGN, IGP, UPR-EGP, and the GIS User Community"
        ),
        name="Satellite",
        control=True,
        show=False,
    ).add_to(path_map)

    folium.LayerControl().add_to(path_map)

    mi, km = distance(start, end)
    summary = f"{mi:.2f} mi / {km:.2f} km"

    folium.PolyLine(
        coordinates,
        color="#2E86AB",
        weight=3,
        opacity=0.8,
        popup=f"Great circle ({summary})",
    ).add_to(path_map)

    # Markers sit at the unwrapped ends so they line up with the polyline
    folium.Marker(
        coordinates[0],
        popup=f"Start ({start.latitude:.4f}, {start.longitude:.4f})",
        icon=folium.Icon(color="green", icon="play"),
    ).add_to(path_map)

    folium.Marker(
        coordinates[-1],
        popup=f"End ({end.latitude:.4f}, {end.longitude:.4f}); {summary}",
        icon=folium.Icon(color="red", icon="stop"),
    ).add_to(path_map)

    path_map.fit_bounds([[south, west], [north, east]])

    path_map.save(output_filename)

    logger.debug(f"Map saved to {output_filename} with {len(coordinates)} points")
