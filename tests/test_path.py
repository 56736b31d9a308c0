import pytest
from shapely.geometry import LineString

from greatcircle.geometry import Coordinate
from greatcircle.path import great_circle_path, path_coordinates


def test_great_circle_path_samples_equator():
    """
    Tests that an equatorial arc is sampled in (longitude, latitude) order
    at evenly spaced fractions.
    """
    path = great_circle_path(
        Coordinate(latitude=0.0, longitude=0.0),
        Coordinate(latitude=0.0, longitude=90.0),
        segments=2,
    )

    assert isinstance(path, LineString)
    coords = list(path.coords)
    assert len(coords) == 3

    expected = [(0.0, 0.0), (45.0, 0.0), (90.0, 0.0)]
    for (lon, lat), (expected_lon, expected_lat) in zip(coords, expected):
        assert lon == pytest.approx(expected_lon, abs=1e-9)
        assert lat == pytest.approx(expected_lat, abs=1e-9)


def test_great_circle_path_point_count_and_endpoints():
    start = Coordinate(latitude=51.5074, longitude=-0.1278)
    end = Coordinate(latitude=40.7128, longitude=-74.0060)

    points = path_coordinates(great_circle_path(start, end, segments=10))

    assert len(points) == 11
    assert points[0].latitude == pytest.approx(start.latitude, abs=1e-6)
    assert points[0].longitude == pytest.approx(start.longitude, abs=1e-6)
    assert points[-1].latitude == pytest.approx(end.latitude, abs=1e-6)
    assert points[-1].longitude == pytest.approx(end.longitude, abs=1e-6)


def test_great_circle_path_bulges_poleward():
    # London to New York along a great circle passes north of both endpoints
    start = Coordinate(latitude=51.5074, longitude=-0.1278)
    end = Coordinate(latitude=40.7128, longitude=-74.0060)

    points = path_coordinates(great_circle_path(start, end, segments=8))

    assert max(p.latitude for p in points) > start.latitude


def test_great_circle_path_coincident_endpoints():
    pos = Coordinate(latitude=10.0, longitude=10.0)

    points = path_coordinates(great_circle_path(pos, pos, segments=4))

    assert points == [pos] * 5


@pytest.mark.parametrize("segments", [0, -3])
def test_great_circle_path_rejects_non_positive_segments(segments):
    with pytest.raises(ValueError):
        great_circle_path(
            Coordinate(latitude=0.0, longitude=0.0),
            Coordinate(latitude=1.0, longitude=1.0),
            segments=segments,
        )


def test_path_coordinates_swaps_axis_order():
    line = LineString([(20.0, 10.0), (21.0, 11.0)])
    assert path_coordinates(line) == [
        Coordinate(latitude=10.0, longitude=20.0),
        Coordinate(latitude=11.0, longitude=21.0),
    ]
