import pytest

from geocoords.core.geo import is_point_in_polygon
from geocoords.domain.models import Coordinates, CoordinatesImmutable

PRAGUE_CASTLE = [
    (50.089086, 14.392272),
    (50.091675, 14.397796),
    (50.089847, 14.404232),
    (50.085563, 14.406616),
    (50.081262, 14.402157),
    (50.080157, 14.397011),
    (50.081960, 14.391940),
]
EIFFEL_TOWER = [
    (48.859166, 2.292573),
    (48.860540, 2.295058),
    (48.858995, 2.297680),
    (48.857114, 2.297600),
    (48.856421, 2.294914),
    (48.857979, 2.292185),
]
CENTRAL_PARK = [
    (40.768094, -73.981702),
    (40.770659, -73.974510),
    (40.765714, -73.971595),
    (40.763204, -73.977857),
    (40.766249, -73.981175),
]
GRAND_CANYON = [
    (36.057977, -112.146882),
    (36.057804, -112.130991),
    (36.063665, -112.129122),
    (36.067847, -112.142792),
    (36.062482, -112.150881),
]

POLYGONS = {
    "Prague Castle": (PRAGUE_CASTLE, 50.087738, 14.402767),
    "Eiffel Tower": (EIFFEL_TOWER, 48.858373, 2.294554),
    "New York Central Park": (CENTRAL_PARK, 40.767588, -73.977225),
    "Grand Canyon": (GRAND_CANYON, 36.061272, -112.139519),
}


@pytest.mark.parametrize("cls", [Coordinates, CoordinatesImmutable])
@pytest.mark.parametrize("name", sorted(POLYGONS))
def test_point_in_landmark_polygons(cls, name):
    polygon, lat, lon = POLYGONS[name]
    # Each landmark pairs its outline with a point known to lie within it;
    # (12, -55) is in the Atlantic, far from all of them.

    assert cls(lat, lon).is_inside_polygon(polygon) is True
    assert cls(12, -55).is_inside_polygon(polygon) is False


@pytest.mark.parametrize("name", sorted(POLYGONS))
def test_vertex_centroid_is_inside(name):
    polygon, _, _ = POLYGONS[name]
    lat = sum(v[0] for v in polygon) / len(polygon)
    lon = sum(v[1] for v in polygon) / len(polygon)

    assert CoordinatesImmutable(lat, lon).is_inside_polygon(polygon) is True


SQUARE = [(0, 0), (0, 10), (10, 10), (10, 0)]


@pytest.mark.parametrize(
    "lat, lon, inside",
    [
        (5, 5, True),
        (1, 9, True),
        (15, 5, False),
        (-1, 5, False),
        (5, 15, False),
        (5, -1, False),
        (-60, -170, False),
    ],
)
def test_square(lat, lon, inside):
    assert CoordinatesImmutable(lat, lon).is_inside_polygon(SQUARE) is inside


# Points exactly on the boundary. The ray is cast along increasing latitude and
# each edge is tested with `min_lon < lon <= max_lon` and `lat <= max_lat`, so
# the north and east sides count as inside while the south and west sides do not.
@pytest.mark.parametrize(
    "lat, lon, inside",
    [
        # west side (lon == min edge lon): excluded by the strict `lon > min`
        (5, 0, False),
        # east side (lon == max edge lon): included by `lon <= max`
        (5, 10, True),
        # north side (lat == max edge lat): included by `lat <= max`
        (10, 5, True),
        # south side: both horizontal edges are crossed, even count
        (0, 5, False),
        # corners follow the same half-open rules
        (10, 10, True),
        (0, 0, False),
        (10, 0, False),
        (0, 10, False),
    ],
)
def test_square_boundary(lat, lon, inside):
    assert is_point_in_polygon(lat, lon, SQUARE) is inside
    assert CoordinatesImmutable(lat, lon).is_inside_polygon(SQUARE) is inside


# Triangle with one slanted edge from (0, 0) to (10, 10); the crossing latitude
# on it is computed, so points exactly on that edge hit `lat <= lat_inters`.
SLANTED = [(0, 0), (10, 10), (0, 10)]


@pytest.mark.parametrize(
    "lat, lon, inside",
    [
        # on the slanted edge: lat equals the intersection, counted as a crossing
        (5, 5, True),
        # below the slanted edge: crossing counted
        (2, 5, True),
        # above the slanted edge: no edge left ahead of the ray
        (7, 5, False),
    ],
)
def test_slanted_edge_boundary(lat, lon, inside):
    assert is_point_in_polygon(lat, lon, SLANTED) is inside


def test_closed_ring_gives_same_result():
    # Repeating the first vertex adds a zero-length edge, which never counts as a crossing.
    closed = SQUARE + [SQUARE[0]]
    point = CoordinatesImmutable(5, 5)
    assert point.is_inside_polygon(closed) is point.is_inside_polygon(SQUARE) is True


def test_coordinates_work_as_vertices():
    vertices = [CoordinatesImmutable(lat, lon) for lat, lon in GRAND_CANYON]
    assert Coordinates(36.061272, -112.139519).is_inside_polygon(vertices) is True
    assert Coordinates(36.0, -112.0).is_inside_polygon(vertices) is False


def test_triangle_across_hemispheres():
    triangle = [(-10, -10), (10, -10), (0, 10)]
    assert CoordinatesImmutable(0, 0).is_inside_polygon(triangle) is True
    assert CoordinatesImmutable(9, 9).is_inside_polygon(triangle) is False


def test_empty_polygon_is_rejected():
    with pytest.raises(ValueError):
        CoordinatesImmutable(0, 0).is_inside_polygon([])


def test_is_point_in_polygon_accepts_raw_degrees():
    assert is_point_in_polygon(5.0, 5.0, SQUARE) is True
    assert is_point_in_polygon(50.0, 50.0, SQUARE) is False
