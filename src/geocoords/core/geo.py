from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt
from typing import Iterable, Sequence

"""
Spherical geometry on plain degree values.

The coordinate types delegate here; these functions assume their inputs were
already validated and never raise for in-range values.
"""

# Mean Earth radius in meters (spherical model).
EARTH_RADIUS_M = 6_371_000

Vertex = Sequence[float]


def great_circle_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters, using the Vincenty special case for a sphere.

    Unlike plain haversine this stays accurate for antipodal points.
    """
    lat_from = radians(lat1)
    lon_from = radians(lon1)
    lat_to = radians(lat2)
    lon_to = radians(lon2)

    lon_delta = lon_to - lon_from
    a = (cos(lat_to) * sin(lon_delta)) ** 2 + (
        cos(lat_from) * sin(lat_to) - sin(lat_from) * cos(lat_to) * cos(lon_delta)
    ) ** 2
    b = sin(lat_from) * sin(lat_to) + cos(lat_from) * cos(lat_to) * cos(lon_delta)

    angle = atan2(sqrt(a), b)
    return angle * EARTH_RADIUS_M


def is_point_in_polygon(lat: float, lon: float, polygon: Iterable[Vertex]) -> bool:
    """Even-odd ray casting test; longitude is the x axis, latitude the y axis.

    `polygon` is a ring of `(lat, lon)` vertices; the closing edge is implicit.
    On an axis-aligned boundary, the north and east sides count as inside and
    the south and west sides as outside.
    """
    vertices = [(float(v_lat), float(v_lon)) for v_lat, v_lon in polygon]
    if not vertices:
        raise ValueError("polygon must contain at least one vertex")

    crossings = 0
    n = len(vertices)
    p1_lat, p1_lon = vertices[0]
    for i in range(1, n + 1):
        p2_lat, p2_lon = vertices[i % n]
        if (
            lon > min(p1_lon, p2_lon)
            and lon <= max(p1_lon, p2_lon)
            and lat <= max(p1_lat, p2_lat)
            and p1_lon != p2_lon
        ):
            lat_inters = (lon - p1_lon) * (p2_lat - p1_lat) / (p2_lon - p1_lon) + p1_lat
            if p1_lat == p2_lat or lat <= lat_inters:
                crossings += 1
        p1_lat, p1_lon = p2_lat, p2_lon

    return crossings % 2 != 0
