"""
geocoords: validated WGS-84 latitude/longitude values.

Typical usage:
    >>> from geocoords import CoordinatesImmutable, parse
    >>> prague = CoordinatesImmutable(50.0875, 14.4213)
    >>> berlin = parse("52.518611,13.408333")
    >>> int(prague.distance(berlin) // 1000)
    279
"""

from geocoords.core.geo import EARTH_RADIUS_M
from geocoords.core.validation import (
    is_valid_latitude,
    is_valid_longitude,
    validate_latitude,
    validate_longitude,
)
from geocoords.domain.errors import (
    CoordinatesError,
    CoordinatesParseError,
    InvalidLatitudeError,
    InvalidLongitudeError,
)
from geocoords.domain.models import (
    BaseCoordinates,
    Coordinates,
    CoordinatesImmutable,
    LatLonRecord,
    parse,
)

__all__ = [
    "EARTH_RADIUS_M",
    "BaseCoordinates",
    "Coordinates",
    "CoordinatesError",
    "CoordinatesImmutable",
    "CoordinatesParseError",
    "InvalidLatitudeError",
    "InvalidLongitudeError",
    "LatLonRecord",
    "is_valid_latitude",
    "is_valid_longitude",
    "parse",
    "validate_latitude",
    "validate_longitude",
]
