"""
Coordinate value types.

Two variants share one engine (`BaseCoordinates`):
- `Coordinates`: mutable; `set_lat` / `set_lon` re-validate and update in place.
- `CoordinatesImmutable`: `with_lat` / `with_lon` return a new value.

Everything else (validation, formatting, serialization, distance, polygon
containment) is implemented once on the base class.

A constructed instance is always within WGS-84 range: invalid input raises
`InvalidLatitudeError` / `InvalidLongitudeError` and no object is created.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import core_schema

from geocoords.core.codec import DEFAULT_DELIMITER, format_key, split_pair
from geocoords.core.geo import EARTH_RADIUS_M, great_circle_m, is_point_in_polygon
from geocoords.core.validation import RE_BASIC, validate_latitude, validate_longitude
from geocoords.domain.errors import (
    CoordinatesError,
    CoordinatesParseError,
    InvalidLatitudeError,
    InvalidLongitudeError,
)

logger = logging.getLogger(__name__)

NORTH = "N"
SOUTH = "S"
EAST = "E"
WEST = "W"

C = TypeVar("C", bound="BaseCoordinates")


class LatLonRecord(BaseModel):
    """Machine-readable form of a coordinate pair (full double precision)."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class BaseCoordinates:
    """Validated latitude/longitude pair in WGS-84 decimal degrees."""

    __slots__ = ("_lat", "_lon")

    EARTH_RADIUS = EARTH_RADIUS_M

    def __init__(self, lat: Any, lon: Any):
        # Validate both before assigning anything.
        lat_value = validate_latitude(lat)
        lon_value = validate_longitude(lon)
        object.__setattr__(self, "_lat", lat_value)
        object.__setattr__(self, "_lon", lon_value)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def safe(cls: type[C], lat: Any, lon: Any) -> C | None:
        """Like the constructor, but return None instead of raising on invalid input."""
        try:
            return cls(lat, lon)
        except CoordinatesError as exc:
            logger.debug("Rejected coordinates (%r, %r): %s", lat, lon, exc)
            return None

    @classmethod
    def from_string(cls: type[C], text: str, delimiter: str = DEFAULT_DELIMITER) -> C | None:
        """Parse `'<lat><delimiter><lon>'`; return None if it is not exactly one valid pair."""
        parts = split_pair(text, delimiter)
        if parts is None:
            logger.debug("Text %r does not split into two segments on %r", text, delimiter)
            return None
        return cls.safe(parts[0], parts[1])

    @classmethod
    def from_string_strict(cls: type[C], text: str, delimiter: str = DEFAULT_DELIMITER) -> C:
        """Same as `from_string` but raise `CoordinatesParseError` on failure."""
        parts = split_pair(text, delimiter)
        if parts is None:
            raise CoordinatesParseError(
                f"Text {text!r} must contain exactly one {delimiter!r} delimiter.",
                value=text,
                reason="split",
            )
        try:
            return cls(parts[0], parts[1])
        except CoordinatesError as exc:
            raise CoordinatesParseError(
                f"Text {text!r} is not a valid coordinate pair: {exc}",
                value=text,
                reason=exc.reason,
            ) from exc

    @classmethod
    def from_dict(cls: type[C], data: Mapping[str, Any]) -> C:
        """Build from a `{"lat": ..., "lon": ...}` mapping (the serialized form)."""
        if "lat" not in data:
            raise InvalidLatitudeError("Missing 'lat' key.", value=None, reason="missing")
        if "lon" not in data:
            raise InvalidLongitudeError("Missing 'lon' key.", value=None, reason="missing")
        return cls(data["lat"], data["lon"])

    @classmethod
    def distance_between(cls, lat1: Any, lon1: Any, lat2: Any, lon2: Any) -> float:
        """Distance in meters between two raw lat/lon pairs (validated first)."""
        return cls(lat1, lon1).distance(cls(lat2, lon2))

    # -- accessors ------------------------------------------------------------

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def lon(self) -> float:
        return self._lon

    def get_lat(self) -> float:
        """Latitude in range -90..90."""
        return self._lat

    def get_lon(self) -> float:
        """Longitude in range -180..180."""
        return self._lon

    @property
    def lat_hemisphere(self) -> str:
        return NORTH if self._lat >= 0 else SOUTH

    @property
    def lon_hemisphere(self) -> str:
        return EAST if self._lon >= 0 else WEST

    def get_lat_hemisphere(self) -> str:
        return self.lat_hemisphere

    def get_lon_hemisphere(self) -> str:
        return self.lon_hemisphere

    def __getitem__(self, name: str) -> float:
        if name == "lat":
            return self.get_lat()
        if name == "lon":
            return self.get_lon()
        raise KeyError(f"Value {name!r} does not exist or it is not accessible")

    def __iter__(self) -> Iterator[float]:
        # Lets instances be unpacked (`lat, lon = coords`) and used as polygon vertices.
        return iter((self._lat, self._lon))

    # -- formatting / serialization ------------------------------------------

    def key(self, delimiter: str = DEFAULT_DELIMITER) -> str:
        """Canonical six-decimal form, also used for equality and hashing.

        Negative zero keeps its sign (`-0.000000`), so `(-0.0, 0)` and `(0.0, 0)`
        have different keys and compare unequal, although both are N/E.
        """
        return format_key(self._lat, self._lon, delimiter)

    def get_lat_lon(self, delimiter: str = DEFAULT_DELIMITER) -> str:
        """Latitude and longitude as `'lat,lon'`, with comma as the default delimiter."""
        return self.key(delimiter)

    def to_record(self) -> LatLonRecord:
        return LatLonRecord(lat=self._lat, lon=self._lon)

    def to_dict(self) -> dict[str, float]:
        return {"lat": self._lat, "lon": self._lon}

    def to_json(self) -> str:
        """Compact JSON record; floats use the shortest text that round-trips."""
        return self.to_record().model_dump_json()

    def __str__(self) -> str:
        return self.key()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(lat={self._lat!r}, lon={self._lon!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._lat, self._lon))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseCoordinates):
            return NotImplemented
        return self.key() == other.key()

    # -- geometry -------------------------------------------------------------

    def distance(self, other: BaseCoordinates) -> float:
        """Great-circle distance to `other` in meters (same unit as EARTH_RADIUS)."""
        return great_circle_m(self._lat, self._lon, other.get_lat(), other.get_lon())

    def is_inside_polygon(self, polygon: Iterable[Any]) -> bool:
        """Check whether this point lies inside `polygon`.

        `polygon` is a sequence of `(lat, lon)` vertices, for example
        `[(50.5, 16.5), (51.5, 16.5), (51.5, 17.5), (50.5, 17.5)]`; coordinate
        instances work as vertices too. The first vertex does not need to be
        repeated at the end. Raises `ValueError` for an empty polygon.
        """
        return is_point_in_polygon(self._lat, self._lon, polygon)

    # -- pydantic -------------------------------------------------------------

    @classmethod
    def _coerce(cls: type[C], value: Any) -> C:
        if isinstance(value, cls):
            return value
        if isinstance(value, BaseCoordinates):
            return cls(value.get_lat(), value.get_lon())
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        if isinstance(value, str):
            return cls.from_string_strict(value)
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return cls(value[0], value[1])
        raise CoordinatesError(
            f"Cannot build {cls.__name__} from {type(value).__name__}.", value=value, reason="type"
        )

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda v: v.to_dict()),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema, handler: Any) -> dict[str, Any]:
        record = {
            "type": "object",
            "properties": {
                "lat": {"type": "number", "minimum": -90, "maximum": 90},
                "lon": {"type": "number", "minimum": -180, "maximum": 180},
            },
            "required": ["lat", "lon"],
        }
        if handler.mode == "serialization":
            return record
        # Inputs accepted by `_coerce`: the record, "lat,lon" text or a 2-item array.
        return {
            "anyOf": [
                record,
                {"type": "string", "pattern": f"^{RE_BASIC}$"},
                {"type": "array", "items": {"type": ["number", "string"]}, "minItems": 2, "maxItems": 2},
            ]
        }


class Coordinates(BaseCoordinates):
    """Mutable coordinates.

    Setters validate before assigning, so a failed update leaves the previous
    value in place. Not safe for concurrent writers on the same instance;
    use a single writer or an external lock.
    """

    __slots__ = ()

    # Mutable values must not be dict keys; equality still compares keys.
    __hash__ = None  # type: ignore[assignment]

    def set_lat(self, lat: Any) -> Coordinates:
        """Change latitude in place and return self."""
        self._lat = validate_latitude(lat)
        return self

    def set_lon(self, lon: Any) -> Coordinates:
        """Change longitude in place and return self."""
        self._lon = validate_longitude(lon)
        return self

    @BaseCoordinates.lat.setter  # type: ignore[attr-defined]
    def lat(self, value: Any) -> None:
        self.set_lat(value)

    @BaseCoordinates.lon.setter  # type: ignore[attr-defined]
    def lon(self, value: Any) -> None:
        self.set_lon(value)


class CoordinatesImmutable(BaseCoordinates):
    """Immutable coordinates; updates return a new instance."""

    __slots__ = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; use with_lat()/with_lon()")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __hash__(self) -> int:
        return hash(self.key())

    def with_lat(self, lat: Any) -> CoordinatesImmutable:
        """Return a copy with the latitude replaced."""
        return type(self)(lat, self._lon)

    def with_lon(self, lon: Any) -> CoordinatesImmutable:
        """Return a copy with the longitude replaced."""
        return type(self)(self._lat, lon)


def parse(text: str, delimiter: str = DEFAULT_DELIMITER) -> CoordinatesImmutable | None:
    """Parse `'lat,lon'` text into immutable coordinates, or return None."""
    return CoordinatesImmutable.from_string(text, delimiter)
