"""
Latitude/longitude input validation.

Accepted inputs form a closed set:
- `float` values (used as-is),
- `int` values (widened to float; `bool` is rejected even though it subclasses int),
- strings matching the basic decimal grammar below (whole string, ASCII digits only).

Anything else is rejected regardless of whether Python could coerce it.
"""

from __future__ import annotations

import re
from typing import Any

from geocoords.domain.errors import CoordinatesError, InvalidLatitudeError, InvalidLongitudeError

RE_BASIC_LAT = r"-?[0-9]{1,2}(?:\.[0-9]{1,99})?"
RE_BASIC_LON = r"-?[0-9]{1,3}(?:\.[0-9]{1,99})?"
RE_BASIC = RE_BASIC_LAT + "," + RE_BASIC_LON

_LAT_PATTERN = re.compile(RE_BASIC_LAT)
_LON_PATTERN = re.compile(RE_BASIC_LON)

LAT_MIN, LAT_MAX = -90.0, 90.0
LON_MIN, LON_MAX = -180.0, 180.0


def _normalize(
    value: Any,
    *,
    pattern: re.Pattern[str],
    low: float,
    high: float,
    error: type[CoordinatesError],
    label: str,
) -> float:
    if isinstance(value, bool) or value is None:
        raise error(f"{label} must be a number or numeric string, got {value!r}.", value=value, reason="type")
    if isinstance(value, float):
        number: float | int = value
    elif isinstance(value, int):
        number = value
    elif isinstance(value, str):
        if pattern.fullmatch(value) is None:
            raise error(f"{label} {value!r} is not a plain decimal number.", value=value, reason="format")
        number = float(value)
    else:
        raise error(
            f"{label} must be a number or numeric string, got {type(value).__name__}.",
            value=value,
            reason="type",
        )

    # Compare before float() so huge ints fail the range check instead of overflowing.
    if not (low <= number <= high):
        raise error(
            f"{label} coordinate must be numeric between or equal from {low:g} to {high:g} degrees.",
            value=value,
            reason="range",
        )
    return float(number)


def validate_latitude(value: Any) -> float:
    """Return `value` as a float latitude or raise `InvalidLatitudeError`."""
    return _normalize(
        value,
        pattern=_LAT_PATTERN,
        low=LAT_MIN,
        high=LAT_MAX,
        error=InvalidLatitudeError,
        label="Latitude",
    )


def validate_longitude(value: Any) -> float:
    """Return `value` as a float longitude or raise `InvalidLongitudeError`."""
    return _normalize(
        value,
        pattern=_LON_PATTERN,
        low=LON_MIN,
        high=LON_MAX,
        error=InvalidLongitudeError,
        label="Longitude",
    )


def is_valid_latitude(value: Any) -> bool:
    try:
        validate_latitude(value)
    except InvalidLatitudeError:
        return False
    return True


def is_valid_longitude(value: Any) -> bool:
    try:
        validate_longitude(value)
    except InvalidLongitudeError:
        return False
    return True
