"""
Domain errors.

Every validation failure is a `ValueError` subclass so callers (and Pydantic, when
coordinates are used as model fields) can treat them like any other bad value.
"""

from __future__ import annotations

from typing import Any, Literal

Reason = Literal["type", "format", "range", "missing", "split"]


class CoordinatesError(ValueError):
    """Base error for invalid coordinate input."""

    field: str = "coordinates"

    def __init__(self, message: str, *, value: Any = None, reason: Reason = "range"):
        super().__init__(message)
        self.value = value
        self.reason = reason


class InvalidLatitudeError(CoordinatesError):
    field = "lat"


class InvalidLongitudeError(CoordinatesError):
    field = "lon"


class CoordinatesParseError(CoordinatesError):
    """Raised when a delimited string does not hold exactly one valid lat/lon pair."""

    field = "text"
