"""
Text codec for lat/lon pairs.

Only the string-level work lives here (splitting and fixed-precision rendering);
validation of each segment is left to the coordinate types.
"""

from __future__ import annotations

KEY_PRECISION = 6
DEFAULT_DELIMITER = ","


def format_key(lat: float, lon: float, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Render `lat`/`lon` with exactly six fractional digits, e.g. `0.000000,0.000000`."""
    return f"{lat:.{KEY_PRECISION}f}{delimiter}{lon:.{KEY_PRECISION}f}"


def split_pair(text: str, delimiter: str = DEFAULT_DELIMITER) -> tuple[str, str] | None:
    """Split `text` on `delimiter`; return the two segments, or None unless there are exactly two."""
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    parts = text.split(delimiter)
    if len(parts) != 2:
        return None
    return parts[0], parts[1]
