"""
geocoords CLI entrypoint.

Small helpers for checking coordinates from a shell:
- `parse`: validate and normalize a `lat,lon` string
- `distance`: great-circle distance between two points
- `contains`: point-in-polygon test

Values starting with `-` that are not plain numbers (e.g. `-33.1,151.2`) must be
passed after `--` or as `--vertex=-33.1,151.2`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from geocoords.config.settings import get_settings
from geocoords.core.logging import configure_logging
from geocoords.domain.models import CoordinatesImmutable

logger = logging.getLogger(__name__)


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the `parse` subcommand."""
    delimiter = get_settings().codec.delimiter if args.delimiter is None else args.delimiter
    coords = CoordinatesImmutable.from_string(args.text, delimiter)
    if coords is None:
        print(f"Not a valid coordinate pair: {args.text!r}", file=sys.stderr)
        return 1

    if args.json:
        print(coords.to_json())
        return 0

    print(coords.key())
    print(f"hemisphere: {coords.lat_hemisphere}{coords.lon_hemisphere}")
    return 0


def _cmd_distance(args: argparse.Namespace) -> int:
    """Handle the `distance` subcommand."""
    settings = get_settings()
    meters = CoordinatesImmutable.distance_between(args.lat1, args.lon1, args.lat2, args.lon2)
    print(f"{meters:.{settings.output.distance_decimals}f}")
    return 0


def _cmd_contains(args: argparse.Namespace) -> int:
    """Handle the `contains` subcommand; exit code 0 means inside."""
    delimiter = get_settings().codec.delimiter if args.delimiter is None else args.delimiter
    point = CoordinatesImmutable.from_string_strict(args.point, delimiter)
    polygon = [CoordinatesImmutable.from_string_strict(v, delimiter) for v in args.vertex]
    if len(polygon) < 3:
        print("A polygon needs at least 3 vertices (--vertex).", file=sys.stderr)
        return 2

    inside = point.is_inside_polygon(polygon)
    logger.debug("Point %s vs polygon of %d vertices: inside=%s", point, len(polygon), inside)
    print("inside" if inside else "outside")
    return 0 if inside else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="geocoords")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="Validate a 'lat,lon' string and print its canonical form.")
    p.add_argument("text")
    p.add_argument("--delimiter", type=str, default=None, help="Separator (defaults to config codec.delimiter).")
    p.add_argument("--json", action="store_true", help="Output the full-precision JSON record")
    p.set_defaults(func=_cmd_parse)

    d = sub.add_parser("distance", help="Great-circle distance in meters between two points.")
    d.add_argument("lat1")
    d.add_argument("lon1")
    d.add_argument("lat2")
    d.add_argument("lon2")
    d.set_defaults(func=_cmd_distance)

    c = sub.add_parser("contains", help="Check whether a point lies inside a polygon.")
    c.add_argument("point", help="Point as 'lat,lon'")
    c.add_argument("--vertex", action="append", default=[], required=True, help="Polygon vertex 'lat,lon' (repeat)")
    c.add_argument("--delimiter", type=str, default=None)
    c.set_defaults(func=_cmd_contains)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m geocoords.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except ValueError as exc:
        # CoordinatesError and bad arguments such as an empty --delimiter.
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
