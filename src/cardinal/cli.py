"""Command line entry point sampling a cardinal spline."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import Iterable, List, Sequence, TextIO

from .config import DEFAULT_SEGMENTS_PER_SPAN, DEFAULT_TENSION, SplineConfig
from .control_points import ControlPointSet
from .geometry import Point2D, is_finite
from .spline import SplineError

logger = logging.getLogger(__name__)


def parse_point(text: str) -> Point2D:
    """Parse ``"x,y"`` or ``"x y"`` into a point."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"expected two coordinates in {text!r}")
    point = Point2D(float(parts[0]), float(parts[1]))
    if not is_finite(point):
        raise ValueError(f"coordinates must be finite in {text!r}")
    return point


def read_points(stream: TextIO) -> List[Point2D]:
    points: List[Point2D] = []
    for line in stream:
        line = line.split("#", 1)[0].strip()
        if line:
            points.append(parse_point(line))
    return points


def format_vertices(vertices: Iterable[Point2D], fmt: str) -> str:
    if fmt == "json":
        return json.dumps([[x, y] for x, y in vertices])
    return "\n".join(f"{x!r},{y!r}" for x, y in vertices)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sample a cardinal spline through 2D control points"
    )
    parser.add_argument(
        "points",
        nargs="*",
        metavar="POINT",
        help=(
            "Control point as 'x,y'. Read from stdin when omitted; "
            "put '--' before points with a negative x."
        ),
    )
    parser.add_argument(
        "--segments",
        type=int,
        default=DEFAULT_SEGMENTS_PER_SPAN,
        help="Vertices sampled between consecutive control points",
    )
    parser.add_argument(
        "--tension",
        type=float,
        default=DEFAULT_TENSION,
        help="Tangent scale; 0 draws straight spans",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        help="Do not join the last control point back to the first",
    )
    parser.add_argument("--format", choices=("csv", "json"), default="csv")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    try:
        SplineConfig(segments_per_span=args.segments).validate()
    except SplineError as exc:
        parser.error(f"--segments: {exc}")
    if not math.isfinite(args.tension):
        parser.error(f"--tension must be finite, got {args.tension}")
    try:
        if args.points:
            args.points = [parse_point(text) for text in args.points]
        else:
            args.points = read_points(sys.stdin)
    except ValueError as exc:
        parser.error(str(exc))
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    control_points = ControlPointSet(args.points)
    if len(control_points) < 3:
        logger.warning(
            "Only %d control point(s); emitting them without interpolation",
            len(control_points),
        )

    config = SplineConfig(
        segments_per_span=args.segments,
        tension=args.tension,
        closed=not args.open,
    )
    output = format_vertices(control_points.curve(config), args.format)
    if output:
        print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
