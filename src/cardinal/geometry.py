"""Value types shared by the spline helpers."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence, Tuple, Union


class Point2D(NamedTuple):
    """A position (or displacement) in the curve plane."""

    x: float
    y: float


class TangentPair(NamedTuple):
    """Tangent vectors at the start and end of one span."""

    start_dx: float
    start_dy: float
    end_dx: float
    end_dy: float

    @property
    def start(self) -> Point2D:
        return Point2D(self.start_dx, self.start_dy)

    @property
    def end(self) -> Point2D:
        return Point2D(self.end_dx, self.end_dy)


PointLike = Union[Point2D, Tuple[float, float], Sequence[float]]


def as_point(value: PointLike) -> Point2D:
    """Convert an ``(x, y)`` pair or vector-like object into a ``Point2D``."""
    if isinstance(value, Point2D):
        return value
    if hasattr(value, "x") and hasattr(value, "y"):
        return Point2D(float(value.x), float(value.y))
    if len(value) != 2:
        raise ValueError(f"Point must have two coordinates, got {len(value)}")
    return Point2D(float(value[0]), float(value[1]))


def is_finite(point: Point2D) -> bool:
    return math.isfinite(point.x) and math.isfinite(point.y)


def sub(a: Point2D, b: Point2D) -> Point2D:
    return Point2D(a.x - b.x, a.y - b.y)


def scale(v: Point2D, factor: float) -> Point2D:
    return Point2D(v.x * factor, v.y * factor)


__all__ = ["Point2D", "PointLike", "TangentPair", "as_point", "is_finite", "scale", "sub"]
