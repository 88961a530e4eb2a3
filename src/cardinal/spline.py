"""Helpers for cardinal spline interpolation."""

from __future__ import annotations

import logging
import numbers
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .geometry import Point2D, PointLike, TangentPair, as_point, scale, sub

logger = logging.getLogger(__name__)

MIN_CONTROL_POINTS = 3


class SplineError(ValueError):
    """Raised when a spline is requested with an invalid segment count."""


def tangents(
    prev: Point2D,
    start: Point2D,
    end: Point2D,
    next_: Point2D,
    tension: float,
) -> TangentPair:
    """Return the tangent vectors at ``start`` and ``end`` for one span."""
    t_start = scale(sub(end, prev), tension)
    t_end = scale(sub(next_, start), tension)
    return TangentPair(t_start.x, t_start.y, t_end.x, t_end.y)


def hermite_weights(u: float) -> Tuple[float, float, float, float]:
    """Cubic Hermite basis weights ``(h0, h1, h2, h3)`` at parameter ``u``."""
    u2 = u * u
    u3 = u2 * u
    return (
        2 * u3 - 3 * u2 + 1,
        -2 * u3 + 3 * u2,
        u3 - 2 * u2 + u,
        u3 - u2,
    )


def interpolate(
    start: Point2D,
    end: Point2D,
    segments: int,
    tangent_pair: TangentPair,
) -> List[Point2D]:
    """Sample ``segments`` points from ``start`` towards (but excluding) ``end``."""
    check_segments(segments)
    points: List[Point2D] = []
    for i in range(segments):
        h0, h1, h2, h3 = hermite_weights(i / segments)
        x = h0 * start.x + h1 * end.x + h2 * tangent_pair.start_dx + h3 * tangent_pair.end_dx
        y = h0 * start.y + h1 * end.y + h2 * tangent_pair.start_dy + h3 * tangent_pair.end_dy
        points.append(Point2D(x, y))
    return points


def build(
    control_points: Iterable[PointLike],
    segments_per_span: int,
    tension: float,
    *,
    closed: bool = True,
) -> List[Point2D]:
    """Return the vertices of the cardinal spline through ``control_points``.

    Closed curves yield ``len(control_points) * segments_per_span`` vertices,
    one span per control point including the span that wraps back to the
    first point. Open curves cover the ``n - 1`` inner spans and end on the
    last control point. Fewer than three control points are returned as-is.
    """
    pts = [as_point(point) for point in control_points]
    if len(pts) < MIN_CONTROL_POINTS:
        return pts
    check_segments(segments_per_span)

    vertices: List[Point2D] = []
    for prev, start, end, next_ in _quadruples(pts, closed):
        pair = tangents(prev, start, end, next_, tension)
        vertices.extend(interpolate(start, end, segments_per_span, pair))
    if not closed:
        vertices.append(pts[-1])

    logger.debug(
        "Built %s spline: %d control points, %d vertices",
        "closed" if closed else "open",
        len(pts),
        len(vertices),
    )
    return vertices


def build_array(
    control_points: Iterable[PointLike],
    segments_per_span: int,
    tension: float,
    *,
    closed: bool = True,
) -> np.ndarray:
    """Vectorized ``build`` returning an ``(N, 2)`` float array."""
    pts = np.array(
        [as_point(point) for point in control_points], dtype=np.float64
    ).reshape(-1, 2)
    if len(pts) < MIN_CONTROL_POINTS:
        return pts
    check_segments(segments_per_span)

    if closed:
        prev = np.roll(pts, 1, axis=0)
        start = pts
        end = np.roll(pts, -1, axis=0)
        next_ = np.roll(pts, -2, axis=0)
    else:
        padded = np.vstack([pts[:1], pts, pts[-1:]])
        prev, start, end, next_ = padded[:-3], padded[1:-2], padded[2:-1], padded[3:]

    t_start = tension * (end - prev)
    t_end = tension * (next_ - start)

    u = np.arange(segments_per_span, dtype=np.float64) / segments_per_span
    u2 = u * u
    u3 = u2 * u
    weights = np.stack(
        [2 * u3 - 3 * u2 + 1, -2 * u3 + 3 * u2, u3 - 2 * u2 + u, u3 - u2], axis=1
    )
    terms = np.stack([start, end, t_start, t_end], axis=1)
    vertices = np.einsum("kc,scd->skd", weights, terms).reshape(-1, 2)
    if not closed:
        vertices = np.vstack([vertices, pts[-1:]])
    return vertices


def _quadruples(
    pts: Sequence[Point2D], closed: bool
) -> Iterable[Tuple[Point2D, Point2D, Point2D, Point2D]]:
    if closed:
        n = len(pts)
        for i in range(n):
            yield pts[(i - 1) % n], pts[i], pts[(i + 1) % n], pts[(i + 2) % n]
        return

    padded = [pts[0]] + list(pts) + [pts[-1]]
    for i in range(len(pts) - 1):
        yield padded[i], padded[i + 1], padded[i + 2], padded[i + 3]


def check_segments(segments: int) -> None:
    """Raise ``SplineError`` unless ``segments`` is a positive integer."""
    if isinstance(segments, bool) or not isinstance(segments, numbers.Integral):
        raise SplineError(f"segment count must be an integer, got {segments!r}")
    if segments < 1:
        raise SplineError(f"segment count must be >= 1, got {segments}")


__all__ = [
    "MIN_CONTROL_POINTS",
    "SplineError",
    "build",
    "build_array",
    "check_segments",
    "hermite_weights",
    "interpolate",
    "tangents",
]
