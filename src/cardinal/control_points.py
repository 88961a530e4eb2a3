"""Append-only container for user-placed control points."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple, overload

from .config import SplineConfig
from .geometry import Point2D, PointLike, as_point, is_finite
from .spline import build


def screen_to_plane(pos: Tuple[float, float], window_height: float) -> Point2D:
    """Flip window coordinates (y down) into the curve plane (y up)."""
    return Point2D(float(pos[0]), float(window_height) - float(pos[1]))


class ControlPointSet(Sequence[Point2D]):
    """Ordered control points forming a closed loop; grows one point at a time."""

    def __init__(self, points: Iterable[PointLike] = ()) -> None:
        self._points: List[Point2D] = []
        for point in points:
            self.append(point)

    @property
    def points(self) -> Tuple[Point2D, ...]:
        return tuple(self._points)

    def append(self, point: PointLike) -> Point2D:
        value = as_point(point)
        if not is_finite(value):
            raise ValueError(f"Control point must have finite coordinates, got {value}")
        self._points.append(value)
        return value

    def add_screen_point(self, pos: Tuple[float, float], window_height: float) -> Point2D:
        return self.append(screen_to_plane(pos, window_height))

    def curve(self, config: SplineConfig | None = None) -> List[Point2D]:
        """Sample the spline through the current points."""
        cfg = config or SplineConfig()
        return build(
            self._points,
            cfg.segments_per_span,
            cfg.tension,
            closed=cfg.closed,
        )

    @overload
    def __getitem__(self, index: int) -> Point2D: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Point2D]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._points[index])
        return self._points[index]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point2D]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"ControlPointSet({self._points!r})"


__all__ = ["ControlPointSet", "screen_to_plane"]
