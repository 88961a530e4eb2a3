"""Cardinal spline sampling through closed loops of 2D control points."""

from .config import DEFAULT_SEGMENTS_PER_SPAN, DEFAULT_TENSION, SplineConfig
from .control_points import ControlPointSet, screen_to_plane
from .geometry import Point2D, TangentPair
from .spline import (
    SplineError,
    build,
    build_array,
    hermite_weights,
    interpolate,
    tangents,
)

__all__ = [
    "ControlPointSet",
    "DEFAULT_SEGMENTS_PER_SPAN",
    "DEFAULT_TENSION",
    "Point2D",
    "SplineConfig",
    "SplineError",
    "TangentPair",
    "build",
    "build_array",
    "hermite_weights",
    "interpolate",
    "screen_to_plane",
    "tangents",
]
