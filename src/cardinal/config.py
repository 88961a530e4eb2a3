"""Sampling parameters for spline construction."""

from __future__ import annotations

from dataclasses import dataclass

from .spline import check_segments

DEFAULT_SEGMENTS_PER_SPAN = 100
DEFAULT_TENSION = 0.5


@dataclass(frozen=True)
class SplineConfig:
    """Density and curviness of a sampled spline."""

    segments_per_span: int = DEFAULT_SEGMENTS_PER_SPAN
    tension: float = DEFAULT_TENSION
    closed: bool = True

    def validate(self) -> "SplineConfig":
        check_segments(self.segments_per_span)
        return self


__all__ = ["DEFAULT_SEGMENTS_PER_SPAN", "DEFAULT_TENSION", "SplineConfig"]
