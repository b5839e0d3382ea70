"""Path segment values emitted by the rounded-rectangle builder.

Angles are in degrees, measured from +x toward +y, so a point on an arc is
``center + radius * (cos(angle), sin(angle))``. Coordinates follow the canvas
convention (y grows downward): an arc with ``clockwise=True`` sweeps toward
increasing angles, which is visually clockwise on screen.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np


def _require_point(value: Sequence[float], label: str) -> tuple[float, float]:
    try:
        arr = np.asarray(value, dtype=float).reshape(2)
    except Exception as exc:
        raise ValueError(f"{label} must be a 2D coordinate.") from exc
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{label} must be finite.")
    return (float(arr[0]), float(arr[1]))


@dataclass(frozen=True)
class MoveTo:
    point: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", _require_point(self.point, "point"))

    @property
    def end_point(self) -> tuple[float, float]:
        return self.point


@dataclass(frozen=True)
class LineTo:
    point: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", _require_point(self.point, "point"))

    @property
    def end_point(self) -> tuple[float, float]:
        return self.point


@dataclass(frozen=True)
class ArcTo:
    """Circular arc; the current point is joined to ``start_point`` by the consumer."""

    center: tuple[float, float]
    radius: float
    start_angle_deg: float
    end_angle_deg: float
    clockwise: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", _require_point(self.center, "center"))
        radius = float(self.radius)
        if not math.isfinite(radius) or radius <= 0:
            raise ValueError("radius must be positive.")
        object.__setattr__(self, "radius", radius)
        object.__setattr__(self, "start_angle_deg", float(self.start_angle_deg))
        object.__setattr__(self, "end_angle_deg", float(self.end_angle_deg))
        object.__setattr__(self, "clockwise", bool(self.clockwise))

    def point_at(self, angle_deg: float) -> tuple[float, float]:
        theta = math.radians(angle_deg)
        return (
            self.center[0] + self.radius * math.cos(theta),
            self.center[1] + self.radius * math.sin(theta),
        )

    @property
    def start_point(self) -> tuple[float, float]:
        return self.point_at(self.start_angle_deg)

    @property
    def end_point(self) -> tuple[float, float]:
        return self.point_at(self.end_angle_deg)

    @property
    def sweep_deg(self) -> float:
        """Signed sweep in degrees; positive for clockwise arcs."""

        start = self.start_angle_deg
        end = self.end_angle_deg
        if self.clockwise:
            while end < start:
                end += 360.0
        else:
            while end > start:
                end -= 360.0
        return end - start

    @property
    def length(self) -> float:
        return abs(math.radians(self.sweep_deg)) * self.radius

    def sample(self, segments_per_circle: int) -> np.ndarray:
        if segments_per_circle < 3:
            raise ValueError("segments_per_circle must be >= 3.")
        sweep = self.sweep_deg
        steps = max(int(np.ceil(segments_per_circle * (abs(sweep) / 360.0))), 1) + 1
        angles = np.deg2rad(np.linspace(self.start_angle_deg, self.start_angle_deg + sweep, steps, endpoint=True))
        x = self.center[0] + self.radius * np.cos(angles)
        y = self.center[1] + self.radius * np.sin(angles)
        return np.column_stack([x, y])


PathSegment = Union[MoveTo, LineTo, ArcTo]


__all__ = [
    "ArcTo",
    "LineTo",
    "MoveTo",
    "PathSegment",
]
