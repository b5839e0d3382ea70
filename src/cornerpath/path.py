from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

import numpy as np
import pyvista as pv

from cornerpath._color import RGBA, _normalize_color, set_dataset_color
from cornerpath.builder import build_rounded_rect
from cornerpath.geometry import Rect, RadiusSpec, coerce_corner_radii
from cornerpath.segments import ArcTo, LineTo, MoveTo, PathSegment


def _format_number(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _arc_extent(arc: ArcTo) -> list[tuple[float, float]]:
    """Endpoints plus any axis-aligned extremes crossed by the sweep."""

    points = [arc.start_point, arc.end_point]
    start = arc.start_angle_deg
    sweep = arc.sweep_deg
    lo, hi = sorted((start, start + sweep))
    first = math.ceil(lo / 90.0) * 90
    for angle in range(int(first), int(math.floor(hi)) + 1, 90):
        if lo <= angle <= hi:
            points.append(arc.point_at(float(angle)))
    return points


@dataclass
class BezierPath:
    """Owns an ordered segment sequence and replays it into concrete outputs."""

    segments: List[PathSegment] = field(default_factory=list)
    closed: bool = False
    color: RGBA | None = None
    metadata: dict[str, object] = field(default_factory=dict)

    @classmethod
    def from_segments(cls, segments: Iterable[PathSegment], closed: bool = True) -> "BezierPath":
        segs = list(segments)
        if not segs:
            raise ValueError("BezierPath requires at least one segment.")
        if not isinstance(segs[0], MoveTo):
            raise ValueError("BezierPath must start with a MoveTo segment.")
        for seg in segs:
            if not isinstance(seg, (MoveTo, LineTo, ArcTo)):
                raise TypeError(f"Unsupported path segment: {type(seg).__name__}.")
        return cls(segments=segs, closed=closed)

    @classmethod
    def rounded_rect(
        cls,
        rect: Rect,
        corner_radii: RadiusSpec = None,
        color: Sequence[float] | str | None = None,
    ) -> "BezierPath":
        radii = coerce_corner_radii(corner_radii)
        path = cls.from_segments(build_rounded_rect(rect, radii), closed=True)
        path.metadata["rect"] = rect
        path.metadata["corner_radii"] = {corner.name.lower(): r for corner, r in radii.effective_all(rect).items()}
        if color is not None:
            path.with_color(color)
        return path

    @property
    def start_point(self) -> tuple[float, float] | None:
        if not self.segments:
            return None
        first = self.segments[0]
        return first.start_point if isinstance(first, ArcTo) else first.point

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return ``(min_x, max_x, min_y, max_y)`` of the exact outline."""

        if not self.segments:
            return (0.0, 0.0, 0.0, 0.0)
        points: list[tuple[float, float]] = []
        for segment in self.segments:
            if isinstance(segment, ArcTo):
                points.extend(_arc_extent(segment))
            else:
                points.append(segment.point)
        arr = np.asarray(points, dtype=float)
        mins = arr.min(axis=0)
        maxs = arr.max(axis=0)
        return (float(mins[0]), float(maxs[0]), float(mins[1]), float(maxs[1]))

    def length(self) -> float:
        total = 0.0
        current: tuple[float, float] | None = None
        for segment in self.segments:
            if isinstance(segment, MoveTo):
                current = segment.point
                continue
            if isinstance(segment, ArcTo):
                if current is not None:
                    total += math.dist(current, segment.start_point)
                total += segment.length
                current = segment.end_point
                continue
            if current is not None:
                total += math.dist(current, segment.point)
            current = segment.point
        start = self.start_point
        if self.closed and current is not None and start is not None:
            total += math.dist(current, start)
        return total

    def sample(self, segments_per_circle: int = 64) -> np.ndarray:
        if not self.segments:
            return np.zeros((0, 2), dtype=float)
        points: list[np.ndarray] = []
        for segment in self.segments:
            if isinstance(segment, ArcTo):
                seg_points = segment.sample(segments_per_circle)
                if points and np.allclose(points[-1][-1], seg_points[0]):
                    seg_points = seg_points[1:]
            else:
                seg_points = np.asarray([segment.point], dtype=float)
            points.append(seg_points)
        pts = np.vstack(points)
        if self.closed and pts.shape[0] > 0 and not np.allclose(pts[0], pts[-1]):
            pts = np.vstack([pts, pts[0]])
        return pts

    def signed_area(self, segments_per_circle: int = 256) -> float:
        """Shoelace area of the sampled outline; positive when clockwise on a y-down canvas."""

        pts = self.sample(segments_per_circle=segments_per_circle)
        if pts.shape[0] < 3:
            return 0.0
        x = pts[:, 0]
        y = pts[:, 1]
        return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))

    def is_clockwise(self) -> bool:
        return self.signed_area() > 0

    def to_polyline(self, z: float = 0.0, segments_per_circle: int = 64) -> pv.PolyData:
        pts = self.sample(segments_per_circle=segments_per_circle)
        pts3 = np.column_stack([pts, np.full((pts.shape[0], 1), float(z))])
        n_pts = pts3.shape[0]
        cells = np.hstack(([n_pts], np.arange(n_pts)))
        polyline = pv.PolyData(pts3, lines=cells)
        if self.color is not None:
            set_dataset_color(polyline, self.color)
        return polyline

    def to_svg_path_data(self, precision: int = 4) -> str:
        def fmt(*values: float) -> str:
            return " ".join(_format_number(v, precision) for v in values)

        commands: list[str] = []
        current: tuple[float, float] | None = None
        for segment in self.segments:
            if isinstance(segment, MoveTo):
                commands.append(f"M {fmt(*segment.point)}")
                current = segment.point
            elif isinstance(segment, LineTo):
                commands.append(f"L {fmt(*segment.point)}")
                current = segment.point
            else:
                start = segment.start_point
                if current is None:
                    commands.append(f"M {fmt(*start)}")
                elif not np.allclose(current, start):
                    commands.append(f"L {fmt(*start)}")
                large_arc = 1 if abs(segment.sweep_deg) > 180.0 else 0
                sweep = 1 if segment.clockwise else 0
                end = segment.end_point
                commands.append(f"A {fmt(segment.radius, segment.radius)} 0 {large_arc} {sweep} {fmt(*end)}")
                current = end
        if self.closed and commands:
            commands.append("Z")
        return " ".join(commands)

    def with_color(self, color: Sequence[float] | str | None) -> "BezierPath":
        if color is None:
            self.color = None
            return self
        self.color = _normalize_color(color)
        return self


__all__ = ["BezierPath"]
