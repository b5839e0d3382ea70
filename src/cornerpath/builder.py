from __future__ import annotations

from typing import NamedTuple

from cornerpath.geometry import Corner, Rect, RadiusSpec, coerce_corner_radii
from cornerpath.segments import ArcTo, LineTo, MoveTo, PathSegment


class _CornerFrame(NamedTuple):
    corner: Corner
    # Unit offsets from the vertex toward the rectangle interior.
    inward_x: float
    inward_y: float
    # The edge arriving at this corner runs along this axis.
    incoming_axis: str
    start_angle_deg: float


# Visited after the start point; top-left comes last to close the contour.
_TRAVERSAL = (
    _CornerFrame(Corner.TOP_RIGHT, -1.0, 1.0, "x", -90.0),
    _CornerFrame(Corner.BOTTOM_RIGHT, -1.0, -1.0, "y", 0.0),
    _CornerFrame(Corner.BOTTOM_LEFT, 1.0, -1.0, "x", 90.0),
    _CornerFrame(Corner.TOP_LEFT, 1.0, 1.0, "y", 180.0),
)


def _corner_segments(rect: Rect, frame: _CornerFrame, radius: float) -> list[PathSegment]:
    vx, vy = rect.vertex(frame.corner)
    if radius <= 0:
        return [LineTo((vx, vy))]

    if frame.incoming_axis == "x":
        tangent = (vx + frame.inward_x * radius, vy)
    else:
        tangent = (vx, vy + frame.inward_y * radius)
    center = (vx + frame.inward_x * radius, vy + frame.inward_y * radius)
    arc = ArcTo(
        center=center,
        radius=radius,
        start_angle_deg=frame.start_angle_deg,
        end_angle_deg=frame.start_angle_deg + 90.0,
        clockwise=True,
    )
    return [LineTo(tangent), arc]


def build_rounded_rect(rect: Rect, radii: RadiusSpec = None) -> list[PathSegment]:
    """Return the segments outlining ``rect`` with rounded corners.

    ``radii`` may be a :class:`~cornerpath.geometry.CornerRadii`, a mapping from
    :class:`~cornerpath.geometry.Corner` bitmasks to radii (first matching entry
    wins), a single number applied to every corner, or ``None``.

    The contour starts on the top edge, runs clockwise on a y-down canvas and
    ends where it started; no explicit close segment is emitted. Each radius is
    clamped to half of the rectangle's width and height.
    """

    corner_radii = coerce_corner_radii(radii)
    effective = corner_radii.effective_all(rect)

    top_left = effective[Corner.TOP_LEFT]
    if top_left > 0:
        start = (rect.min_x + top_left, rect.min_y)
    else:
        start = rect.origin

    segments: list[PathSegment] = [MoveTo(start)]
    for frame in _TRAVERSAL:
        segments.extend(_corner_segments(rect, frame, effective[frame.corner]))
    return segments


__all__ = ["build_rounded_rect"]
