"""cornerpath – rounded-rectangle path construction."""

from __future__ import annotations

from .builder import build_rounded_rect
from .geometry import Corner, CornerRadii, Rect
from .path import BezierPath
from .segments import ArcTo, LineTo, MoveTo, PathSegment
from .validation import InvalidRadius, InvalidRectangle, ValidationError

__all__ = [
    "__version__",
    "ArcTo",
    "BezierPath",
    "Corner",
    "CornerRadii",
    "InvalidRadius",
    "InvalidRectangle",
    "LineTo",
    "MoveTo",
    "PathSegment",
    "Rect",
    "ValidationError",
    "build_rounded_rect",
]

__version__ = "0.1.0"
