from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence, Tuple, Union

import numpy as np

from cornerpath.validation import InvalidRectangle, validate_radius, validate_rect_values


class Corner(enum.IntFlag):
    """Rectangle corners as a bitmask; one key may flag several corners."""

    TOP_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 8
    ALL = 15

    @classmethod
    def parse(cls, name: str) -> "Corner":
        """Resolve a corner name such as ``top-left``, ``tr`` or ``all``.

        Several names may be joined with ``+`` or ``,`` to build a combined flag.
        """

        flag = cls(0)
        parts = [part.strip() for part in name.replace(",", "+").split("+")]
        for part in parts:
            key = part.lower().replace("-", "_").replace(" ", "_")
            if key not in _CORNER_ALIASES:
                raise ValueError(f"Unknown corner name: {part!r}.")
            flag |= _CORNER_ALIASES[key]
        return flag


_CORNER_ALIASES = {
    "top_left": Corner.TOP_LEFT,
    "topleft": Corner.TOP_LEFT,
    "tl": Corner.TOP_LEFT,
    "top_right": Corner.TOP_RIGHT,
    "topright": Corner.TOP_RIGHT,
    "tr": Corner.TOP_RIGHT,
    "bottom_right": Corner.BOTTOM_RIGHT,
    "bottomright": Corner.BOTTOM_RIGHT,
    "br": Corner.BOTTOM_RIGHT,
    "bottom_left": Corner.BOTTOM_LEFT,
    "bottomleft": Corner.BOTTOM_LEFT,
    "bl": Corner.BOTTOM_LEFT,
    "all": Corner.ALL,
}

# Clockwise on a y-down canvas, starting at the top-left.
CORNER_ORDER: Tuple[Corner, Corner, Corner, Corner] = (
    Corner.TOP_LEFT,
    Corner.TOP_RIGHT,
    Corner.BOTTOM_RIGHT,
    Corner.BOTTOM_LEFT,
)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in canvas coordinates (y grows downward)."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        values = []
        for label in ("x", "y", "width", "height"):
            try:
                values.append(float(getattr(self, label)))
            except (TypeError, ValueError) as exc:
                raise InvalidRectangle(f"Rectangle {label} must be a number.") from exc
        validate_rect_values(*values)
        for label, value in zip(("x", "y", "width", "height"), values):
            object.__setattr__(self, label, value)

    @classmethod
    def from_center(
        cls,
        size: Sequence[float] = (1.0, 1.0),
        center: Sequence[float] = (0.0, 0.0),
    ) -> "Rect":
        sx, sy = float(size[0]), float(size[1])
        cx, cy = np.asarray(center, dtype=float).reshape(2)
        return cls(float(cx) - sx / 2.0, float(cy) - sy / 2.0, sx, sy)

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "Rect":
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def origin(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def vertex(self, corner: Corner) -> tuple[float, float]:
        if corner == Corner.TOP_LEFT:
            return (self.min_x, self.min_y)
        if corner == Corner.TOP_RIGHT:
            return (self.max_x, self.min_y)
        if corner == Corner.BOTTOM_RIGHT:
            return (self.max_x, self.max_y)
        if corner == Corner.BOTTOM_LEFT:
            return (self.min_x, self.max_y)
        raise ValueError(f"{corner!r} is not a single corner.")


RadiusKey = Union[Corner, int, str]


@dataclass(frozen=True)
class CornerRadii:
    """Optional radius per corner; ``None`` leaves the corner sharp."""

    top_left: float | None = None
    top_right: float | None = None
    bottom_right: float | None = None
    bottom_left: float | None = None

    def __post_init__(self) -> None:
        for field_name in ("top_left", "top_right", "bottom_right", "bottom_left"):
            value = getattr(self, field_name)
            if value is not None:
                object.__setattr__(self, field_name, validate_radius(value, field_name))

    @classmethod
    def uniform(cls, radius: float, corners: Corner = Corner.ALL) -> "CornerRadii":
        return cls.from_entries([(corners, radius)])

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[RadiusKey, float]]) -> "CornerRadii":
        """Resolve bitmask entries; the first entry flagging a corner wins.

        Keys that flag none of the four corners, and negative keys, are ignored.
        """

        resolved: dict[Corner, float] = {}
        for key, value in entries:
            mask = Corner.parse(key) if isinstance(key, str) else int(key)
            if mask < 0:
                continue
            mask &= Corner.ALL
            radius = validate_radius(value)
            for corner in CORNER_ORDER:
                if mask & corner and corner not in resolved:
                    resolved[corner] = radius
        return cls(
            top_left=resolved.get(Corner.TOP_LEFT),
            top_right=resolved.get(Corner.TOP_RIGHT),
            bottom_right=resolved.get(Corner.BOTTOM_RIGHT),
            bottom_left=resolved.get(Corner.BOTTOM_LEFT),
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[RadiusKey, float]) -> "CornerRadii":
        return cls.from_entries(mapping.items())

    def raw(self, corner: Corner) -> float | None:
        if corner == Corner.TOP_LEFT:
            return self.top_left
        if corner == Corner.TOP_RIGHT:
            return self.top_right
        if corner == Corner.BOTTOM_RIGHT:
            return self.bottom_right
        if corner == Corner.BOTTOM_LEFT:
            return self.bottom_left
        raise ValueError(f"{corner!r} is not a single corner.")

    def effective(self, corner: Corner, rect: Rect) -> float:
        """Radius actually drawn, clamped to half the rectangle's width and height."""

        raw = self.raw(corner)
        if raw is None:
            return 0.0
        return min(raw, rect.width / 2.0, rect.height / 2.0)

    def effective_all(self, rect: Rect) -> dict[Corner, float]:
        return {corner: self.effective(corner, rect) for corner in CORNER_ORDER}


RadiusSpec = Union[CornerRadii, Mapping[RadiusKey, float], float, int, None]


def coerce_corner_radii(radii: RadiusSpec) -> CornerRadii:
    if radii is None:
        return CornerRadii()
    if isinstance(radii, CornerRadii):
        return radii
    if isinstance(radii, Mapping):
        return CornerRadii.from_mapping(radii)
    if isinstance(radii, (int, float)) and not isinstance(radii, bool):
        return CornerRadii.uniform(float(radii))
    raise TypeError(f"Unsupported corner radius specification: {type(radii).__name__}.")


__all__ = [
    "CORNER_ORDER",
    "Corner",
    "CornerRadii",
    "RadiusSpec",
    "Rect",
    "coerce_corner_radii",
]
