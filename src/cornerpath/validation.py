from __future__ import annotations

import math


class ValidationError(ValueError):
    """Raised when validation constraints are violated."""


class InvalidRectangle(ValidationError):
    """Raised for rectangles with negative or non-finite dimensions."""


class InvalidRadius(ValidationError):
    """Raised for negative, NaN, or non-numeric corner radii."""


def validate_rect_values(x: float, y: float, width: float, height: float) -> None:
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidRectangle("Rectangle origin must be finite.")
    if not (math.isfinite(width) and math.isfinite(height)):
        raise InvalidRectangle("Rectangle size must be finite.")
    if width < 0 or height < 0:
        raise InvalidRectangle(f"Rectangle size must be non-negative, got {width} x {height}.")
    if not (math.isfinite(x + width) and math.isfinite(y + height)):
        raise InvalidRectangle("Rectangle far edges must be finite.")


def validate_radius(value: object, label: str = "radius") -> float:
    try:
        radius = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidRadius(f"{label} must be a number.") from exc
    if math.isnan(radius):
        raise InvalidRadius(f"{label} must not be NaN.")
    if radius < 0:
        raise InvalidRadius(f"{label} must be non-negative, got {radius}.")
    return radius
