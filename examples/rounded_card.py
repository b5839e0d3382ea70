"""Rounded card outline example."""

from __future__ import annotations

from cornerpath import BezierPath, Corner, Rect


def build():
    card = Rect.from_center(size=(86.0, 54.0), center=(50.0, 40.0))
    radii = {Corner.TOP_LEFT | Corner.BOTTOM_RIGHT: 8.0, Corner.ALL: 3.0}
    return BezierPath.rounded_rect(card, radii, color="#5a7bff")


if __name__ == "__main__":
    path = build()
    for segment in path.segments:
        print(segment)
    print(path.to_svg_path_data(precision=2))
