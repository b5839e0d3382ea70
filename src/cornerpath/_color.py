from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
import pyvista as pv

COLOR_FIELD = "__cornerpath_color__"

RGBA = Tuple[float, float, float, float]


def _normalize_color(color: Sequence[float] | str) -> RGBA:
    if isinstance(color, str):
        col = pv.Color(color)
        r, g, b, a = (float(c) for c in col.float_rgba)
        return (r, g, b, a)

    arr = np.asarray(color, dtype=float).flatten()
    if arr.size not in (3, 4):
        raise ValueError("Color must be RGB or RGBA.")
    if arr.max() > 1.0:
        arr = arr / 255.0
    alpha = float(arr[3]) if arr.size == 4 else 1.0
    return (float(arr[0]), float(arr[1]), float(arr[2]), alpha)


def set_dataset_color(dataset: pv.PolyData, color: RGBA) -> pv.PolyData:
    dataset.field_data[COLOR_FIELD] = np.array(color, dtype=float)[np.newaxis, :]
    return dataset


def to_svg_color(color: RGBA | None) -> str:
    if color is None:
        return "none"
    r, g, b = (int(round(c * 255)) for c in color[:3])
    return f"#{r:02x}{g:02x}{b:02x}"
