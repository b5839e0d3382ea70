from __future__ import annotations

import math

import numpy as np
import pyvista as pv

from cornerpath._color import COLOR_FIELD
from cornerpath.segments import ArcTo, LineTo, MoveTo


def straight_runs(segments) -> list[float]:
    """Lengths of the LineTo segments, measured from the previous segment's end."""

    runs = []
    current = None
    for segment in segments:
        if isinstance(segment, LineTo) and current is not None:
            runs.append(math.dist(current, segment.point))
        current = segment.end_point
    return runs


def arcs(segments) -> list[ArcTo]:
    return [seg for seg in segments if isinstance(seg, ArcTo)]


def all_points(segments) -> list[tuple[float, float]]:
    points = []
    for segment in segments:
        if isinstance(segment, (MoveTo, LineTo)):
            points.append(segment.point)
        else:
            points.extend([segment.start_point, segment.end_point])
    return points


def dataset_color(dataset: pv.DataObject) -> tuple[float, ...] | None:
    if COLOR_FIELD not in dataset.field_data:
        return None
    rgba = np.array(dataset.field_data[COLOR_FIELD]).reshape(-1)
    if rgba.size < 4:
        return None
    return tuple(float(c) for c in rgba[:4])
