from __future__ import annotations

import numpy as np
import pytest

from cornerpath.segments import ArcTo, LineTo, MoveTo


def test_line_to_coerces_point():
    line = LineTo(point=np.array([1, 2]))
    assert line.point == (1.0, 2.0)
    assert line == LineTo((1.0, 2.0))


def test_move_to_invalid_coordinate():
    with pytest.raises(ValueError):
        MoveTo(point=(0, 0, 0))


def test_line_to_rejects_non_finite():
    with pytest.raises(ValueError):
        LineTo(point=(np.inf, 0))


def test_segments_are_hashable():
    assert len({LineTo((1, 1)), LineTo((1.0, 1.0)), MoveTo((1, 1))}) == 2


def test_arc_to_endpoints_on_canvas():
    arc = ArcTo(center=(0, 0), radius=2.0, start_angle_deg=-90, end_angle_deg=0)
    assert np.allclose(arc.start_point, [0.0, -2.0])
    assert np.allclose(arc.end_point, [2.0, 0.0])
    assert arc.sweep_deg == pytest.approx(90.0)


def test_arc_to_counterclockwise_sweep():
    arc = ArcTo(center=(0, 0), radius=1.0, start_angle_deg=0, end_angle_deg=90, clockwise=False)
    assert arc.sweep_deg == pytest.approx(-270.0)
    assert arc.length == pytest.approx(1.5 * np.pi)


def test_arc_to_sample_positive():
    arc = ArcTo(center=(1, 1), radius=1.0, start_angle_deg=180, end_angle_deg=270)
    pts = arc.sample(segments_per_circle=32)
    assert pts.shape == (9, 2)
    assert np.allclose(pts[0], [0.0, 1.0], atol=1e-9)
    assert np.allclose(pts[-1], [1.0, 0.0], atol=1e-9)
    assert np.allclose(np.linalg.norm(pts - 1.0, axis=1), 1.0)


def test_arc_to_sample_requires_resolution():
    arc = ArcTo(center=(0, 0), radius=1.0, start_angle_deg=0, end_angle_deg=90)
    with pytest.raises(ValueError):
        arc.sample(segments_per_circle=2)


@pytest.mark.parametrize("radius", [0.0, -1.0, np.nan])
def test_arc_to_invalid_radius(radius):
    with pytest.raises(ValueError):
        ArcTo(center=(0, 0), radius=radius, start_angle_deg=0, end_angle_deg=90)
