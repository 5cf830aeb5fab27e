import numpy as np
import pytest

from wire import InteractiveWire, control_points, cubic_bezier, sag_amount


def test_horizontal_wire_controls():
    start, end = (0, 0), (100, 0)
    assert sag_amount(start, end) == 50.0
    c1, c2 = control_points(start, end)
    assert c1 == (0.0, 50.0)
    assert c2 == (100.0, -50.0)


def test_sag_grows_with_horizontal_span():
    assert sag_amount((0, 0), (0, 300)) == 50.0
    assert sag_amount((0, 0), (400, 0)) == 250.0
    assert sag_amount((400, 0), (0, 0)) == 250.0


def test_path_endpoints_are_exact():
    wire = InteractiveWire((0, 0), (100, 0))
    pts = wire.path(32)
    assert pts.shape == (33, 2)
    assert tuple(pts[0]) == (0.0, 0.0)
    assert tuple(pts[-1]) == (100.0, 0.0)
    # symmetric controls put t=0.5 on the chord midpoint
    assert pts[16] == pytest.approx([50.0, 0.0])


def test_path_endpoints_exact_for_awkward_values():
    start, end = (0.1, 0.7), (123.456, 987.654)
    pts = InteractiveWire(start, end).path(7)
    assert tuple(pts[0]) == start
    assert tuple(pts[-1]) == end


def test_cubic_bezier_matches_closed_form():
    p0, c1, c2, p3 = (0, 0), (0, 50), (100, -50), (100, 0)
    t = 0.25
    expect = (
        (1 - t) ** 3 * np.array(p0)
        + 3 * (1 - t) ** 2 * t * np.array(c1)
        + 3 * (1 - t) * t ** 2 * np.array(c2)
        + t ** 3 * np.array(p3)
    )
    pts = cubic_bezier(p0, c1, c2, p3, 4)
    assert pts[1] == pytest.approx(expect)


def test_polyline_is_int32_for_opencv():
    poly = InteractiveWire((10, 20), (200, 300)).polyline(16)
    assert poly.dtype == np.int32
    assert poly.shape == (17, 2)
    assert tuple(poly[0]) == (10, 20)
    assert tuple(poly[-1]) == (200, 300)
