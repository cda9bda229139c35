import math

from drawcore.jigs import CircleJig, DragStatus, LineJig
from drawcore.shapes import Circle, Line


def test_circle_jig_cancels_with_zero_radius():
    jig = CircleJig((1.0, 2.0, 0.0))
    assert jig.sampler() is DragStatus.CANCEL


def test_circle_jig_radius_follows_point():
    jig = CircleJig((0.0, 0.0, 0.0))
    assert jig.acquire_point((3.0, 4.0, 0.0)) is DragStatus.NORMAL
    assert math.isclose(jig.circle.radius, 5.0)
    assert jig.sampler() is DragStatus.NORMAL


def test_circle_jig_keeps_center():
    jig = CircleJig((1.0, 2.0, 3.0))
    jig.acquire_point((7.0, 8.0, 9.0))
    assert jig.circle.center == (1.0, 2.0, 3.0)


def test_circle_jig_point_on_center_cancels():
    jig = CircleJig((1.0, 1.0, 0.0))
    jig.acquire_point((1.0, 1.0, 0.0))
    assert jig.sampler() is DragStatus.CANCEL


def test_circle_jig_preview_appends_circle():
    renders = []
    jig = CircleJig((0.0, 0.0, 0.0))
    assert jig.preview(renders) is True
    assert renders == [jig.circle]
    assert isinstance(renders[0], Circle)


def test_line_jig_cancels_until_moved():
    jig = LineJig((1.0, 2.0, 3.0))
    jig.acquire_point((1.0, 2.0, 3.0))
    assert jig.sampler() is DragStatus.CANCEL


def test_line_jig_near_points_count_as_equal():
    jig = LineJig((1.0, 2.0, 3.0))
    jig.acquire_point((1.000001, 2.000001, 3.000001))
    assert jig.sampler() is DragStatus.CANCEL


def test_line_jig_end_follows_point():
    jig = LineJig((0.0, 0.0, 0.0))
    assert jig.acquire_point((4.0, 5.0, 6.0)) is DragStatus.NORMAL
    assert jig.line.end == (4.0, 5.0, 6.0)
    assert jig.line.start == (0.0, 0.0, 0.0)
    assert jig.sampler() is DragStatus.NORMAL


def test_line_jig_preview_appends_line():
    renders = ["existing"]
    jig = LineJig((0.0, 0.0, 0.0))
    assert jig.preview(renders) is True
    assert renders[-1] is jig.line
    assert isinstance(renders[-1], Line)
    assert len(renders) == 2