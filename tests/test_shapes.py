import math

import pytest

from drawcore.shapes import Box, Circle, Line


def test_circle_vertices_count_and_center():
    circle = Circle(center=(1.0, 2.0, 0.0), radius=3.0, segments=16)
    fan = circle.vertices()
    assert len(fan) == 18
    assert fan[0] == (1.0, 2.0)


def test_circle_rim_points_at_radius():
    circle = Circle(center=(1.0, -2.0, 5.0), radius=2.5, segments=32)
    for x, y in circle.vertices()[1:]:
        assert math.hypot(x - 1.0, y + 2.0) == pytest.approx(2.5)


def test_circle_rim_closes():
    fan = Circle(center=(0.0, 0.0, 0.0), radius=1.0, segments=8).vertices()
    assert fan[1] == pytest.approx(fan[-1])
    assert fan[1] == pytest.approx((1.0, 0.0))


def test_circle_default_segment_count():
    assert len(Circle().vertices()) == Circle().segments + 2


def test_line_vertices():
    line = Line((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))
    assert line.vertices() == ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))


def test_box_faces_shape():
    box = Box((0.0, 0.0), (2.0, 3.0), 4.0)
    faces = box.faces()
    assert len(faces) == 6
    assert all(len(face) == 4 for face in faces)
    assert all(p[2] == 0.0 for p in faces[0])
    assert all(p[2] == 4.0 for p in faces[1])


def test_box_vertices_within_bounds():
    box = Box((-1.0, -2.0), (3.0, 5.0), 2.0)
    for face in box.faces():
        for x, y, z in face:
            assert x in (-1.0, 3.0)
            assert y in (-2.0, 5.0)
            assert z in (0.0, 2.0)


def test_box_edges_are_axis_aligned():
    box = Box((0.0, 0.0), (1.0, 2.0), 3.0)
    edges = box.edges()
    assert len(edges) == 12
    for a, b in edges:
        differing = sum(1 for u, v in zip(a, b) if u != v)
        assert differing == 1


def test_box_edges_unique():
    edges = Box().edges()
    assert len({frozenset(edge) for edge in edges}) == 12