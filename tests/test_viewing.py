import math

import numpy as np
import pytest

from drawcore.viewing import (
    DEFAULT_ZOOM,
    Camera,
    ViewportType,
    calculate_ray,
    camera_position,
    grid_xy_lines,
    look_at,
    matrix_from_gl,
    perspective,
    ray_intersects_sphere,
)


def test_camera_position_preset_without_zoom():
    assert camera_position(ViewportType.TL, 0.0) == pytest.approx((-1.0, 1.0, 1.0))
    assert camera_position(ViewportType.BR, 0.0) == pytest.approx((10.0, -1.0, 1.0))


@pytest.mark.parametrize(
    "vtype", [t for t in ViewportType if t is not ViewportType.TMM]
)
def test_camera_zoom_pushes_along_direction(vtype):
    base = np.array(camera_position(vtype, 0.0))
    zoomed = np.array(camera_position(vtype, 7.5))
    assert np.linalg.norm(zoomed) == pytest.approx(np.linalg.norm(base) + 7.5)
    assert np.allclose(
        zoomed / np.linalg.norm(zoomed), base / np.linalg.norm(base)
    )


def test_top_down_preset_ignores_zoom():
    assert camera_position(ViewportType.TMM, 30.0) == (0.0, 0.0, 1.0)


def test_perspective_maps_near_and_far_planes():
    near, far = 0.1, 100.0
    p = perspective(math.radians(45.0), 1.5, near, far)
    at_near = p @ np.array([0.0, 0.0, -near, 1.0])
    at_far = p @ np.array([0.0, 0.0, -far, 1.0])
    assert at_near[2] / at_near[3] == pytest.approx(-1.0)
    assert at_far[2] / at_far[3] == pytest.approx(1.0)
    assert p[1, 1] / p[0, 0] == pytest.approx(1.5)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 100.0)


def test_look_at_moves_eye_to_origin_and_target_ahead():
    eye = (3.0, -2.0, 5.0)
    v = look_at(eye, (0.0, 0.0, 0.0), (0.0, 0.0, 1.0))
    assert np.allclose(v @ np.array([*eye, 1.0]), [0.0, 0.0, 0.0, 1.0])
    target = v @ np.array([0.0, 0.0, 0.0, 1.0])
    assert target[:2] == pytest.approx([0.0, 0.0], abs=1e-9)
    assert target[2] == pytest.approx(-np.linalg.norm(eye))
    rotation = v[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))


def test_look_at_rejects_parallel_up():
    with pytest.raises(ValueError):
        look_at((0.0, 0.0, 5.0), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0))


def test_look_at_rejects_eye_on_target():
    with pytest.raises(ValueError):
        look_at((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 0.0, 1.0))


def test_matrix_from_gl_is_column_major():
    m = matrix_from_gl(list(range(16)))
    assert m[1, 0] == 1.0
    assert m[0, 1] == 4.0
    assert m[3, 2] == 11.0


def test_matrix_from_gl_round_trip_with_look_at():
    v = look_at((1.0, 2.0, 3.0), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0))
    assert np.allclose(matrix_from_gl(v.T.flatten()), v)


def test_matrix_from_gl_needs_sixteen_values():
    with pytest.raises(ValueError):
        matrix_from_gl([1.0] * 15)


def test_calculate_ray_center_pixel_points_at_target():
    eye = (0.0, 0.0, 5.0)
    view = look_at(eye, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    proj = perspective(math.radians(45.0), 1.0, 0.1, 100.0)
    origin, direction = calculate_ray(50, 50, 100, 100, view, proj)
    assert origin == pytest.approx(eye, abs=1e-9)
    assert direction == pytest.approx([0.0, 0.0, -1.0], abs=1e-9)
    assert np.linalg.norm(direction) == pytest.approx(1.0)


def test_calculate_ray_rejects_empty_screen():
    with pytest.raises(ValueError):
        calculate_ray(0, 0, 0, 100, np.identity(4), np.identity(4))


def test_ray_hits_sphere_at_near_side():
    t = ray_intersects_sphere((0.0, 0.0, -5.0), (0.0, 0.0, 1.0), (0.0, 0.0, 0.0), 1.0)
    assert t == pytest.approx(4.0)


def test_ray_misses_sphere():
    assert (
        ray_intersects_sphere((0.0, 3.0, -5.0), (0.0, 0.0, 1.0), (0.0, 0.0, 0.0), 1.0)
        is None
    )


def test_grid_lines_count_and_axes():
    lines = grid_xy_lines(2.0, 1.0)
    assert len(lines) == 4 * 2 + 2
    assert lines[-2] == ((-2.0, 0.0, 0.0), (2.0, 0.0, 0.0))
    assert lines[-1] == ((0.0, -2.0, 0.0), (0.0, 2.0, 0.0))
    assert all(p[2] == 0.0 for seg in lines for p in seg)


def test_grid_rejects_nonpositive_step():
    with pytest.raises(ValueError):
        grid_xy_lines(10.0, 0.0)


def test_camera_setup_places_camera_and_view():
    cam = Camera(ViewportType.TL)
    view, proj = cam.setup(800, 600)
    assert cam.position == pytest.approx(camera_position(ViewportType.TL, DEFAULT_ZOOM))
    assert np.allclose(view @ np.array([*cam.position, 1.0]), [0.0, 0.0, 0.0, 1.0])
    assert proj[1, 1] / proj[0, 0] == pytest.approx(800 / 600)


def test_camera_top_down_setup_keeps_matrices():
    cam = Camera(ViewportType.TMM)
    view, proj = cam.setup(800, 600)
    assert cam.position == (0.0, 0.0, 1.0)
    assert np.array_equal(view, np.identity(4))
    assert np.array_equal(proj, np.identity(4))


def test_camera_bottom_preset_has_degenerate_view():
    cam = Camera(ViewportType.BMM)
    with pytest.raises(ValueError):
        cam.setup(800, 600)


def test_camera_zero_height_rejected():
    with pytest.raises(ValueError):
        Camera().projection_matrix(800, 0)


def test_camera_move_shifts_xy_only():
    cam = Camera(ViewportType.TM)
    cam.setup(100, 100)
    x, y, z = cam.position
    assert cam.move(2.0, -3.0) == pytest.approx((x + 2.0, y - 3.0, z))


def test_camera_zoom_steps_and_reset():
    cam = Camera()
    assert cam.zoom(120) == DEFAULT_ZOOM - 1.0
    assert cam.zoom(-120) == DEFAULT_ZOOM
    assert cam.zoom(0) == DEFAULT_ZOOM + 1.0
    cam.set_viewport(ViewportType.MR)
    assert cam.zoom_factor == DEFAULT_ZOOM
    assert cam.viewport_type is ViewportType.MR