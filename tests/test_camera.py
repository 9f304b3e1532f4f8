import math

import numpy as np
import pytest

from roninvox.camera import (
    PITCH,
    YAW,
    ZOOM,
    Camera,
    CameraMovement,
    look_at,
    ortho,
    perspective,
)


def _apply(matrix, point):
    result = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return result[:3] / result[3]


def test_defaults():
    camera = Camera()
    assert camera.yaw == YAW
    assert camera.pitch == PITCH
    assert camera.zoom == ZOOM


def test_basis_is_orthonormal():
    camera = Camera((1.0, 2.0, 3.0), yaw=30.0, pitch=20.0)
    for vector in (camera.front, camera.right, camera.up):
        assert np.linalg.norm(vector) == pytest.approx(1.0)
    assert np.dot(camera.front, camera.right) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(camera.front, camera.up) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(camera.right, camera.up) == pytest.approx(0.0, abs=1e-12)


def test_default_looks_down_negative_z():
    camera = Camera()
    assert camera.front[2] < 0.0
    assert abs(camera.front[0]) < 1e-9


def test_forward_then_backward_returns():
    camera = Camera((0.0, 0.0, 60.0))
    start = camera.position.copy()
    camera.process_keyboard(CameraMovement.FORWARD, 0.5)
    assert not np.allclose(camera.position, start)
    camera.process_keyboard(CameraMovement.BACKWARD, 0.5)
    np.testing.assert_allclose(camera.position, start)


def test_forward_moves_along_front_by_speed():
    camera = Camera()
    start = camera.position.copy()
    camera.process_keyboard(CameraMovement.FORWARD, 2.0)
    step = camera.position - start
    assert np.linalg.norm(step) == pytest.approx(camera.movement_speed * 2.0)
    assert np.dot(step, camera.front) > 0.0


def test_left_and_right_are_opposite():
    left, right = Camera(), Camera()
    left.process_keyboard(CameraMovement.LEFT, 1.0)
    right.process_keyboard(CameraMovement.RIGHT, 1.0)
    np.testing.assert_allclose(left.position, -right.position)
    assert np.dot(right.position, right.right) > 0.0


def test_mouse_movement_is_additive():
    once, twice = Camera(), Camera()
    once.process_mouse_movement(10.0, 4.0)
    twice.process_mouse_movement(5.0, 2.0)
    twice.process_mouse_movement(5.0, 2.0)
    assert once.yaw == pytest.approx(twice.yaw)
    assert once.pitch == pytest.approx(twice.pitch)
    np.testing.assert_allclose(once.front, twice.front)


@pytest.mark.parametrize("offset, limit", [(1e5, 89.0), (-1e5, -89.0)])
def test_pitch_is_clamped(offset, limit):
    camera = Camera()
    camera.process_mouse_movement(0.0, offset)
    assert camera.pitch == limit


def test_pitch_unconstrained():
    camera = Camera()
    camera.process_mouse_movement(0.0, 1e4, constrain_pitch=False)
    assert camera.pitch > 89.0


@pytest.mark.parametrize("offset, limit", [(1e3, 1.0), (-1e3, 100.0)])
def test_zoom_is_clamped(offset, limit):
    camera = Camera()
    camera.process_mouse_scroll(offset)
    assert camera.zoom == limit


def test_scroll_reduces_zoom():
    camera = Camera()
    camera.process_mouse_scroll(5.0)
    assert camera.zoom == pytest.approx(ZOOM - 5.0)


def test_view_matrix_moves_camera_to_origin():
    camera = Camera((3.0, -2.0, 60.0), yaw=10.0, pitch=5.0)
    view = camera.view_matrix()
    np.testing.assert_allclose(_apply(view, camera.position), (0.0, 0.0, 0.0), atol=1e-9)
    np.testing.assert_allclose(
        _apply(view, camera.position + camera.front), (0.0, 0.0, -1.0), atol=1e-9
    )


def test_look_at_rotation_is_orthonormal():
    matrix = look_at((1.0, 2.0, 3.0), (4.0, -1.0, 0.5), (0.0, 1.0, 0.0))
    rotation = matrix[:3, :3]
    np.testing.assert_allclose(rotation @ rotation.T, np.identity(3), atol=1e-12)
    np.testing.assert_allclose(matrix[3], (0.0, 0.0, 0.0, 1.0))


def test_perspective_maps_near_and_far_planes():
    near, far = 0.1, 200.0
    matrix = perspective(math.radians(40.0), 1080 / 720, near, far)
    assert _apply(matrix, (0.0, 0.0, -near))[2] == pytest.approx(-1.0)
    assert _apply(matrix, (0.0, 0.0, -far))[2] == pytest.approx(1.0)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 100.0)


def test_ortho_maps_box_to_unit_cube():
    matrix = ortho(-4.0, 2.0, -1.0, 3.0, -10.0, 10.0)
    np.testing.assert_allclose(_apply(matrix, (-4.0, -1.0, 10.0)), (-1.0, -1.0, -1.0))
    np.testing.assert_allclose(_apply(matrix, (2.0, 3.0, -10.0)), (1.0, 1.0, 1.0))


def test_ortho_rejects_degenerate_box():
    with pytest.raises(ValueError):
        ortho(1.0, 1.0, 0.0, 1.0, 0.0, 1.0)