import math

import numpy as np
import pytest

from blockcraft.camera import Camera, look_at, perspective
from blockcraft.input import KEY_A, KEY_D, KEY_S, KEY_W, Action, Input


def _pressed(*keys):
    state = Input()
    for key in keys:
        state.key_callback(key, 0, Action.PRESS, 0)
    return state


def test_initial_orientation():
    camera = Camera()
    np.testing.assert_allclose(camera.front, [0.0, 0.0, -1.0], atol=1e-9)
    np.testing.assert_allclose(camera.position, [0.0, 0.0, 2.0])


def test_forward_moves_along_front():
    camera = Camera()
    start = camera.position.copy()
    front = camera.front.copy()
    dt = 0.1
    camera.update(_pressed(KEY_W), dt)
    moved = camera.position - start
    assert np.linalg.norm(moved) == pytest.approx(camera.move_speed * dt)
    np.testing.assert_allclose(moved / np.linalg.norm(moved), front, atol=1e-9)


def test_forward_and_back_cancel():
    camera = Camera()
    start = camera.position.copy()
    camera.update(_pressed(KEY_W, KEY_S), 0.25)
    np.testing.assert_allclose(camera.position, start, atol=1e-9)


def test_strafe_is_perpendicular_to_front():
    camera = Camera()
    start = camera.position.copy()
    camera.update(_pressed(KEY_D), 0.2)
    moved = camera.position - start
    assert np.dot(moved, camera.front) == pytest.approx(0.0, abs=1e-9)
    camera.update(_pressed(KEY_A), 0.2)
    np.testing.assert_allclose(camera.position, start, atol=1e-9)


def test_mouse_turns_yaw():
    camera = Camera()
    state = Input()
    state.mouse_position_callback(100.0, 100.0)
    state.mouse_position_callback(120.0, 100.0)
    yaw_before = camera.yaw
    camera.update(state, 0.0)
    assert camera.yaw == pytest.approx(yaw_before + 20.0 * camera.mouse_sensitivity)
    assert np.linalg.norm(camera.front) == pytest.approx(1.0)


@pytest.mark.parametrize("dy, limit", [(-100000.0, 89.0), (100000.0, -89.0)])
def test_pitch_is_clamped(dy, limit):
    camera = Camera()
    state = Input()
    state.mouse_position_callback(500.0, 500.0)
    state.mouse_position_callback(500.0, 500.0 + dy)
    camera.update(state, 0.0)
    assert camera.pitch == pytest.approx(limit)


def test_view_proj_is_projection_times_view():
    camera = Camera(60.0, 1.5, 0.5, 50.0)
    expected = perspective(math.radians(60.0), 1.5, 0.5, 50.0) @ look_at(
        camera.position, camera.position + camera.front, camera.up
    )
    np.testing.assert_allclose(camera.view_proj_matrix(), expected)


def test_look_at_moves_eye_to_origin():
    eye = np.array([3.0, -2.0, 7.0])
    center = np.array([1.0, 4.0, -5.0])
    view = look_at(eye, center, [0.0, 1.0, 0.0])
    np.testing.assert_allclose(view @ np.append(eye, 1.0), [0.0, 0.0, 0.0, 1.0], atol=1e-9)
    distance = np.linalg.norm(center - eye)
    np.testing.assert_allclose(
        view @ np.append(center, 1.0), [0.0, 0.0, -distance, 1.0], atol=1e-9
    )


def test_look_at_rotation_is_orthonormal():
    view = look_at([1.0, 2.0, 3.0], [4.0, 0.0, -1.0], [0.0, 1.0, 0.0])
    rot = view[:3, :3]
    np.testing.assert_allclose(rot @ rot.T, np.eye(3), atol=1e-9)


def test_perspective_maps_near_and_far_planes():
    near, far = 0.1, 100.0
    proj = perspective(math.radians(45.0), 4.0 / 3.0, near, far)
    clip_near = proj @ np.array([0.0, 0.0, -near, 1.0])
    clip_far = proj @ np.array([0.0, 0.0, -far, 1.0])
    assert clip_near[2] / clip_near[3] == pytest.approx(-1.0)
    assert clip_far[2] / clip_far[3] == pytest.approx(1.0)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 100.0)


def test_perspective_rejects_equal_planes():
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 5.0, 5.0)