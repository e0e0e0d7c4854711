"""A free-flying first-person camera and the matrices it needs."""

from __future__ import annotations

import math

import numpy as np

from blockcraft.input import KEY_A, KEY_D, KEY_S, KEY_W


def _normalize(v):
    return v / np.linalg.norm(v)


def look_at(eye, center, up):
    """Right-handed view matrix, row-major, applied as ``matrix @ column``."""
    eye = np.asarray(eye, dtype=np.float64)
    center = np.asarray(center, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -np.dot(s, eye)],
            [u[0], u[1], u[2], -np.dot(u, eye)],
            [-f[0], -f[1], -f[2], np.dot(f, eye)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def perspective(fovy, aspect, near, far):
    """Right-handed projection to clip depth -1..1; ``fovy`` is in radians."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


class Camera:
    """Camera steered with W/A/S/D and the mouse."""

    PITCH_LIMIT = 89.0

    def __init__(self, fov=45.0, aspect=800.0 / 600.0, near=0.1, far=100.0):
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far
        self.position = np.array([0.0, 0.0, 2.0])
        self.yaw = -90.0
        self.pitch = 0.0
        self.front = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.move_speed = 5.0
        self.mouse_sensitivity = 0.05
        self._update_vectors()

    def update(self, input, delta_time):
        """Move and turn according to the current input state."""
        velocity = self.move_speed * delta_time
        if input.is_key_pressed(KEY_W):
            self.position = self.position + self.front * velocity
        if input.is_key_pressed(KEY_S):
            self.position = self.position - self.front * velocity
        if input.is_key_pressed(KEY_A):
            self.position = self.position - _normalize(np.cross(self.front, self.up)) * velocity
        if input.is_key_pressed(KEY_D):
            self.position = self.position + _normalize(np.cross(self.front, self.up)) * velocity

        dx, dy = np.asarray(input.mouse_delta(), dtype=np.float64) * self.mouse_sensitivity
        self.yaw += float(dx)
        self.pitch -= float(dy)
        self.pitch = min(max(self.pitch, -self.PITCH_LIMIT), self.PITCH_LIMIT)

        self._update_vectors()

    def view_proj_matrix(self):
        """Return projection times view, row-major."""
        view = look_at(self.position, self.position + self.front, self.up)
        proj = perspective(math.radians(self.fov), self.aspect, self.near, self.far)
        return proj @ view

    def _update_vectors(self):
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = _normalize(front)