"""First-person camera: position, orientation from mouse look, and view/projection matrices."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum

import numpy as np

FOV_DEGREES = 60.0
NEAR_Z = 0.1
FAR_Z = 10000.0
MOVE_SPEED = 15.0
MOUSE_SENSITIVITY = 0.1
PITCH_LIMIT = 89.0


class Movement(Enum):
    """Directions the camera can be moved in from the keyboard."""

    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=np.float64).reshape(3)


def normalize(vector) -> np.ndarray:
    """Return the vector scaled to unit length; a zero vector raises ValueError."""
    v = np.asarray(vector, dtype=np.float64)
    length = float(np.linalg.norm(v))
    if length == 0.0 or not math.isfinite(length):
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]; fovy in radians."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must be non-zero")
    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from eye towards center."""
    eye = _vec3(eye)
    f = normalize(_vec3(center) - eye)
    s = normalize(np.cross(f, _vec3(up)))
    u = np.cross(s, f)
    m = np.identity(4, dtype=np.float64)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(s @ eye)
    m[1, 3] = -float(u @ eye)
    m[2, 3] = float(f @ eye)
    return m


class Camera:
    """A free-flying camera steered by mouse movement and moved by keys."""

    def __init__(self):
        self.position = np.array([0.0, 64.0, 1.0])
        self.front = np.array([0.0, -1.0, 0.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.near_z = NEAR_Z
        self.far_z = FAR_Z
        self.fov = FOV_DEGREES
        self.yaw = -90.0
        self.pitch = 0.0
        self.delta_time = 0.0
        self.last_frame = 0.0
        self._first_mouse = True
        self._last_x = 0.0
        self._last_y = 0.0

    def update(self, now: float) -> float:
        """Record the frame time `now` and return the time since the previous frame."""
        self.delta_time = now - self.last_frame
        self.last_frame = now
        return self.delta_time

    def keyboard_input(self, pressed: Iterable[Movement]) -> None:
        """Move the camera for each pressed direction, scaled by the frame time."""
        keys = set(pressed)
        speed = MOVE_SPEED * self.delta_time
        if Movement.FORWARD in keys:
            self.position = self.position + speed * self.front
        if Movement.BACKWARD in keys:
            self.position = self.position - speed * self.front
        if Movement.LEFT in keys or Movement.RIGHT in keys:
            side = np.cross(self.front, self.up)
            if np.linalg.norm(side) > 0:
                side = normalize(side)
                if Movement.LEFT in keys:
                    self.position = self.position - speed * side
                if Movement.RIGHT in keys:
                    self.position = self.position + speed * side

    def mouse_move(self, x: float, y: float) -> None:
        """Turn the camera from a new cursor position."""
        if self._first_mouse:
            self._last_x = x
            self._last_y = y
            self._first_mouse = False

        x_offset = (x - self._last_x) * MOUSE_SENSITIVITY
        y_offset = (self._last_y - y) * MOUSE_SENSITIVITY
        self._last_x = x
        self._last_y = y

        self.yaw += x_offset
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch + y_offset))

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.front = normalize(
            np.array(
                [
                    math.cos(yaw) * math.cos(pitch),
                    math.sin(pitch),
                    math.sin(yaw) * math.cos(pitch),
                ]
            )
        )

    def perspective_matrix(self, aspect: float) -> np.ndarray:
        """Projection matrix for a viewport of the given width/height ratio."""
        return perspective(math.radians(self.fov), aspect, self.near_z, self.far_z)

    def view_matrix(self) -> np.ndarray:
        """View matrix for the current position and direction."""
        return look_at(self.position, self.position + self.front, self.up)