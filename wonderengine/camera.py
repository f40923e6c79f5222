"""A look-at camera with orbit, fly-through and pan controls."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np


class CameraDirection(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    FORWARD = 4
    BACKWARD = 5


def _vec3(value) -> np.ndarray:
    arr = np.array(value, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _rotation(angle: float, axis) -> np.ndarray:
    """3x3 right-handed rotation of ``angle`` radians about ``axis``."""
    x, y, z = _normalize(np.asarray(axis, dtype=np.float64))
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    return np.array(
        [
            [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
            [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
            [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
        ]
    )


@dataclass
class Camera:
    """Perspective camera looking from ``eye`` towards ``center``."""

    fov: float = 60.0
    aspect: float = 4.0 / 3.0
    z_near: float = 0.1
    z_far: float = 100.0
    eye: np.ndarray = field(default_factory=lambda: np.array([10.0, 2.0, 10.0]))
    center: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    x_axis: np.ndarray = field(default_factory=lambda: np.zeros(3))
    y_axis: np.ndarray = field(default_factory=lambda: np.zeros(3))
    z_axis: np.ndarray = field(default_factory=lambda: np.zeros(3))
    prev_mouse_x: int = 0
    prev_mouse_y: int = 0
    camera_speed: float = 0.1

    def __post_init__(self) -> None:
        for name in ("eye", "center", "up", "x_axis", "y_axis", "z_axis"):
            setattr(self, name, _vec3(getattr(self, name)))

    def compute_look_at(self) -> np.ndarray:
        """The 4x4 right-handed view matrix for the current eye, center and up."""
        f = _normalize(self.center - self.eye)
        s = _normalize(np.cross(f, self.up))
        u = np.cross(s, f)
        view = np.eye(4)
        view[0, :3] = s
        view[1, :3] = u
        view[2, :3] = -f
        view[0, 3] = -np.dot(s, self.eye)
        view[1, 3] = -np.dot(u, self.eye)
        view[2, 3] = np.dot(f, self.eye)
        return view

    def _translate(self, delta: np.ndarray) -> None:
        self.center = self.center + delta
        self.eye = self.eye + delta

    def camera_move(self, direction) -> None:
        """Pan the camera up, down, left or right; other directions are ignored."""
        self.compute_axis()
        moves = {
            CameraDirection.UP: -self.y_axis,
            CameraDirection.DOWN: self.y_axis,
            CameraDirection.LEFT: -self.x_axis,
            CameraDirection.RIGHT: self.x_axis,
        }
        delta = moves.get(direction)
        if delta is not None:
            self._translate(delta)

    def fps_movement(self, direction) -> None:
        """Fly forward, backward, left or right; other directions are ignored."""
        self.compute_axis()
        moves = {
            CameraDirection.FORWARD: -self.z_axis,
            CameraDirection.BACKWARD: self.z_axis,
            CameraDirection.LEFT: -self.x_axis,
            CameraDirection.RIGHT: self.x_axis,
        }
        delta = moves.get(direction)
        if delta is not None:
            self._translate(delta)

    def reset_center(
        self,
        fixed_pos=False,
        change_center=True,
        new_center=(0.0, 0.0, 0.0),
        reset_prev_mouse=True,
    ) -> None:
        if change_center:
            self.center = _vec3(new_center)
        if fixed_pos:
            self.eye = _normalize(self.eye) * 12
        if reset_prev_mouse:
            self.prev_mouse_x = 0
            self.prev_mouse_y = 0

    def mouse_rotate_around_object(self, x, y) -> None:
        """Orbit the eye around the center following the mouse."""
        if self.prev_mouse_x != 0 and self.prev_mouse_y != 0:
            angle_x = 0.01 * (x - self.prev_mouse_x)
            angle_y = 0.01 * (y - self.prev_mouse_y)
            self.rotate_camera_around_object(angle_y, -self.x_axis, angle_x, self.y_axis)
        self.prev_mouse_x = int(x)
        self.prev_mouse_y = int(y)
        self.compute_axis()

    def rotate_camera_around_object(self, angle_x, axis_x, angle_y, axis_y) -> None:
        """Rotate the eye about the center; the first rotation stops near the poles."""
        rotated = _rotation(angle_x, axis_x) @ (self.eye - self.center)
        height = _normalize(rotated + self.center)[1]
        if -0.99 <= height <= 0.99:
            self.eye = rotated + self.center

        rotated = _rotation(angle_y, axis_y) @ (self.eye - self.center)
        self.eye = rotated + self.center

    def mouse_point_look_at(self, x, y) -> None:
        """Turn the view direction following the mouse, keeping the eye in place."""
        if self.prev_mouse_x != 0 and self.prev_mouse_y != 0:
            angle_x = 0.01 * (x - self.prev_mouse_x)
            angle_y = 0.01 * (y - self.prev_mouse_y)
            self.rotate_camera_fps(angle_x, self.y_axis, angle_y, -self.x_axis)
        self.prev_mouse_x = int(x)
        self.prev_mouse_y = int(y)
        self.compute_axis()

    def rotate_camera_fps(self, angle_x, axis_x, angle_y, axis_y) -> None:
        """Rotate the center about the eye, first about ``axis_x`` then ``axis_y``."""
        self.center = _rotation(angle_x, axis_x) @ (self.center - self.eye) + self.eye
        self.center = _rotation(angle_y, axis_y) @ (self.center - self.eye) + self.eye

    def camera_zoom(self, zoom) -> None:
        """Move eye and center along the view axis by ``zoom`` steps."""
        self._translate(-self.z_axis * zoom)

    def compute_axis(self) -> None:
        """Recompute the camera axes, scaled by the camera speed."""
        z = _normalize(self.eye - self.center)
        x = _normalize(np.cross(self.up, z))
        y = _normalize(np.cross(x, z))
        self.z_axis = z * self.camera_speed * 2
        self.x_axis = x * self.camera_speed
        self.y_axis = y * self.camera_speed