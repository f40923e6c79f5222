"""Axis-aligned and oriented bounding boxes.

Vectors are float64 numpy arrays of shape (3,). Matrices are 4x4 arrays that
act on column vectors (``matrix @ vector``).
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

_DOUBLE_MAX = np.finfo(np.float64).max
# An empty box starts its maximum at the smallest positive double.
_DOUBLE_TINY = np.finfo(np.float64).tiny


def _vec3(value) -> np.ndarray:
    arr = np.array(value, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


@dataclass
class AABBox:
    """Axis-aligned bounding box given by its minimum and maximum corners."""

    min: np.ndarray = field(default_factory=lambda: np.full(3, _DOUBLE_MAX))
    max: np.ndarray = field(default_factory=lambda: np.full(3, _DOUBLE_TINY))

    def __post_init__(self) -> None:
        self.min = _vec3(self.min)
        self.max = _vec3(self.max)

    def center(self) -> np.ndarray:
        return (self.min + self.max) * 0.5

    def sizes(self) -> np.ndarray:
        return self.max - self.min

    def verts(self) -> np.ndarray:
        """The eight corners a..h as an (8, 3) array; a..d on the max-z face."""
        lo, hi = self.min, self.max
        return np.array(
            [
                (lo[0], lo[1], hi[2]),
                (hi[0], lo[1], hi[2]),
                (hi[0], hi[1], hi[2]),
                (lo[0], hi[1], hi[2]),
                (lo[0], lo[1], lo[2]),
                (hi[0], lo[1], lo[2]),
                (hi[0], hi[1], lo[2]),
                (lo[0], hi[1], lo[2]),
            ],
            dtype=np.float64,
        )


@dataclass
class OBBox:
    """Oriented bounding box stored as its eight corners a..h."""

    verts: np.ndarray

    def __post_init__(self) -> None:
        self.verts = np.array(self.verts, dtype=np.float64)
        if self.verts.shape != (8, 3):
            raise ValueError(f"expected 8 corners of 3 components, got shape {self.verts.shape}")

    def aabb(self) -> AABBox:
        """The smallest axis-aligned box holding every corner."""
        return AABBox(min=self.verts.min(axis=0), max=self.verts.max(axis=0))


def transform_aabb(transform, aabb: AABBox) -> OBBox:
    """Apply a 4x4 affine transform to every corner of an axis-aligned box."""
    matrix = np.asarray(transform, dtype=np.float64)
    if matrix.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
    corners = aabb.verts()
    homogeneous = np.hstack([corners, np.ones((8, 1))])
    moved = homogeneous @ matrix.T
    return OBBox(moved[:, :3])