"""Built-in primitive shapes: a cube in several vertex layouts and a sphere."""

from __future__ import annotations

import math
from enum import IntEnum

import numpy as np

from .bbox import AABBox

PI = 3.141592654

_TEXCOORDS = ((0, 1), (1, 1), (1, 0), (1, 0), (0, 0), (0, 1))

# Corner indices a..h for each face: front, back, left, right, top, bottom.
_QUADS = (
    (0, 1, 2, 3),
    (7, 6, 5, 4),
    (4, 0, 3, 7),
    (1, 5, 6, 2),
    (3, 2, 6, 7),
    (1, 0, 4, 5),
)

_EDGES = (0, 1, 1, 2, 2, 3, 3, 0, 4, 5, 5, 6, 6, 7, 7, 4, 1, 5, 6, 2, 0, 4, 7, 3)


class Shape(IntEnum):
    CUBE = 0
    SPHERE = 1
    CYLINDER = 2
    PLANE = 3


def quad_face_triangles(a, b, c, d) -> list[tuple[np.ndarray, tuple[int, int]]]:
    """Split the quad a-b-c-d into two textured triangles (a, b, c) and (c, d, a)."""
    corners = [np.asarray(p, dtype=np.float64) for p in (a, b, c, c, d, a)]
    return list(zip(corners, _TEXCOORDS))


class Cube:
    """Unit cube spanning -1..1 on every axis, with a colour per face."""

    NUM_FACES = 6
    NUM_TRIANGLES = NUM_FACES * 2
    NUM_VERTEXS = NUM_TRIANGLES * 3

    def __init__(self) -> None:
        self.corners = np.array(
            [
                (-1, -1, 1),
                (1, -1, 1),
                (1, 1, 1),
                (-1, 1, 1),
                (-1, -1, -1),
                (1, -1, -1),
                (1, 1, -1),
                (-1, 1, -1),
            ],
            dtype=np.float64,
        )
        self.a, self.b, self.c, self.d, self.e, self.f, self.g, self.h = self.corners
        self.red = np.array([1.0, 0.0, 0.0])
        self.green = np.array([0.0, 1.0, 0.0])
        self.blue = np.array([0.0, 0.0, 1.0])
        self.yellow = np.array([1.0, 1.0, 0.0])
        self.white = np.array([0.0, 1.0, 1.0])
        self.black = np.array([1.0, 0.0, 1.0])
        self.aabb = AABBox()

    def triangle_vertices(self) -> np.ndarray:
        """Positions of the 36 triangle vertices, six per face."""
        order = [i for p, q, r, s in _QUADS for i in (p, q, r, r, s, p)]
        return self.corners[order]

    def triangle_colors(self) -> np.ndarray:
        """One colour per triangle vertex, matching ``triangle_vertices``."""
        face_colors = (self.red, self.green, self.blue, self.yellow, self.white, self.black)
        return np.repeat(np.array(face_colors), 6, axis=0)

    def interleaved(self) -> np.ndarray:
        """Position and colour rows alternating, position first."""
        out = np.empty((self.NUM_VERTEXS * 2, 3))
        out[0::2] = self.triangle_vertices()
        out[1::2] = self.triangle_colors()
        return out

    def textured_triangles(self) -> list[tuple[np.ndarray, tuple[int, int]]]:
        """Every face as two textured triangles."""
        return [
            pair
            for quad in _QUADS
            for pair in quad_face_triangles(*(self.corners[i] for i in quad))
        ]

    def wireframe_indices(self) -> list[int]:
        """Pairs of corner indices for the twelve edges."""
        return list(_EDGES)


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class Sphere:
    """Triangle-strip vertex data for a sphere of latitude and longitude bands.

    Band latitudes use integer division of the band number, so the bands
    collapse towards the poles.
    """

    def __init__(self, radius=1, num_subdivisions=16) -> None:
        if num_subdivisions <= 0:
            raise ValueError("num_subdivisions must be positive")
        self.radius = radius
        self.num_subdivisions = num_subdivisions
        self.aabb = AABBox()
        self.vertices = np.array(self._build(), dtype=np.float32)

    def _build(self) -> list[float]:
        n, r = self.num_subdivisions, self.radius
        values: list[float] = []
        for i in range(n + 1):
            lat0 = PI * (-0.5 + _trunc_div(i - 1, n))
            z0, zr0 = r * math.sin(lat0), r * math.cos(lat0)
            lat1 = PI * (-0.5 + _trunc_div(i, n))
            z1, zr1 = r * math.sin(lat1), r * math.cos(lat1)
            for j in range(n + 1):
                lng = 2 * PI * (j - 1) / n
                x, y = math.cos(lng), math.sin(lng)
                values.extend((x * zr0, y * zr0, z0, x * zr1, y * zr1, z1))
        return values