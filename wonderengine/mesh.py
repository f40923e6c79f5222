"""Triangle meshes, their derived normal data and conversion to mesh DTOs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from .bbox import AABBox
from .mesh_dto import MeshDto, VertexV3T2
from .texture import Texture


class MeshFormat(IntEnum):
    """Vertex layouts: position only, position and colour, position and UV."""

    V3 = 0
    V3C4 = 1
    V3T2 = 2


def _float32_tuple(values, size: int) -> tuple[float, ...]:
    arr = np.asarray(values, dtype=np.float32).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(f"expected {size} components, got {arr.shape[0]}")
    return tuple(float(x) for x in arr)


@dataclass(frozen=True)
class V3T2:
    """A single-precision vertex position ``v`` with a texture coordinate ``t``."""

    v: tuple[float, float, float]
    t: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "v", _float32_tuple(self.v, 3))
        object.__setattr__(self, "t", _float32_tuple(self.t, 2))


def _empty3() -> np.ndarray:
    return np.empty((0, 3), dtype=np.float32)


def _as_points(values) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float32)
    if arr.size == 0:
        return _empty3()
    return arr.reshape(-1, 3)


def _bounds(points: np.ndarray) -> AABBox:
    box = AABBox()
    if len(points):
        wide = points.astype(np.float64)
        box.min = np.minimum(box.min, wide.min(axis=0))
        box.max = np.maximum(box.max, wide.max(axis=0))
    return box


class Mesh:
    """Vertex and index data of one mesh plus the per-vertex and per-face extras.

    ``vertex_data`` holds 3-component positions for ``MeshFormat.V3``,
    ``(position, rgba)`` pairs for ``MeshFormat.V3C4`` and ``V3T2`` items for
    ``MeshFormat.V3T2``.
    """

    def __init__(self, mesh_format, vertex_data, num_faces, index_data=None) -> None:
        self.format = MeshFormat(mesh_format)
        self.vertex_data = list(vertex_data)
        self.num_verts = len(self.vertex_data)
        self.num_faces = int(num_faces)
        self.index_data = None if index_data is None else [int(i) for i in index_data]
        self.num_indexs = 0 if self.index_data is None else len(self.index_data)
        self.aabb = _bounds(self._positions())

        self.texture: Texture | None = None
        self.checkboard = Texture()
        self.draw_checker = False

        self.mesh_verts = _empty3()
        self.mesh_verts_v3t2: list[V3T2] = []
        self.mesh_indices: list[int] = []
        self.mesh_norms = _empty3()
        self.mesh_face_centers = _empty3()
        self.mesh_face_norms = _empty3()

        self.draw_normals_verts = False
        self.draw_normals_faces = False
        self.normal_width = 1
        self.normal_length = 0.3

    def _positions(self) -> np.ndarray:
        if self.format is MeshFormat.V3:
            return _as_points(self.vertex_data)
        if self.format is MeshFormat.V3C4:
            return _as_points([position for position, _ in self.vertex_data])
        return _as_points([vertex.v for vertex in self.vertex_data])

    @property
    def active_texture(self) -> Texture:
        """The texture drawing binds: the mesh's own unless the checker is asked for."""
        if self.texture is not None and not self.draw_checker:
            return self.texture
        return self.checkboard

    def load_texture(self, texture_path) -> None:
        """Load an image file and make it this mesh's texture."""
        text = str(texture_path)
        resolved = os.path.join(os.path.dirname(text), os.path.basename(text))
        self.texture = Texture(resolved)

    def compute_face_data(self) -> None:
        """Fill face normals and face centres from ``mesh_verts`` and ``mesh_indices``."""
        if len(self.mesh_indices) % 3:
            raise ValueError("mesh indices do not form whole triangles")
        if not self.mesh_indices:
            self.mesh_face_norms = _empty3()
            self.mesh_face_centers = _empty3()
            return
        triangles = np.asarray(self.mesh_indices, dtype=np.int64).reshape(-1, 3)
        verts = np.asarray(self.mesh_verts, dtype=np.float32)
        if triangles.min() < 0 or triangles.max() >= len(verts):
            raise IndexError("mesh index out of range")
        v0, v1, v2 = verts[triangles[:, 0]], verts[triangles[:, 1]], verts[triangles[:, 2]]
        normals = np.cross(v1 - v0, v2 - v0)
        with np.errstate(invalid="ignore", divide="ignore"):
            normals = normals / np.linalg.norm(normals, axis=1, keepdims=True)
        self.mesh_face_norms = normals.astype(np.float32)
        self.mesh_face_centers = ((v0 + v1 + v2) / np.float32(3.0)).astype(np.float32)

    def vertex_normal_lines(self) -> np.ndarray:
        """Start and end points of each vertex normal, shape ``(n, 2, 3)``."""
        if not len(self.mesh_verts) or not len(self.mesh_norms):
            return np.empty((0, 2, 3), dtype=np.float32)
        return self._lines(self.mesh_verts, self.mesh_norms, self.num_verts)

    def face_normal_lines(self) -> np.ndarray:
        """Start and end points of each face normal, shape ``(n, 2, 3)``."""
        if not len(self.mesh_face_centers) or not len(self.mesh_face_norms):
            return np.empty((0, 2, 3), dtype=np.float32)
        return self._lines(self.mesh_face_centers, self.mesh_face_norms, self.num_faces)

    def _lines(self, starts, directions, count: int) -> np.ndarray:
        starts = np.asarray(starts, dtype=np.float32)
        directions = np.asarray(directions, dtype=np.float32)
        if len(starts) < count or len(directions) < count:
            raise ValueError("not enough normal data for the mesh")
        begin = starts[:count]
        end = begin + directions[:count] * np.float32(self.normal_length)
        return np.stack([begin, end], axis=1)

    def __repr__(self) -> str:
        return (
            f"Mesh(format={self.format.name}, verts={self.num_verts}, "
            f"faces={self.num_faces}, indexs={self.num_indexs})"
        )


def mesh_to_dto(mesh: Mesh) -> MeshDto:
    """Copy a mesh's positions, texture coordinates, indices and face count."""
    if len(mesh.mesh_verts) < mesh.num_verts or len(mesh.mesh_verts_v3t2) < mesh.num_verts:
        raise ValueError("mesh is missing per-vertex data")
    if len(mesh.mesh_indices) < mesh.num_indexs:
        raise ValueError("mesh is missing index data")
    vertices = [
        VertexV3T2(float(p[0]), float(p[1]), float(p[2]), vertex.t[0], vertex.t[1])
        for p, vertex in zip(mesh.mesh_verts[: mesh.num_verts], mesh.mesh_verts_v3t2)
    ]
    return MeshDto(vertices, list(mesh.mesh_indices[: mesh.num_indexs]), mesh.num_faces)


def dto_to_mesh(dto: MeshDto) -> Mesh:
    """Build a textured-vertex mesh from stored mesh data."""
    vertex_data = [V3T2((v.x, v.y, v.z), (v.s, v.t)) for v in dto.vertex_data]
    mesh = Mesh(MeshFormat.V3T2, vertex_data, dto.faces, dto.index_data)
    mesh.mesh_verts = _as_points([vertex.v for vertex in vertex_data])
    mesh.mesh_verts_v3t2 = list(vertex_data)
    mesh.mesh_indices = list(dto.index_data)
    return mesh