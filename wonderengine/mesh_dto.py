"""Plain mesh data and its binary file format.

Layout, little-endian: vertex count (u64), vertices as five float32 each
(x, y, z, s, t), index count (u64), indices (u32 each), face count (u32).
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO

_COUNT = struct.Struct("<Q")
_VERTEX = struct.Struct("<5f")
_UINT = struct.Struct("<I")


@dataclass(frozen=True)
class VertexV3T2:
    """A vertex position with a 2D texture coordinate."""

    x: float
    y: float
    z: float
    s: float
    t: float


@dataclass
class MeshDto:
    """Mesh vertices, triangle indices and face count, ready to store."""

    vertex_data: list[VertexV3T2] = field(default_factory=list)
    index_data: list[int] = field(default_factory=list)
    faces: int = 0

    def to_bytes(self) -> bytes:
        try:
            parts = [_COUNT.pack(len(self.vertex_data))]
            parts.extend(_VERTEX.pack(v.x, v.y, v.z, v.s, v.t) for v in self.vertex_data)
            parts.append(_COUNT.pack(len(self.index_data)))
            parts.extend(_UINT.pack(i) for i in self.index_data)
            parts.append(_UINT.pack(self.faces))
        except struct.error as exc:
            raise ValueError(f"mesh data does not fit the file format: {exc}") from exc
        return b"".join(parts)

    def write(self, stream: BinaryIO) -> None:
        stream.write(self.to_bytes())


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ValueError(f"truncated mesh data: wanted {size} bytes, got {len(data)}")
    return data


def read_mesh_dto(stream: BinaryIO) -> MeshDto:
    """Read one mesh from a binary stream."""
    (vertex_count,) = _COUNT.unpack(_read_exact(stream, _COUNT.size))
    raw = _read_exact(stream, vertex_count * _VERTEX.size)
    vertices = [VertexV3T2(*values) for values in _VERTEX.iter_unpack(raw)]

    (index_count,) = _COUNT.unpack(_read_exact(stream, _COUNT.size))
    raw = _read_exact(stream, index_count * _UINT.size)
    indices = [value for (value,) in _UINT.iter_unpack(raw)]

    (faces,) = _UINT.unpack(_read_exact(stream, _UINT.size))
    return MeshDto(vertices, indices, faces)


def save_mesh(path, dto: MeshDto) -> None:
    with open(path, "wb") as stream:
        dto.write(stream)


def load_mesh(path) -> MeshDto:
    with open(path, "rb") as stream:
        return read_mesh_dto(stream)