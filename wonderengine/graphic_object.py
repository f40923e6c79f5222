"""A tree of transformed drawable objects."""

from __future__ import annotations

import math

import numpy as np


def _rotation4(angle: float, axis) -> np.ndarray:
    axis = np.asarray(axis, dtype=np.float64)
    norm = np.linalg.norm(axis)
    if axis.shape != (3,) or norm == 0:
        raise ValueError("rotation axis must be a non-zero 3-component vector")
    x, y, z = axis / norm
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    matrix = np.eye(4)
    matrix[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return matrix


class GraphicObject:
    """A node holding a local 4x4 transform, an optional graphic and children."""

    def __init__(self, graphic=None) -> None:
        self.transform = np.eye(4)
        self.graphic = graphic
        self.parent: GraphicObject | None = None
        self._children: dict[GraphicObject, None] = {}

    @property
    def children(self) -> tuple[GraphicObject, ...]:
        return tuple(self._children)

    def pos(self) -> np.ndarray:
        """A writable view of the translation part of the current transform."""
        return self.transform[:3, 3]

    def rotate(self, rads, axis) -> None:
        """Rotate in local space by ``rads`` radians about ``axis``."""
        self.transform = self.transform @ _rotation4(rads, axis)

    def paint(self, draw) -> None:
        """Call ``draw(graphic, world_transform)`` for every graphic in the tree."""
        self._paint(draw, np.eye(4))

    def _paint(self, draw, parent_transform: np.ndarray) -> None:
        world = parent_transform @ self.transform
        if self.graphic is not None:
            draw(self.graphic, world)
        for child in self._children:
            child._paint(draw, world)

    def add_child(self, child: GraphicObject) -> None:
        if child.parent is self:
            return
        if child.parent is not None:
            child.parent.remove_child(child)
        self._children[child] = None
        child.parent = self

    def remove_child(self, child: GraphicObject) -> bool:
        """Drop ``child``; returns whether it was one of ours."""
        if child in self._children:
            del self._children[child]
            child.parent = None
            return True
        return False

    def detach(self) -> None:
        """Leave the parent and release every child."""
        if self.parent is not None:
            self.parent.remove_child(self)
        for child in self._children:
            child.parent = None
        self._children.clear()