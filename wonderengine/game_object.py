"""Game objects: a named set of components arranged in a parent/child tree."""

from __future__ import annotations

import numpy as np

from .bbox import AABBox
from .components import (
    Component,
    ComponentType,
    MeshComp,
    TextureComp,
    TransformComp,
)

_COMPONENT_CLASSES = {
    ComponentType.TRANSFORM: TransformComp,
    ComponentType.MESH: MeshComp,
    ComponentType.TEXTURE: TextureComp,
}


class GameObject:
    """An object with transform, mesh and texture components and child objects."""

    def __init__(self, name: str = "defaultName") -> None:
        self.name = name
        self.components: list[Component] = []
        self.children: list[GameObject] = []
        self.parent: GameObject | None = None
        for component_type in (ComponentType.TRANSFORM, ComponentType.MESH, ComponentType.TEXTURE):
            self.create_component(component_type)

    def create_component(self, component_type) -> Component | None:
        """Add a component of the given type; unknown types add nothing."""
        cls = _COMPONENT_CLASSES.get(ComponentType(component_type))
        if cls is None:
            return None
        component = cls(self)
        self.components.append(component)
        return component

    def get_component(self, component_type) -> Component:
        """The first component of the given type."""
        wanted = ComponentType(component_type)
        for component in self.components:
            if component.type is wanted:
                return component
        raise KeyError(f"{self.name!r} has no {wanted.name} component")

    def add_child(self, child: GameObject) -> None:
        """Adopt ``child``, taking it from its old parent; this disables our components."""
        if child.parent is self:
            return
        if child.parent is not None:
            child.parent.remove_child(child)
        for component in self.components:
            component.disable()
        child.parent = self
        self.children.append(child)

    def remove_child(self, child: GameObject) -> None:
        self.children = [c for c in self.children if c is not child]
        child.parent = None

    def drawable_components(self) -> list[MeshComp]:
        """Active mesh components of the children, in child order."""
        return [
            component
            for child in self.children
            for component in child.components
            if component.type is ComponentType.MESH and component.active
        ]

    def aabb(self) -> AABBox:
        """Bounding box of this object's mesh joined with its children's boxes."""
        mesh_comp = self.get_component(ComponentType.MESH)
        box = AABBox()
        if mesh_comp.mesh is not None:
            box = AABBox(min=mesh_comp.aabb.min, max=mesh_comp.aabb.max)
        elif not self.children:
            box = AABBox(min=np.zeros(3), max=np.zeros(3))
        for child in self.children:
            child_box = child.get_component(ComponentType.MESH).aabb
            box.min = np.minimum(box.min, child_box.min)
            box.max = np.maximum(box.max, child_box.max)
        return box

    def __repr__(self) -> str:
        return f"GameObject(name={self.name!r}, children={len(self.children)})"


def aabb_outline(aabb: AABBox) -> tuple[np.ndarray, np.ndarray]:
    """Lines that outline a box.

    Returns a line strip over corners a, b, c, d, a, e, f, g, h, e as a
    (10, 3) array, and the remaining edges h-d, f-b, g-c as a (3, 2, 3) array.
    """
    corners = aabb.verts()
    strip = corners[[0, 1, 2, 3, 0, 4, 5, 6, 7, 4]]
    segments = corners[[[7, 3], [5, 1], [6, 2]]]
    return strip, segments