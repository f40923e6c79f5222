"""Components that give a game object its transform, mesh and texture."""

from __future__ import annotations

import re
from enum import IntEnum

import numpy as np

from .bbox import AABBox


class ComponentType(IntEnum):
    TRANSFORM = 0
    MESH = 1
    TEXTURE = 2
    UNKNOWN = 3


def _name_from_path(owner, path, extension: str) -> str:
    """Build ``<stem>_<mesh component count>`` from a backslash-separated path."""
    match = re.fullmatch(r".*\\(.+)" + extension + "$", str(path))
    stem = match.group(1) if match else ""
    components = getattr(owner, "components", ()) if owner is not None else ()
    count = sum(1 for comp in components if comp.type is ComponentType.MESH)
    return f"{stem}_{count}"


class Component:
    """Base component: an owner, a type, an active flag, a name and a file path."""

    def __init__(self, owner=None, component_type=ComponentType.UNKNOWN) -> None:
        self.owner = owner
        self.type = ComponentType(component_type)
        self.active = True
        self.name = ""
        self.file_path = ""

    def enable(self) -> None:
        self.active = True

    def disable(self) -> None:
        self.active = False

    def update(self) -> bool:
        """Per-frame update; True means keep running."""
        return True

    def draw(self):
        """Base components have nothing to draw."""
        return None

    def extract_name(self, path) -> None:
        """Base components take no name from a path."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, active={self.active})"


class TransformComp(Component):
    """Position, rotation and scale of a game object."""

    def __init__(self, owner=None) -> None:
        super().__init__(owner, ComponentType.TRANSFORM)
        self.position = np.zeros(3)
        self.rotation = np.zeros(3)
        self.scale = np.ones(3)

    def transform_data(self) -> list[np.ndarray]:
        """Copies of position, rotation and scale, in that order."""
        return [self.position.copy(), self.rotation.copy(), self.scale.copy()]


class MeshComp(Component):
    """Holds the mesh a game object draws."""

    extension = ".fbx"

    def __init__(self, owner=None) -> None:
        super().__init__(owner, ComponentType.MESH)
        self.mesh = None
        self.aabb = AABBox()

    def set_mesh(self, mesh) -> None:
        self.mesh = mesh

    def draw(self):
        """Return the mesh to be drawn."""
        if self.mesh is None:
            raise ValueError("mesh component has no mesh to draw")
        return self.mesh

    def extract_name(self, path) -> None:
        self.name = _name_from_path(self.owner, path, self.extension)


class TextureComp(Component):
    """Holds the texture a game object uses."""

    extension = ".png"

    def __init__(self, owner=None) -> None:
        super().__init__(owner, ComponentType.TEXTURE)
        self.texture = None

    def set_texture(self, texture) -> None:
        """Use ``texture``, taking its name and path; None clears both."""
        self.texture = texture
        self.name = "" if texture is None else texture.name
        self.file_path = "" if texture is None else texture.path

    def extract_name(self, path) -> None:
        self.name = _name_from_path(self.owner, path, self.extension)