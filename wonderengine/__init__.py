"""A small game engine core: bounding boxes, camera, meshes, textures, a scene graph and an engine loop."""

__version__ = "0.1.0"