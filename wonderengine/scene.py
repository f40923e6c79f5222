"""The scene: the game objects built from imported meshes."""

from __future__ import annotations

from pathlib import Path

from .components import ComponentType
from .game_object import GameObject
from .mesh import dto_to_mesh
from .mesh_dto import MeshDto, load_mesh, save_mesh

DEFAULT_MESH = "Assets/Default_House/BakerHouse.fbx"
DEFAULT_TEXTURE = "Assets/Default_House/Baker_house.png"
LIBRARY_FILE = "saveDto.wdr"


def _read_native(path) -> list[MeshDto]:
    """Read a mesh file stored in the engine's own binary format."""
    return [load_mesh(path)]


def split_mesh_path(mesh_path: str) -> tuple[str, str]:
    """Split a slash-separated mesh path into the object name and the file name.

    The object name is the file name without its last four characters.
    """
    slash = mesh_path.rfind("/")
    start = slash + 1
    count = len(mesh_path) - slash - 5
    mesh_name = mesh_path[start:] if count < 0 else mesh_path[start : start + count]
    return mesh_name, mesh_path[start:]


class Scene:
    """Holds the scene's game objects and builds new ones from mesh files.

    ``importer`` turns a mesh path into a list of ``MeshDto``; every imported
    mesh is stored in ``library_dir`` and read back before use.
    """

    def __init__(self, engine=None, importer=None, library_dir="Library/Meshes") -> None:
        self.engine = engine
        self.importer = importer or _read_native
        self.library_dir = Path(library_dir)
        self.default_mesh = DEFAULT_MESH
        self.default_texture = DEFAULT_TEXTURE
        self.game_objects: list[GameObject] = []
        self.draw_queue: list = []

    def start(self) -> bool:
        self.create_game_object(self.default_mesh, self.default_texture)
        return True

    def post_update(self) -> bool:
        """Queue every object's drawable components and bounding box for drawing."""
        self.draw_queue = [(obj.drawable_components(), obj.aabb()) for obj in self.game_objects]
        return True

    def clean_up(self) -> bool:
        self.game_objects.clear()
        return True

    def add_game_obj(self, game_obj: GameObject) -> None:
        self.game_objects.append(game_obj)

    def _through_library(self, dto: MeshDto) -> MeshDto:
        self.library_dir.mkdir(parents=True, exist_ok=True)
        stored = self.library_dir / LIBRARY_FILE
        save_mesh(stored, dto)
        return load_mesh(stored)

    def create_game_object(self, mesh_path="", texture_path="") -> GameObject:
        """Add an object with one child per mesh found at ``mesh_path``."""
        game_obj = GameObject()
        if mesh_path:
            mesh_path = str(mesh_path).replace("\\", "/")
            mesh_name, component_name = split_mesh_path(mesh_path)
            meshes = []
            for dto in self.importer(mesh_path):
                mesh = dto_to_mesh(self._through_library(dto))
                if texture_path:
                    mesh.load_texture(texture_path)
                meshes.append(mesh)

            for mesh in meshes:
                child = GameObject()
                game_obj.add_child(child)
                child.get_component(ComponentType.MESH).set_mesh(mesh)
                child.get_component(ComponentType.TEXTURE).set_texture(mesh.texture)
                child.name = mesh_name
                mesh_comp = child.get_component(ComponentType.MESH)
                mesh_comp.name = component_name
                mesh_comp.file_path = mesh_path

        game_obj.name = f"GameObject_{len(self.game_objects)}"
        self.add_game_obj(game_obj)
        return game_obj

    def change_texture_of_obj(self, game_obj: GameObject, path) -> None:
        """Load a new texture onto every mesh of ``game_obj``."""
        texture_comp = next(
            (c for c in game_obj.components if c.type is ComponentType.TEXTURE), None
        )
        if texture_comp is None:
            return
        for component in game_obj.components:
            if component.type is ComponentType.MESH:
                component.mesh.load_texture(path)
                texture_comp.set_texture(component.mesh.texture)