# wonderengine

The core of a small 3D game engine, with editor modules that drive it frame by
frame. Everything here computes state and geometry as numpy arrays; nothing is
drawn to a screen.

## What is in the package

- **Bounding boxes** (`wonderengine.bbox`). `AABBox` has `center`, `sizes` and
  `verts` (its eight corners). `OBBox` holds eight corners and gives back their
  `aabb`. `transform_aabb(transform, aabb)` applies a 4×4 matrix to every corner
  of a box.
- **Camera** (`wonderengine.camera`). `Camera` computes a look-at view matrix
  (`compute_look_at`) and supports panning (`camera_move`), fly-through
  movement (`fps_movement`), orbiting (`mouse_rotate_around_object`), mouse
  look (`mouse_point_look_at`), zoom (`camera_zoom`) and `reset_center`.
  Directions are given by `CameraDirection`.
- **Mesh file format** (`wonderengine.mesh_dto`). `MeshDto` holds `VertexV3T2`
  vertices (position and texture coordinate), triangle indices and a face
  count. `to_bytes` / `write` and `read_mesh_dto` convert it to and from a
  little-endian binary layout; `save_mesh` and `load_mesh` do the same with
  files. Truncated data raises `ValueError`.
- **Meshes** (`wonderengine.mesh`). `Mesh` stores vertex data in one of the
  `MeshFormat` layouts, its bounding box, face normals and centres
  (`compute_face_data`) and line segments for vertex and face normals.
  `mesh_to_dto` and `dto_to_mesh` convert between `Mesh` and `MeshDto`.
- **Textures** (`wonderengine.texture`). `Texture(path)` loads an image with
  Pillow; a file that cannot be read gives an empty 0×0 texture. `Texture()`
  with no path is a 100×100 checkerboard made by `checker_pixels`.
- **Primitives** (`wonderengine.primitives`). `Cube` gives its triangle
  vertices, per-face colours, interleaved data, textured triangles and
  wireframe edge indices. `Sphere` builds latitude/longitude band vertices.
- **Scene graph.** `GameObject` (`wonderengine.game_object`) carries
  `TransformComp`, `MeshComp` and `TextureComp` components
  (`wonderengine.components`) and has children; `aabb_outline` gives the line
  segments outlining a box. `GraphicObject` (`wonderengine.graphic_object`) is
  a transform hierarchy whose `paint(draw)` calls `draw(graphic, world_transform)`
  for every graphic in the tree. `Scene` (`wonderengine.scene`) holds game
  objects and builds new ones from mesh files.
- **Engine loop** (`wonderengine.engine`). `WonderEngine` runs its modules
  through init, start, pre-update, update, post-update and clean-up, and keeps
  an engine log. Its two modules are a `Renderer` (camera, projection and view
  matrices, `grid_lines`, `axis_lines`) and the scene.
- **Editor modules** (`wonderengine.editor`):
  - `module`: the `Module` base class and editor settings such as
    `WINDOW_WIDTH`, `WINDOW_HEIGHT` and `TITLE`;
  - `input`: `Input` tracks key and mouse-button `KeyState`s from the keys held
    each frame and `InputEvent`s; `next_key_state` gives one transition;
  - `window`: `Window` keeps the window size, viewport and the fullscreen and
    resizable settings;
  - `game_engine`: `GameEngine` owns a `WonderEngine`, steers its camera from
    `Input`, handles dropped `.fbx` and `.png` files (`classify_dropped_file`)
    and collects the log lines.

## Installation

```
pip install .
```

## Example

```python
from wonderengine.camera import Camera, CameraDirection
from wonderengine.mesh_dto import MeshDto, VertexV3T2, load_mesh, save_mesh

camera = Camera()
camera.compute_axis()
camera.camera_move(CameraDirection.LEFT)
view = camera.compute_look_at()

dto = MeshDto(
    vertex_data=[
        VertexV3T2(0.0, 0.0, 0.0, 0.0, 0.0),
        VertexV3T2(1.0, 0.0, 0.0, 1.0, 0.0),
        VertexV3T2(0.0, 1.0, 0.0, 0.0, 1.0),
    ],
    index_data=[0, 1, 2],
    faces=1,
)
save_mesh("triangle.wdr", dto)
assert load_mesh("triangle.wdr") == dto
```

## What the package does not do

- It has no command to start an editor and no application loop that ties the
  editor modules together; `Input`, `Window` and `GameEngine` are driven by
  calling their methods.
- It opens no window and draws nothing: there is no graphics output and no
  on-screen panels. The renderer, meshes and scene produce matrices, vertex
  data and line segments for a caller to draw.
- It does not read FBX or other model formats by itself. `Scene` reads meshes
  stored in its own binary format unless given an `importer` callable that
  turns a mesh path into a list of `MeshDto`.

## Tests

```
pip install .[test]
pytest
```