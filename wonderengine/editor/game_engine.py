"""The editor module that owns the engine, reacts to input and collects logs."""

from __future__ import annotations

import re
import time
from enum import IntEnum

from ..components import ComponentType
from ..engine import WonderEngine
from .input import (
    BUTTON_LEFT,
    BUTTON_RIGHT,
    SCANCODE_A,
    SCANCODE_D,
    SCANCODE_F,
    SCANCODE_LALT,
    SCANCODE_LSHIFT,
    SCANCODE_S,
    SCANCODE_W,
    KeyState,
)
from .module import WINDOW_HEIGHT, WINDOW_WIDTH, Module, UpdateStatus
from ..camera import CameraDirection

FPS = 60
FRAME_TIME = 1.0 / FPS

_EXTENSION = re.compile(r".*\.(.+)")
_FILE_NAME = re.compile(r".*\\(.*)")


class FileType(IntEnum):
    FBX = 0
    PNG = 1
    NOTADMITTED = 2


_EXTENSIONS = {"fbx": FileType.FBX, "png": FileType.PNG}


def classify_dropped_file(path) -> FileType:
    """The kind of a dropped file, judged by its (case-sensitive) extension."""
    match = _EXTENSION.fullmatch(str(path))
    extension = match.group(1) if match else ""
    return _EXTENSIONS.get(extension, FileType.NOTADMITTED)


def _file_name(path) -> str:
    """The part after the last backslash, or an empty string."""
    match = _FILE_NAME.fullmatch(str(path))
    return match.group(1) if match else ""


class GameEngine(Module):
    """Runs the engine each frame, steers its camera and keeps the editor log."""

    def __init__(
        self,
        app=None,
        start_enabled=True,
        importer=None,
        library_dir="Library/Meshes",
        frame_time=FRAME_TIME,
    ) -> None:
        super().__init__(app, start_enabled)
        self.engine = WonderEngine(importer=importer, library_dir=library_dir)
        self.frame_time = frame_time
        self.frame_ratef = 0.0
        self.game_objects: list = []
        self.logs: list[str] = []

    @property
    def camera(self):
        return self.engine.renderer.camera

    def init(self) -> bool:
        self.add_log("Engine Initialization")
        try:
            ok = self.engine.init()
        except (OSError, ValueError) as exc:
            self.add_log(f"Engine initialization failed: {exc}")
            return False

        cam = self.camera
        cam.fov = 60
        cam.aspect = WINDOW_WIDTH / WINDOW_HEIGHT
        cam.z_near = 0.1
        cam.z_far = 100
        cam.eye = [5.0, 2.0, 5.0]
        cam.center = [0.0, 1.0, 0.0]
        cam.up = [0.0, 1.0, 0.0]
        cam.__post_init__()
        cam.compute_axis()
        return ok

    def update(self) -> UpdateStatus:
        self.game_objects = list(self.engine.scene.game_objects)
        return UpdateStatus.CONTINUE

    def post_update(self) -> UpdateStatus:
        """Steer the camera, run the engine, gather its logs and hold the frame rate."""
        start = time.monotonic_ns()
        self.detect_camera_input()
        self.engine.update()
        self.add_engine_logs_to_editor()

        remaining = self.frame_time - (time.monotonic_ns() - start) / 1e9
        if remaining > 0:
            time.sleep(remaining)
        self.frame_ratef = float(time.monotonic_ns() - start)
        return UpdateStatus.CONTINUE

    def _selected(self):
        ui = getattr(self.app, "ui", None)
        return getattr(ui, "selected_obj", None)

    def detect_camera_input(self) -> None:
        """Move the camera according to the keys and mouse buttons held this frame."""
        inp = getattr(self.app, "input", None)
        if inp is None:
            return
        cam = self.camera

        if inp.key(SCANCODE_LALT) is KeyState.REPEAT:
            left = inp.mouse_button(BUTTON_LEFT)
            if left is KeyState.DOWN:
                cam.reset_center(False, False)
            if left is KeyState.REPEAT:
                cam.mouse_rotate_around_object(inp.mouse_x, inp.mouse_y)
            if left is KeyState.UP:
                cam.compute_axis()
            return

        shift = inp.key(SCANCODE_LSHIFT)
        if shift is KeyState.DOWN:
            cam.camera_speed *= 3
        if shift is KeyState.UP:
            cam.camera_speed /= 3

        right = inp.mouse_button(BUTTON_RIGHT)
        if right is KeyState.DOWN:
            cam.reset_center(False, False)

        if right is KeyState.REPEAT:
            cam.mouse_point_look_at(inp.mouse_x, inp.mouse_y)
            moves = (
                (SCANCODE_A, CameraDirection.LEFT),
                (SCANCODE_W, CameraDirection.FORWARD),
                (SCANCODE_S, CameraDirection.BACKWARD),
                (SCANCODE_D, CameraDirection.RIGHT),
            )
            for key, direction in moves:
                if inp.key(key) is KeyState.REPEAT:
                    cam.fps_movement(direction)
            return

        moves = (
            (SCANCODE_A, CameraDirection.LEFT),
            (SCANCODE_W, CameraDirection.UP),
            (SCANCODE_S, CameraDirection.DOWN),
            (SCANCODE_D, CameraDirection.RIGHT),
        )
        for key, direction in moves:
            if inp.key(key) is KeyState.REPEAT:
                cam.camera_move(direction)

        if inp.key(SCANCODE_F) is KeyState.DOWN:
            selected = self._selected()
            if selected is not None:
                transform = selected.get_component(ComponentType.TRANSFORM)
                cam.reset_center(True, True, transform.position, False)
            else:
                cam.reset_center(True)

        if inp.mouse_wheel != 0:
            cam.camera_zoom(inp.mouse_wheel)

    def create_dropped_file(self, path) -> FileType:
        """Load a dropped mesh as a new object, or a texture onto the selected object."""
        path = str(path)
        file_type = classify_dropped_file(path)
        name = _file_name(path)

        if file_type is FileType.FBX:
            self.add_log("FBX DROPPED")
            self.engine.scene.create_game_object(path)
            self.add_log(f"Mesh with name: {name} loaded")
        elif file_type is FileType.PNG:
            self.add_log("PNG DROPPED")
            selected = self._selected()
            if selected is not None:
                self.engine.scene.change_texture_of_obj(selected, path)
                self.add_log(f"Texture with name: {name} loaded on object: {selected.name}")
            else:
                self.add_log(f"No GameObject selected, could not load texture from{name}")
        else:
            self.add_log("NOT ADMITTED FILE TYPE DROPPED")
        return file_type

    def add_engine_logs_to_editor(self) -> None:
        """Move the engine's pending log lines into the editor log."""
        self.logs.extend(self.engine.engine_log)
        self.engine.delete_engine_logs()

    def add_log(self, message) -> None:
        self.logs.append(str(message))

    def delete_log(self) -> None:
        self.logs.clear()

    def set_aspect_ratio(self, aspect) -> None:
        self.engine.change_aspect_ratio(aspect)

    def clean_up(self) -> bool:
        self.logs.clear()
        return True