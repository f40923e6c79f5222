"""The engine core: engine modules, the renderer and the module loop."""

from __future__ import annotations

import math
from enum import IntEnum
from operator import methodcaller

import numpy as np

from .camera import Camera
from .scene import Scene

GRID_SIZE = 100
GRID_STEP = 1
AXIS_LENGTH = 0.8


class UpdateStatus(IntEnum):
    CONTINUE = 1
    STOP = 2
    ERROR = 3


class EngineModule:
    """A part of the engine driven through init, start, the update phases and clean up."""

    def __init__(self, engine=None, start_enabled=True) -> None:
        self.engine = engine
        self.enabled = start_enabled

    def init(self) -> bool:
        return True

    def start(self) -> bool:
        return True

    def pre_update(self) -> UpdateStatus:
        return UpdateStatus.CONTINUE

    def update(self) -> UpdateStatus:
        return UpdateStatus.CONTINUE

    def post_update(self) -> UpdateStatus:
        return UpdateStatus.CONTINUE

    def clean_up(self) -> bool:
        return True


def _perspective(fov_degrees: float, aspect: float, z_near: float, z_far: float) -> np.ndarray:
    """A 4x4 perspective projection with a vertical field of view in degrees."""
    f = 1.0 / math.tan(math.radians(fov_degrees) / 2.0)
    projection = np.zeros((4, 4))
    projection[0, 0] = f / aspect
    projection[1, 1] = f
    projection[2, 2] = (z_far + z_near) / (z_near - z_far)
    projection[2, 3] = 2.0 * z_far * z_near / (z_near - z_far)
    projection[3, 2] = -1.0
    return projection


def grid_lines(grid_size, grid_step) -> np.ndarray:
    """Grid lines on the XY and XZ planes as an ``(n, 2, 3)`` array of segments.

    For every coordinate ``i`` from ``-grid_size`` to ``grid_size`` the four
    lines are: along y at x=i, along x at y=i (both on z=0), then along z at
    x=i and along x at z=i (both on y=0).
    """
    if grid_step <= 0:
        raise ValueError("grid_step must be positive")
    coords = np.arange(-grid_size, grid_size + 1, grid_step, dtype=np.float64)
    zero = np.zeros_like(coords)
    low = np.full_like(coords, -float(grid_size))
    high = np.full_like(coords, float(grid_size))

    def points(edge: np.ndarray) -> np.ndarray:
        return np.stack(
            [
                np.stack([coords, edge, zero], axis=1),
                np.stack([edge, coords, zero], axis=1),
                np.stack([coords, zero, edge], axis=1),
                np.stack([edge, zero, coords], axis=1),
            ],
            axis=1,
        )

    return np.stack([points(low), points(high)], axis=2).reshape(-1, 2, 3)


def axis_lines() -> list[tuple[tuple[int, int, int], np.ndarray]]:
    """The x, y and z axis markers as ``(rgb colour, (2, 3) segment)`` pairs."""
    colours = ((255, 0, 0), (0, 255, 0), (0, 0, 1))
    return [
        (colour, np.array([np.zeros(3), np.eye(3)[axis] * AXIS_LENGTH]))
        for axis, colour in enumerate(colours)
    ]


class Renderer(EngineModule):
    """Holds the camera and prepares the projection, view, grid and axes each frame."""

    def __init__(self, engine=None, start_enabled=True) -> None:
        super().__init__(engine, start_enabled)
        self.camera = Camera()
        self.projection = np.eye(4)
        self.view = np.eye(4)
        self.grid = grid_lines(GRID_SIZE, GRID_STEP)
        self.axis = axis_lines()

    def post_update(self) -> UpdateStatus:
        cam = self.camera
        self.projection = _perspective(cam.fov, cam.aspect, cam.z_near, cam.z_far)
        self.view = cam.compute_look_at()
        return UpdateStatus.CONTINUE


class _SceneModule(EngineModule):
    """Drives a scene as one of the engine's modules."""

    def __init__(self, engine, scene: Scene) -> None:
        super().__init__(engine)
        self.scene = scene

    def start(self) -> bool:
        return self.scene.start()

    def post_update(self) -> UpdateStatus:
        return UpdateStatus.CONTINUE if self.scene.post_update() else UpdateStatus.STOP

    def clean_up(self) -> bool:
        return self.scene.clean_up()


_PHASES = (methodcaller("pre_update"), methodcaller("update"), methodcaller("post_update"))


class WonderEngine:
    """Owns the renderer and the scene and runs them through each phase in order."""

    def __init__(self, importer=None, library_dir="Library/Meshes") -> None:
        self.renderer = Renderer(self)
        self.scene = Scene(self, importer=importer, library_dir=library_dir)
        self.modules: list[EngineModule] = [self.renderer, _SceneModule(self, self.scene)]
        self.engine_log: list[str] = []

    def init(self) -> bool:
        """Initialise every module, then start every module; stop at the first failure."""
        if not all(module.init() for module in self.modules):
            return False
        self.add_engine_log("Engine Start --------------")
        return all(module.start() for module in self.modules)

    def update(self) -> UpdateStatus:
        """Run pre-update, update and post-update on all modules; STOP ends the frame."""
        status = UpdateStatus.CONTINUE
        for phase in _PHASES:
            for module in self.modules:
                status = UpdateStatus(phase(module))
                if status is UpdateStatus.STOP:
                    return status
        return status

    def clean_up(self) -> bool:
        """Clean up every module; the result is that of the last one."""
        self.add_engine_log("Engine Clean Up --------------")
        result = True
        for module in self.modules:
            result = module.clean_up()
        return result

    def add_engine_log(self, message: str) -> None:
        self.engine_log.append(message)

    def delete_engine_logs(self) -> None:
        self.engine_log.clear()

    def change_aspect_ratio(self, aspect: float) -> None:
        self.renderer.camera.aspect = aspect