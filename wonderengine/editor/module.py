"""Editor-wide settings and the base class of the editor's modules."""

from __future__ import annotations

from ..engine import UpdateStatus

DEGTORAD = 0.0174532925199432957
RADTODEG = 57.295779513082320876
PI = 3.141592654

WINDOW_WIDTH = 1366
WINDOW_HEIGHT = 768
WINDOW_SIZE = 1
WIN_FULLSCREEN = False
WIN_RESIZABLE = True
WIN_BORDERLESS = False
WIN_FULLSCREEN_DESKTOP = False
VSYNC = True
TITLE = "A Wonderful Game Engine"

__all__ = ["Module", "UpdateStatus"]


class Module:
    """A part of the editor application driven through its life-cycle phases."""

    def __init__(self, app=None, start_enabled=True) -> None:
        self.app = app
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

    def _log(self, message: str) -> None:
        """Send a message to the editor console, when attached to an application."""
        if self.app is not None:
            self.app.gengine.add_log(message)