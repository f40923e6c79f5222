"""The editor window: its size, viewport and display modes."""

from __future__ import annotations

from .module import TITLE, WINDOW_HEIGHT, WINDOW_WIDTH, Module


class Window(Module):
    """The window the editor renders into.

    ``fullscreen`` and ``resizable`` are the requested settings; ``is_fullscreen``
    and ``is_resizable`` are what the window currently uses.
    """

    def __init__(self, app=None, start_enabled=True) -> None:
        super().__init__(app, start_enabled)
        self.title = TITLE
        self.fullscreen = False
        self.resizable = True
        self.is_fullscreen = False
        self.is_resizable = False
        self.is_open = False
        self.window_width = WINDOW_WIDTH
        self.window_height = WINDOW_HEIGHT
        self.viewport = (0, 0, WINDOW_WIDTH, WINDOW_HEIGHT)

    def init(self) -> bool:
        self._log("Window Initialization")
        self.window_width = WINDOW_WIDTH
        self.window_height = WINDOW_HEIGHT
        self.is_fullscreen = self.fullscreen
        self.is_resizable = self.resizable
        self.is_open = True
        self.viewport = (0, 0, self.window_width, self.window_height)
        return True

    def clean_up(self) -> bool:
        self._log("Destroying SDL window and quitting all SDL systems")
        self.is_open = False
        return True

    def resize_window(self, width, height) -> None:
        """Resize the window and viewport and pass the new aspect ratio on."""
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.window_width = width
        self.window_height = height
        self.viewport = (0, 0, width, height)
        if self.app is not None:
            self.app.gengine.set_aspect_ratio(width / height)

    def handle_fullscreen(self) -> None:
        """Apply the requested fullscreen setting."""
        self.is_fullscreen = self.fullscreen = bool(self.fullscreen)

    def handle_resizable(self) -> None:
        """Apply the requested resizable setting."""
        self.is_resizable = self.resizable = bool(self.resizable)