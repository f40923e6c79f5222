"""Image textures and the built-in checkerboard texture."""

from __future__ import annotations

import numpy as np
from PIL import Image

CHECKER_WIDTH = 100
CHECKER_HEIGHT = 100


def normalize_path(path) -> str:
    """Return ``path`` as a string with every backslash turned into a slash."""
    return str(path).replace("\\", "/")


def checker_pixels(width: int, height: int) -> np.ndarray:
    """An opaque black and white checkerboard of 8-pixel squares, RGBA uint8.

    The result has shape ``(height, width, 4)``.
    """
    if width < 0 or height < 0:
        raise ValueError("checker size must not be negative")
    rows = (np.arange(height) & 0x8) == 0
    cols = (np.arange(width) & 0x8) == 0
    lit = np.logical_xor.outer(rows, cols)
    value = np.where(lit, 255, 0).astype(np.uint8)
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[..., 0] = value
    pixels[..., 1] = value
    pixels[..., 2] = value
    pixels[..., 3] = 255
    return pixels


def _load_pixels(path) -> np.ndarray:
    """Read an image file; an unreadable file gives an empty image."""
    try:
        with Image.open(path) as img:
            mode = "RGBA" if "A" in img.getbands() else "RGB"
            return np.asarray(img.convert(mode), dtype=np.uint8).copy()
    except OSError:
        return np.zeros((0, 0, 3), dtype=np.uint8)


class Texture:
    """Pixel data for a texture.

    Built from an image file when a path is given, otherwise a 100x100
    checkerboard. A file that cannot be read yields an empty 0x0 texture.
    """

    def __init__(self, path=None) -> None:
        if path is None:
            self.path = ""
            self.name = ""
            self.pixels = checker_pixels(CHECKER_WIDTH, CHECKER_HEIGHT)
        else:
            self.path = normalize_path(path)
            self.name = self.path.rsplit("/", 1)[-1]
            self.pixels = _load_pixels(path)
        self.height, self.width = (int(n) for n in self.pixels.shape[:2])

    @property
    def channels(self) -> int:
        return int(self.pixels.shape[2])

    def size(self) -> tuple[int, int]:
        """Width and height in pixels."""
        return self.width, self.height

    def __repr__(self) -> str:
        return f"Texture(name={self.name!r}, size={self.width}x{self.height})"