"""Core data types for PhotoViewer."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Any
from enum import Enum, IntEnum


@dataclass
class ViewportState:
    """Where and how large the image is drawn inside the client area.

    ``offx``/``offy`` is the image's top-left corner in window coordinates.
    ``fitted`` is True only while scale/origin still satisfy fit-to-window.
    """
    scale: float = 1.0
    offx: float = 0.0
    offy: float = 0.0
    fitted: bool = False

    @property
    def origin(self) -> Tuple[float, float]:
        return (self.offx, self.offy)

    def copy(self) -> ViewportState:
        """Create a copy of this ViewportState."""
        return ViewportState(self.scale, self.offx, self.offy, self.fitted)


@dataclass
class ImageHandle:
    """A decoded image held in memory.

    ``revision`` changes whenever the pixels change so GPU copies can be
    refreshed lazily.
    """
    image: Any  # PIL.Image.Image, RGBA
    w: int
    h: int
    path: str = ""
    revision: int = 0

    @property
    def size(self) -> Tuple[int, int]:
        return (self.w, self.h)


class Interpolation(IntEnum):
    """Sampling used when drawing the scaled image.

    Values are raylib TEXTURE_FILTER_* constants.
    """
    NearestNeighbor = 0
    Bilinear = 1
    Trilinear = 2
    Anisotropic4x = 3
    Anisotropic8x = 4
    Anisotropic16x = 5


class BackgroundColor(Enum):
    """Window background colors offered in the context menu."""
    Black = (0, 0, 0)
    White = (255, 255, 255)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.value


class UIAction(Enum):
    """Actions reachable from the context menu and their hotkeys."""
    OPEN_IMAGE = "open_image"
    SET_INTERPOLATION = "set_interpolation"
    SET_BACKGROUND = "set_background"
    RESET_FIT = "reset_fit"
    RESET_ACTUAL_SIZE = "reset_actual_size"
    NEW_WINDOW = "new_window"
