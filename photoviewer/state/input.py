"""Input state - drag gesture sampling."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..config import DRAG_INTERVAL_MS


@dataclass
class DragState:
    """A left-button drag that moves the image.

    The main loop calls tick() every frame; a new origin is produced at most
    once per ``interval_ms`` and only when the pointer actually moved. The
    gesture ends on the first tick that sees the button released.
    """
    active: bool = False
    start_mouse: Tuple[float, float] = (0.0, 0.0)
    start_origin: Tuple[float, float] = (0.0, 0.0)
    last_mouse: Tuple[float, float] = (0.0, 0.0)
    last_sample: float = 0.0
    interval_ms: float = DRAG_INTERVAL_MS

    def start(self, mouse_x: float, mouse_y: float,
              offx: float, offy: float, t: float) -> None:
        """Begin dragging from the given pointer position and image origin."""
        self.active = True
        self.start_mouse = (mouse_x, mouse_y)
        self.start_origin = (offx, offy)
        self.last_mouse = (mouse_x, mouse_y)
        self.last_sample = t

    def rebase(self, offx: float, offy: float) -> None:
        """Continue the drag from the last pointer position and a new origin.

        Called when the view changes under an active drag (zoom, rotate,
        flip) so the next sample moves from where the image is now.
        """
        if self.active:
            self.start_mouse = self.last_mouse
            self.start_origin = (offx, offy)

    def end(self) -> bool:
        """End dragging. Returns True if a drag was in progress."""
        was_active = self.active
        self.active = False
        return was_active

    def tick(self, mouse_x: float, mouse_y: float, button_down: bool,
             t: float) -> Optional[Tuple[float, float]]:
        """Sample the pointer; returns the new image origin or None."""
        if not self.active:
            return None
        if not button_down:
            self.end()
            return None
        if (t - self.last_sample) * 1000.0 < self.interval_ms:
            return None
        self.last_sample = t

        if (mouse_x, mouse_y) == self.last_mouse:
            return None
        self.last_mouse = (mouse_x, mouse_y)

        return (self.start_origin[0] + mouse_x - self.start_mouse[0],
                self.start_origin[1] + mouse_y - self.start_mouse[1])


@dataclass
class InputState:
    """State for input handling."""
    drag: DragState = field(default_factory=DragState)

    @property
    def is_dragging(self) -> bool:
        return self.drag.active
