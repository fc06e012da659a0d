"""Viewer session - the live state of one viewer window.

ViewerSession holds the single ViewportState and ImageHandle of a window and
routes gestures through the pure functions in view_math and image_utils.
Every operation is a no-op without an image, and the redraw callback fires
only when something visible changed. Collaborators (image loader, open
dialog, process launcher) are injectable so the session runs without a
window.
"""

from __future__ import annotations
import os
from typing import Callable, Optional, Tuple

from . import view_math
from .config import WINDOW_TITLE
from .errors import ImageLoadFailed
from .image_utils import next_image, prev_image
from .loader import load_image
from .logging import log
from .shell import launch_viewer, prompt_open_path
from .state import AppState
from .transforms import rotate_handle, flip_handle
from .types import ViewportState, ImageHandle, Interpolation, BackgroundColor

LOAD_FAILED_TITLE = "Failed to Open Image"


class ViewerSession:
    """One viewer window's image, viewport and display options."""

    def __init__(self,
                 state: Optional[AppState] = None,
                 loader: Callable[[str], ImageHandle] = load_image,
                 on_redraw: Optional[Callable[[], None]] = None,
                 open_dialog: Callable[[Optional[str]], Optional[str]] = prompt_open_path,
                 launcher: Callable[[Optional[str]], object] = launch_viewer):
        self.state = state or AppState()
        self.loader = loader
        self.on_redraw = on_redraw
        self.open_dialog = open_dialog
        self.launcher = launcher

    # ── accessors ──────────────────────────────────────────────────────────

    @property
    def image(self) -> Optional[ImageHandle]:
        return self.state.view.image

    @property
    def view(self) -> ViewportState:
        return self.state.view.view

    @property
    def path(self) -> Optional[str]:
        return self.state.view.path

    @property
    def client_size(self) -> Tuple[int, int]:
        return self.state.window.size

    # ── internals ──────────────────────────────────────────────────────────

    def request_redraw(self) -> None:
        if self.on_redraw:
            self.on_redraw()

    def _set_view(self, new_view: ViewportState) -> None:
        self.state.view.view = new_view
        self.state.input.drag.rebase(new_view.offx, new_view.offy)

    def _apply_view(self, new_view: ViewportState) -> bool:
        if new_view == self.state.view.view:
            return False
        self._set_view(new_view)
        self.request_redraw()
        return True

    def _fit_view(self) -> ViewportState:
        ti = self.image
        cw, ch = self.client_size
        return view_math.fit_to_window(ti.w, ti.h, cw, ch)

    # ── image lifecycle ────────────────────────────────────────────────────

    def set_image(self, handle: Optional[ImageHandle]) -> None:
        """Replace the displayed image (None for none) and fit it."""
        self.state.view.image = handle
        if handle is None:
            self.state.window.title = WINDOW_TITLE
            self._set_view(ViewportState())
        else:
            self.state.window.title = f"{WINDOW_TITLE} - {handle.path}"
            self._set_view(self._fit_view())
        self.request_redraw()

    def open_path(self, path: str) -> bool:
        """Load and display ``path``.

        On failure the previous image (if any) stays on screen and a
        notification is shown. Returns True when the image was loaded.
        """
        try:
            handle = self.loader(path)
        except ImageLoadFailed as e:
            log(f"[LOAD][ERR] {e}")
            self.notify(LOAD_FAILED_TITLE,
                        f"Error reading {path}\n\nFile did not exist or was not an image")
            return False

        self.set_image(handle)
        log(f"[VIEW] Showing {handle.path} scale={self.view.scale:.4f}")
        return True

    def prompt_open(self) -> bool:
        """Ask for a file and open it."""
        start_dir = os.path.dirname(self.path) if self.path else None
        chosen = self.open_dialog(start_dir)
        if not chosen:
            log("[OPEN] Dialog cancelled")
            return False
        return self.open_path(chosen)

    def navigate(self, step: int) -> bool:
        """Show the next (+1) or previous (-1) sibling image."""
        if not self.path:
            return False
        target = next_image(self.path) if step > 0 else prev_image(self.path)
        if target is None:
            log(f"[NAV] No {'next' if step > 0 else 'previous'} image for {self.path}")
            return False
        if os.path.normcase(target) == os.path.normcase(self.path):
            # Only image in the directory
            return False
        log(f"[NAV] {os.path.basename(self.path)} -> {os.path.basename(target)}")
        return self.open_path(target)

    def new_window(self) -> None:
        self.launcher(None)

    def notify(self, title: str, text: str) -> None:
        self.state.ui.notification.show(title, text)
        self.request_redraw()

    # ── viewport operations ────────────────────────────────────────────────

    def resize(self, client_w: int, client_h: int) -> bool:
        """Record a new client size; a fitted image is fitted again."""
        if (client_w, client_h) == self.client_size:
            return False
        self.state.window.client_w = client_w
        self.state.window.client_h = client_h
        if self.image is None or client_w <= 0 or client_h <= 0:
            return False
        if self.view.fitted:
            return self._apply_view(self._fit_view())
        return False

    def reset_fit(self) -> bool:
        if self.image is None:
            return False
        return self._apply_view(self._fit_view())

    def reset_actual_size(self) -> bool:
        ti = self.image
        if ti is None:
            return False
        cw, ch = self.client_size
        return self._apply_view(view_math.actual_size(ti.w, ti.h, cw, ch))

    def wheel_zoom(self, pivot: Tuple[float, float], wheel_delta: float) -> bool:
        if self.image is None:
            return False
        return self._apply_view(view_math.zoom(self.view, pivot, wheel_delta))

    def pan(self, dx: float, dy: float) -> bool:
        if self.image is None or (dx == 0 and dy == 0):
            return False
        return self._apply_view(view_math.pan(self.view, dx, dy))

    def start_drag(self, mouse_x: float, mouse_y: float, t: float) -> bool:
        if self.image is None:
            return False
        v = self.view
        self.state.input.drag.start(mouse_x, mouse_y, v.offx, v.offy, t)
        return True

    def drag_tick(self, mouse_x: float, mouse_y: float, button_down: bool, t: float) -> bool:
        """Advance an active drag; returns True when the image moved."""
        origin = self.state.input.drag.tick(mouse_x, mouse_y, button_down, t)
        if origin is None or self.image is None:
            return False
        return self._apply_view(view_math.move_to(self.view, *origin))

    def end_drag(self) -> bool:
        return self.state.input.drag.end()

    def rotate(self, clockwise: bool) -> bool:
        ti = self.image
        if ti is None:
            return False
        cw, ch = self.client_size
        _, _, new_view = view_math.rotate90(self.view, clockwise, ti.w, ti.h, cw, ch)
        rotate_handle(ti, clockwise)
        self._set_view(new_view)
        self.request_redraw()
        return True

    def flip(self, horizontal: bool) -> bool:
        ti = self.image
        if ti is None:
            return False
        cw, ch = self.client_size
        if horizontal:
            new_view = view_math.flip_horizontal(self.view, ti.w, cw)
        else:
            new_view = view_math.flip_vertical(self.view, ti.h, ch)
        flip_handle(ti, horizontal)
        self._set_view(new_view)
        self.request_redraw()
        return True

    # ── display options ────────────────────────────────────────────────────

    def set_interpolation(self, mode: Interpolation) -> bool:
        if mode == self.state.ui.interpolation:
            return False
        self.state.ui.interpolation = mode
        log(f"[VIEW] Interpolation -> {mode.name}")
        self.request_redraw()
        return True

    def set_background(self, color: BackgroundColor) -> bool:
        if color == self.state.ui.background:
            return False
        self.state.ui.background = color
        log(f"[VIEW] Background -> {color.name}")
        self.request_redraw()
        return True
