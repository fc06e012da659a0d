"""Command Pattern for input handling.

Commands encapsulate actions that can be triggered by various inputs.
Each command has an execute() method and optional can_execute() for guards.
Context menu entries carry a UIAction that is routed through ACTION_HANDLERS.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Tuple

if TYPE_CHECKING:
    from .viewer import ViewerSession

from .types import UIAction, Interpolation, BackgroundColor
from .logging import log


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, session: "ViewerSession") -> bool:
        """Execute the command. Returns True if action was taken."""
        pass

    def can_execute(self, session: "ViewerSession") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


class _ImageCommand(Command):
    """Guard shared by commands that need a loaded image."""

    def can_execute(self, session: "ViewerSession") -> bool:
        return session.image is not None


# ═══════════════════════════════════════════════════════════════════════════
# Navigation Commands
# ═══════════════════════════════════════════════════════════════════════════

class NavigateNext(_ImageCommand):
    """Show the next image in the directory."""

    def execute(self, session: "ViewerSession") -> bool:
        if not self.can_execute(session):
            return False
        log("[CMD] NavigateNext")
        return session.navigate(1)


class NavigatePrev(_ImageCommand):
    """Show the previous image in the directory."""

    def execute(self, session: "ViewerSession") -> bool:
        if not self.can_execute(session):
            return False
        log("[CMD] NavigatePrev")
        return session.navigate(-1)


# ═══════════════════════════════════════════════════════════════════════════
# Zoom / Pan Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class WheelZoom(_ImageCommand):
    """Zoom one tick with the mouse wheel."""
    delta: float  # Positive = zoom in, negative = zoom out
    anchor: Tuple[float, float] = (0.0, 0.0)

    def execute(self, session: "ViewerSession") -> bool:
        if not self.can_execute(session):
            return False
        changed = session.wheel_zoom(self.anchor, self.delta)
        if changed:
            log(f"[CMD] WheelZoom: delta={self.delta} anchor={self.anchor} "
                f"scale={session.view.scale:.4f}")
        return changed


@dataclass
class StartDrag(_ImageCommand):
    """Start dragging the image."""
    mouse_x: float
    mouse_y: float
    t: float

    def can_execute(self, session: "ViewerSession") -> bool:
        return (super().can_execute(session) and
                not session.state.input.is_dragging)

    def execute(self, session: "ViewerSession") -> bool:
        if not self.can_execute(session):
            return False
        log(f"[CMD] StartDrag: pos=({self.mouse_x:.0f}, {self.mouse_y:.0f})")
        return session.start_drag(self.mouse_x, self.mouse_y, self.t)


@dataclass
class DragTick(Command):
    """Sample the pointer during a drag."""
    mouse_x: float
    mouse_y: float
    button_down: bool
    t: float

    def can_execute(self, session: "ViewerSession") -> bool:
        return session.state.input.is_dragging

    def execute(self, session: "ViewerSession") -> bool:
        if not self.can_execute(session):
            return False
        moved = session.drag_tick(self.mouse_x, self.mouse_y, self.button_down, self.t)
        if not session.state.input.is_dragging:
            log("[CMD] Drag ended")
        return moved


# ═══════════════════════════════════════════════════════════════════════════
# Image Transformation Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class Rotate(_ImageCommand):
    """Rotate the image 90 degrees."""
    clockwise: bool = True

    def execute(self, session: "ViewerSession") -> bool:
        if not self.can_execute(session):
            return False
        log(f"[CMD] Rotate clockwise={self.clockwise}")
        return session.rotate(self.clockwise)


@dataclass
class Flip(_ImageCommand):
    """Mirror the image."""
    horizontal: bool = True

    def execute(self, session: "ViewerSession") -> bool:
        if not self.can_execute(session):
            return False
        log(f"[CMD] Flip horizontal={self.horizontal}")
        return session.flip(self.horizontal)


# ═══════════════════════════════════════════════════════════════════════════
# Context Menu / Notification Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ShowContextMenu(Command):
    """Show context menu at position."""
    x: int
    y: int

    def execute(self, session: "ViewerSession") -> bool:
        session.end_drag()
        ui = session.state.ui
        ui.context_menu.show(self.x, self.y, ui.menu_items())
        log(f"[CMD] ShowContextMenu at ({self.x}, {self.y})")
        return True


class HideContextMenu(Command):
    """Hide context menu."""

    def can_execute(self, session: "ViewerSession") -> bool:
        return session.state.ui.context_menu.visible

    def execute(self, session: "ViewerSession") -> bool:
        if not self.can_execute(session):
            return False
        session.state.ui.context_menu.hide()
        log("[CMD] HideContextMenu")
        return True


@dataclass
class ContextMenuClick(Command):
    """Click on a context menu item, addressed by its path."""
    path: Tuple[int, ...]

    def can_execute(self, session: "ViewerSession") -> bool:
        menu = session.state.ui.context_menu
        item = menu.get_item(self.path) if self.path else None
        return menu.visible and item is not None and item.action is not None

    def execute(self, session: "ViewerSession") -> bool:
        if not self.can_execute(session):
            return False
        menu = session.state.ui.context_menu
        item = menu.get_item(self.path)
        log(f"[CMD] ContextMenuClick: {item.label}")
        menu.hide()
        return MenuCommand(item.action, item.payload).execute(session)


class DismissNotification(Command):
    """Close the message box."""

    def can_execute(self, session: "ViewerSession") -> bool:
        return session.state.ui.notification.visible

    def execute(self, session: "ViewerSession") -> bool:
        if not self.can_execute(session):
            return False
        session.state.ui.notification.dismiss()
        session.request_redraw()
        log("[CMD] DismissNotification")
        return True


# ═══════════════════════════════════════════════════════════════════════════
# UI Actions
# ═══════════════════════════════════════════════════════════════════════════

def _open_image(session: "ViewerSession", payload: Any) -> bool:
    return session.prompt_open()


def _set_interpolation(session: "ViewerSession", payload: Any) -> bool:
    return session.set_interpolation(Interpolation(payload))


def _set_background(session: "ViewerSession", payload: Any) -> bool:
    return session.set_background(BackgroundColor(payload))


def _reset_fit(session: "ViewerSession", payload: Any) -> bool:
    return session.reset_fit()


def _reset_actual_size(session: "ViewerSession", payload: Any) -> bool:
    return session.reset_actual_size()


def _new_window(session: "ViewerSession", payload: Any) -> bool:
    session.new_window()
    return True


ACTION_HANDLERS: Dict[UIAction, Callable[["ViewerSession", Any], bool]] = {
    UIAction.OPEN_IMAGE: _open_image,
    UIAction.SET_INTERPOLATION: _set_interpolation,
    UIAction.SET_BACKGROUND: _set_background,
    UIAction.RESET_FIT: _reset_fit,
    UIAction.RESET_ACTUAL_SIZE: _reset_actual_size,
    UIAction.NEW_WINDOW: _new_window,
}


@dataclass
class MenuCommand(Command):
    """Run a UIAction (from the context menu or a hotkey)."""
    action: UIAction
    payload: Any = None

    def execute(self, session: "ViewerSession") -> bool:
        handler = ACTION_HANDLERS.get(self.action)
        if handler is None:
            log(f"[CMD][ERR] No handler for {self.action!r}")
            return False
        log(f"[CMD] {self.action.name} payload={self.payload!r}")
        return handler(session, self.payload)


# ═══════════════════════════════════════════════════════════════════════════
# App Control Commands
# ═══════════════════════════════════════════════════════════════════════════

class CloseApp(Command):
    """Close the application."""

    def execute(self, session: "ViewerSession") -> bool:
        log("[CMD] CloseApp")
        return True
