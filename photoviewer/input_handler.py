"""Input Handler - maps raylib input events to commands.

This module bridges the gap between raw raylib input and the command pattern.
It polls input each frame and returns a list of commands to execute.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .viewer import ViewerSession

from .rl_compat import rl
from .commands import (
    Command,
    NavigateNext, NavigatePrev,
    WheelZoom, StartDrag, DragTick,
    Rotate, Flip,
    ShowContextMenu, HideContextMenu, ContextMenuClick,
    DismissNotification, MenuCommand,
    CloseApp,
)
from .config import (
    KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT, KEY_PREV_IMAGE, KEY_PREV_IMAGE_ALT,
    KEY_ROTATE, KEY_ROTATE_CCW, KEY_FLIP_H, KEY_FLIP_V,
    KEY_RESET_FIT, KEY_ACTUAL_SIZE, KEY_ACTUAL_SIZE_ALT,
    KEY_OPEN, KEY_NEW_WINDOW, KEY_CLOSE, KEY_CONFIRM, KEY_CONFIRM_ALT,
    KEY_SHIFT_LEFT, KEY_SHIFT_RIGHT, KEY_CTRL_LEFT, KEY_CTRL_RIGHT,
)
from .types import UIAction
from .logging import now


@dataclass
class MouseState:
    """Current mouse state snapshot."""
    x: float = 0.0
    y: float = 0.0
    left_pressed: bool = False
    left_down: bool = False
    right_pressed: bool = False
    wheel: float = 0.0


@dataclass
class InputHandler:
    """Handles input polling and command generation."""

    # Key bindings (can be customized)
    key_next: List[int] = field(default_factory=lambda: [KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT])
    key_prev: List[int] = field(default_factory=lambda: [KEY_PREV_IMAGE, KEY_PREV_IMAGE_ALT])
    key_rotate: int = KEY_ROTATE
    key_rotate_ccw: int = KEY_ROTATE_CCW
    key_flip_h: int = KEY_FLIP_H
    key_flip_v: int = KEY_FLIP_V
    key_reset_fit: int = KEY_RESET_FIT
    key_actual_size: List[int] = field(default_factory=lambda: [KEY_ACTUAL_SIZE, KEY_ACTUAL_SIZE_ALT])
    key_open: int = KEY_OPEN
    key_new_window: int = KEY_NEW_WINDOW
    key_close: int = KEY_CLOSE
    key_confirm: List[int] = field(default_factory=lambda: [KEY_CONFIRM, KEY_CONFIRM_ALT])

    def poll_mouse(self) -> MouseState:
        """Get current mouse state."""
        pos = rl.GetMousePosition()
        return MouseState(
            x=pos.x,
            y=pos.y,
            left_pressed=rl.IsMouseButtonPressed(rl.MOUSE_BUTTON_LEFT),
            left_down=rl.IsMouseButtonDown(rl.MOUSE_BUTTON_LEFT),
            right_pressed=rl.IsMouseButtonPressed(rl.MOUSE_BUTTON_RIGHT),
            wheel=rl.GetMouseWheelMove(),
        )

    @staticmethod
    def _any_pressed(keys: List[int]) -> bool:
        return any(rl.IsKeyPressed(k) for k in keys)

    @staticmethod
    def _shift_down() -> bool:
        return rl.IsKeyDown(KEY_SHIFT_LEFT) or rl.IsKeyDown(KEY_SHIFT_RIGHT)

    @staticmethod
    def _ctrl_down() -> bool:
        return rl.IsKeyDown(KEY_CTRL_LEFT) or rl.IsKeyDown(KEY_CTRL_RIGHT)

    def _poll_notification(self, mouse: MouseState) -> List[Command]:
        # Modal: every click or confirm/escape key closes it, nothing else passes
        if (mouse.left_pressed or mouse.right_pressed or
                rl.IsKeyPressed(self.key_close) or self._any_pressed(self.key_confirm)):
            return [DismissNotification()]
        return []

    def _poll_context_menu(self, session: "ViewerSession", mouse: MouseState) -> List[Command]:
        menu = session.state.ui.context_menu
        cw, ch = session.client_size
        menu.update_hover(mouse.x, mouse.y, cw, ch)

        if mouse.left_pressed:
            path = menu.item_at(mouse.x, mouse.y, cw, ch)
            if path is None:
                # Click outside menu - close it
                return [HideContextMenu()]
            item = menu.get_item(path) if path else None
            if item is not None and item.action is not None:
                return [ContextMenuClick(path=path)]
            return []

        if mouse.right_pressed:
            return [ShowContextMenu(x=int(mouse.x), y=int(mouse.y))]

        if rl.IsKeyPressed(self.key_close):
            return [HideContextMenu()]
        return []

    def poll(self, session: "ViewerSession", t: Optional[float] = None) -> List[Command]:
        """Poll all inputs and return list of commands to execute."""
        t = now() if t is None else t
        mouse = self.poll_mouse()
        state = session.state

        if state.ui.notification.visible:
            return self._poll_notification(mouse)

        if state.ui.context_menu.visible:
            return self._poll_context_menu(session, mouse)

        commands: List[Command] = []

        # Right-click shows context menu
        if mouse.right_pressed:
            commands.append(ShowContextMenu(x=int(mouse.x), y=int(mouse.y)))
            return commands

        if rl.IsKeyPressed(self.key_close):
            commands.append(CloseApp())
            return commands

        # ─── Drag ────────────────────────────────────────────────────────────
        if state.input.is_dragging:
            commands.append(DragTick(mouse_x=mouse.x, mouse_y=mouse.y,
                                     button_down=mouse.left_down, t=t))
        elif mouse.left_pressed:
            commands.append(StartDrag(mouse_x=mouse.x, mouse_y=mouse.y, t=t))

        # ─── Wheel zoom ──────────────────────────────────────────────────────
        if mouse.wheel != 0.0:
            commands.append(WheelZoom(delta=1.0 if mouse.wheel > 0 else -1.0,
                                      anchor=(mouse.x, mouse.y)))

        # ─── Keyboard ────────────────────────────────────────────────────────
        ctrl = self._ctrl_down()

        if self._any_pressed(self.key_next):
            commands.append(NavigateNext())
        elif self._any_pressed(self.key_prev):
            commands.append(NavigatePrev())

        if rl.IsKeyPressed(self.key_rotate):
            commands.append(Rotate(clockwise=not self._shift_down()))
        if rl.IsKeyPressed(self.key_rotate_ccw):
            commands.append(Rotate(clockwise=False))
        if rl.IsKeyPressed(self.key_flip_h):
            commands.append(Flip(horizontal=True))
        if rl.IsKeyPressed(self.key_flip_v):
            commands.append(Flip(horizontal=False))

        if rl.IsKeyPressed(self.key_reset_fit):
            commands.append(MenuCommand(UIAction.RESET_FIT))
        if self._any_pressed(self.key_actual_size):
            commands.append(MenuCommand(UIAction.RESET_ACTUAL_SIZE))

        if rl.IsKeyPressed(self.key_open):
            commands.append(MenuCommand(UIAction.OPEN_IMAGE))
        if ctrl and rl.IsKeyPressed(self.key_new_window):
            commands.append(MenuCommand(UIAction.NEW_WINDOW))

        return commands


# Singleton instance for convenience
_default_handler: Optional[InputHandler] = None


def get_input_handler() -> InputHandler:
    """Get the default input handler instance."""
    global _default_handler
    if _default_handler is None:
        _default_handler = InputHandler()
    return _default_handler
