"""State management submodules for PhotoViewer."""

from .window import WindowState
from .view import ViewState
from .ui import UIState, ContextMenuState, NotificationState, MenuItem
from .input import InputState, DragState
from .app_state import AppState

__all__ = [
    'WindowState',
    'ViewState',
    'UIState',
    'ContextMenuState',
    'NotificationState',
    'MenuItem',
    'InputState',
    'DragState',
    'AppState',
]
