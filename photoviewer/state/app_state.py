"""Composite AppState - combines all sub-states."""

from __future__ import annotations
from dataclasses import dataclass, field

from .window import WindowState
from .view import ViewState
from .ui import UIState
from .input import InputState


@dataclass
class AppState:
    """
    Composite application state, owned by a single viewer window.

    Sub-states are accessed directly:
        state.window.client_w
        state.view.image
        state.ui.context_menu
        state.input.drag
    """
    window: WindowState = field(default_factory=WindowState)
    view: ViewState = field(default_factory=ViewState)
    ui: UIState = field(default_factory=UIState)
    input: InputState = field(default_factory=InputState)
