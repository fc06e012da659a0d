"""Application - main loop orchestrator and command-line entry point.

The Application class runs the raylib loop and coordinates:
- Input handling (via InputHandler)
- Command execution against the ViewerSession
- Rendering (via Renderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import sys
import traceback

from .viewer import ViewerSession
from .renderer import Renderer
from .input_handler import InputHandler, get_input_handler
from .commands import Command, CloseApp
from .shell import spawn_viewers
from .rl_compat import rl, RL_VERSION, set_window_title
from .config import (
    TARGET_FPS, WINDOW_TITLE, WINDOW_DEFAULT_W, WINDOW_DEFAULT_H, WINDOW_MIN_W, WINDOW_MIN_H,
)
from .logging import log, increment_frame, get_frame


@dataclass
class Application:
    """
    Main application orchestrator.

    Provides a clean separation between:
    - Input → Commands
    - Commands → Session state changes
    - State → Rendering

    Usage:
        app = Application()
        app.initialize(start_path)
        app.run()
    """

    session: ViewerSession = field(default_factory=ViewerSession)
    renderer: Renderer = field(default_factory=Renderer)
    input_handler: InputHandler = field(default_factory=get_input_handler)
    running: bool = False
    _shown_title: str = ""

    def initialize(self, start_path: Optional[str] = None) -> None:
        """Open the window and load the start image, if any."""
        log(f"[INIT] Creating window {WINDOW_DEFAULT_W}x{WINDOW_DEFAULT_H} ({RL_VERSION})")
        rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE)
        try:
            rl.InitWindow(WINDOW_DEFAULT_W, WINDOW_DEFAULT_H, WINDOW_TITLE.encode('utf-8'))
        except TypeError:
            rl.InitWindow(WINDOW_DEFAULT_W, WINDOW_DEFAULT_H, WINDOW_TITLE)
        rl.SetWindowMinSize(WINDOW_MIN_W, WINDOW_MIN_H)
        # Escape is handled as a command so it can close menus first
        rl.SetExitKey(0)
        rl.SetTargetFPS(TARGET_FPS)
        self._shown_title = WINDOW_TITLE

        self.session.resize(rl.GetScreenWidth(), rl.GetScreenHeight())
        log(f"[INIT] Window created: {self.session.client_size}")

        if start_path:
            self.session.open_path(start_path)

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        self.running = True
        log("[APP] Starting main loop")

        try:
            while self.running:
                self._frame()
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
        finally:
            self._cleanup()

    def _frame(self) -> None:
        """Execute a single frame."""
        if rl.WindowShouldClose():
            self.running = False
            return

        if rl.IsWindowResized():
            self.session.resize(rl.GetScreenWidth(), rl.GetScreenHeight())

        # 1. Poll input and generate commands
        commands = self.input_handler.poll(self.session)

        # 2. Execute commands
        for cmd in commands:
            self._execute_command(cmd)
            if not self.running:
                return

        # 3. Sync window title with the displayed image
        title = self.session.state.window.title
        if title != self._shown_title:
            set_window_title(title)
            self._shown_title = title

        # 4. Render
        self.renderer.draw_frame(self.session.state)

        # 5. Frame bookkeeping
        increment_frame()

    def _execute_command(self, cmd: Command) -> None:
        """Execute a single command."""
        if isinstance(cmd, CloseApp):
            cmd.execute(self.session)
            self.running = False
            return

        try:
            cmd.execute(self.session)
        except Exception as e:
            log(f"[APP][CMD][ERR] {type(cmd).__name__}: {e!r}")
            log(f"[APP][CMD][ERR] Traceback:\n{traceback.format_exc()}")

    def _cleanup(self) -> None:
        """Clean up resources."""
        log("[APP] Starting cleanup")
        self.renderer.unload()
        log("[APP] Closing window")
        rl.CloseWindow()
        log(f"[APP] Cleanup complete, frames={get_frame()}")


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point.

    No argument opens an empty viewer, one argument opens that image, and
    several arguments start one independent viewer per argument.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    log(f"[MAIN] Starting application args={args!r}")

    if len(args) > 1:
        started = spawn_viewers(args)
        log(f"[MAIN] Started {started}/{len(args)} viewers")
        return 0

    start_path = args[0] if args else None
    app = Application()
    try:
        app.initialize(start_path)
    except Exception as e:
        log(f"[INIT][CRITICAL] Failed to initialize window: {e!r}")
        log(f"[INIT][CRITICAL] Traceback:\n{traceback.format_exc()}")
        return 1

    app.run()
    return 0
