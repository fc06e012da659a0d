"""Desktop shell helpers - file dialog and launching viewer processes."""

from __future__ import annotations
import os
import sys
import subprocess
from typing import List, Optional

from .config import OPEN_DIALOG_TITLE, OPEN_DIALOG_FILETYPES
from .logging import log


def viewer_command(path: Optional[str] = None) -> List[str]:
    """Command line that starts a new, independent viewer."""
    cmd = [sys.executable, "-m", "photoviewer"]
    if path:
        cmd.append(os.path.abspath(path))
    return cmd


def launch_viewer(path: Optional[str] = None) -> Optional[subprocess.Popen]:
    """Start another viewer process, optionally opening ``path``.

    The child is detached from this process; failures are logged.
    """
    cmd = viewer_command(path)
    try:
        proc = subprocess.Popen(cmd, start_new_session=True)
    except OSError as e:
        log(f"[LAUNCH][ERR] {cmd!r}: {e!r}")
        return None
    log(f"[LAUNCH] pid={proc.pid} path={path}")
    return proc


def prompt_open_path(initial_dir: Optional[str] = None) -> Optional[str]:
    """Ask the user for an image file. Returns None when cancelled."""
    import tkinter
    from tkinter import filedialog

    root = tkinter.Tk()
    root.withdraw()
    try:
        root.attributes("-topmost", True)
        filename = filedialog.askopenfilename(
            parent=root,
            title=OPEN_DIALOG_TITLE,
            filetypes=OPEN_DIALOG_FILETYPES,
            initialdir=initial_dir or os.getcwd(),
        )
    finally:
        root.destroy()

    return filename or None


def spawn_viewers(paths: List[str]) -> int:
    """Open each path in its own viewer process. Returns the number started."""
    started = 0
    for p in paths:
        log(f"[ARGS] Launching viewer for {p}")
        if launch_viewer(p) is not None:
            started += 1
    return started
