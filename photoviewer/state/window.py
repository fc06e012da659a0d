"""Window state - client size and title."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..config import WINDOW_DEFAULT_W, WINDOW_DEFAULT_H, WINDOW_TITLE


@dataclass
class WindowState:
    """Window-related state."""
    client_w: int = WINDOW_DEFAULT_W
    client_h: int = WINDOW_DEFAULT_H
    title: str = WINDOW_TITLE

    @property
    def size(self) -> Tuple[int, int]:
        """Get client size as tuple."""
        return (self.client_w, self.client_h)
