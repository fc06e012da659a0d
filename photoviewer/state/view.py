"""View state - the live viewport and the image it shows."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from ..types import ViewportState, ImageHandle


@dataclass
class ViewState:
    """State for the displayed image and its placement."""
    view: ViewportState = field(default_factory=ViewportState)
    image: Optional[ImageHandle] = None

    @property
    def path(self) -> Optional[str]:
        """Path of the displayed image or None."""
        return self.image.path if self.image else None
