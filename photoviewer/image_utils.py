"""Image utilities - sibling listing and next/previous navigation.

The listing is recomputed on every request so it always reflects what is on
disk right now; files added or removed between calls change the result.
"""

from __future__ import annotations
import os
from typing import Optional, List

from .config import IMG_EXTS
from .errors import DirectoryUnavailable
from .logging import log


def image_extension(name: str) -> str:
    """Lower-cased text after the last '.', or '' when there is none."""
    base = os.path.basename(name)
    if "." not in base:
        return ""
    return base.rsplit(".", 1)[1].lower()


def is_supported_image(filepath: str) -> bool:
    """Check if file has a supported image extension."""
    return image_extension(filepath) in IMG_EXTS


def list_sibling_images(loaded_path: str) -> List[str]:
    """List supported image files next to ``loaded_path``, sorted by name.

    Args:
        loaded_path: Path of the currently displayed image.

    Returns:
        Full paths of image files in the same directory (non-recursive).

    Raises:
        DirectoryUnavailable: The directory cannot be read.
    """
    dirpath = os.path.dirname(os.path.abspath(loaded_path))
    try:
        with os.scandir(dirpath) as it:
            names = [entry.name for entry in it
                     if entry.is_file() and is_supported_image(entry.name)]
    except OSError as e:
        raise DirectoryUnavailable(dirpath, e.strerror or repr(e)) from e

    names.sort()
    return [os.path.join(dirpath, name) for name in names]


def _step(loaded_path: str, step: int) -> Optional[str]:
    try:
        siblings = list_sibling_images(loaded_path)
    except DirectoryUnavailable as e:
        log(f"[NAV] Navigation unavailable: {e}")
        return None

    if not siblings:
        return None

    name = os.path.normcase(os.path.basename(loaded_path))
    names = [os.path.normcase(os.path.basename(p)) for p in siblings]
    try:
        index = names.index(name)
    except ValueError:
        log(f"[NAV] {name} is not in the directory listing")
        return None

    return siblings[(index + step) % len(siblings)]


def next_image(loaded_path: str) -> Optional[str]:
    """Image after ``loaded_path`` in name order, wrapping to the first.

    Returns None when the listing is empty, unreadable, or does not contain
    the loaded file (deleted, or an unsupported extension).
    """
    return _step(loaded_path, 1)


def prev_image(loaded_path: str) -> Optional[str]:
    """Image before ``loaded_path`` in name order, wrapping to the last."""
    return _step(loaded_path, -1)
