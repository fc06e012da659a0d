"""Image loading - decodes files into ImageHandles with Pillow."""

from __future__ import annotations
import os

from PIL import Image

from .types import ImageHandle
from .errors import ImageLoadFailed
from .logging import log


def load_image(path: str) -> ImageHandle:
    """Decode an image file into memory.

    Args:
        path: Path to the image file.

    Returns:
        ImageHandle with RGBA pixels and the absolute path.

    Raises:
        ImageLoadFailed: The file does not exist or is not a readable image.
    """
    full_path = os.path.abspath(path)
    if not os.path.isfile(full_path):
        raise ImageLoadFailed(full_path, "File did not exist or was not an image")

    try:
        with Image.open(full_path) as src:
            src.load()
            img = src.convert("RGBA")
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise ImageLoadFailed(full_path, f"File did not exist or was not an image ({e})") from e

    w, h = img.size
    if w <= 0 or h <= 0:
        raise ImageLoadFailed(full_path, "empty image")

    log(f"[LOAD] {os.path.basename(full_path)}: {w}x{h}")
    return ImageHandle(image=img, w=w, h=h, path=full_path)
