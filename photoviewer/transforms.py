"""Image transformation operations for PhotoViewer.

Rotate and flip act on the decoded pixels held by an ImageHandle. Files on
disk are never modified.
"""

from __future__ import annotations
import os

from PIL import Image

from .types import ImageHandle
from .logging import log


def rotate_handle(handle: ImageHandle, clockwise: bool = True) -> ImageHandle:
    """
    Rotate the image 90 degrees in place.

    Args:
        handle: Image to rotate; width and height are swapped.
        clockwise: If True, rotate clockwise; otherwise counter-clockwise.

    Returns:
        The same handle, for chaining.
    """
    # PIL transposes are counter-clockwise
    method = Image.Transpose.ROTATE_270 if clockwise else Image.Transpose.ROTATE_90
    handle.image = handle.image.transpose(method)
    handle.w, handle.h = handle.image.size
    handle.revision += 1

    direction = "clockwise" if clockwise else "counter-clockwise"
    log(f"[TRANSFORM] Rotated {direction}: {os.path.basename(handle.path)}")
    return handle


def flip_handle(handle: ImageHandle, horizontal: bool = True) -> ImageHandle:
    """
    Flip the image horizontally or vertically in place.

    Args:
        handle: Image to flip; dimensions are unchanged.
        horizontal: If True, mirror left-right; otherwise top-bottom.

    Returns:
        The same handle, for chaining.
    """
    if horizontal:
        handle.image = handle.image.transpose(Image.Transpose.FLIP_LEFT_RIGHT)
    else:
        handle.image = handle.image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    handle.revision += 1

    direction = "horizontally" if horizontal else "vertically"
    log(f"[TRANSFORM] Flipped {direction}: {os.path.basename(handle.path)}")
    return handle
