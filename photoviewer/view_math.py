"""Pure view calculation functions - no side effects, no state mutation.

Every function takes the current ViewportState (where needed) plus image and
client dimensions and returns a new ViewportState. The caller owns the live
instance and decides whether a redraw is needed.
"""

from __future__ import annotations
from typing import Tuple

from .types import ViewportState
from .math_utils import clamp
from .config import ZOOM_FACTOR, MIN_ZOOM, MAX_ZOOM


def compute_fit_scale(
    img_w: float,
    img_h: float,
    client_w: float,
    client_h: float
) -> float:
    """Compute the largest scale at which the whole image fits the client area.

    Args:
        img_w: Image width in pixels.
        img_h: Image height in pixels.
        client_w: Client area width in pixels.
        client_h: Client area height in pixels.

    Returns:
        Scale factor, kept within [MIN_ZOOM, MAX_ZOOM]. 1.0 for an empty image.
    """
    if img_w <= 0 or img_h <= 0:
        return 1.0
    scale = min(client_w / img_w, client_h / img_h)
    return clamp(scale, MIN_ZOOM, MAX_ZOOM)


def center_view_for(
    scale: float,
    img_w: float,
    img_h: float,
    client_w: float,
    client_h: float,
    fitted: bool = False
) -> ViewportState:
    """Create a ViewportState that centers the image at the given scale."""
    return ViewportState(
        scale=scale,
        offx=(client_w - img_w * scale) / 2.0,
        offy=(client_h - img_h * scale) / 2.0,
        fitted=fitted,
    )


def fit_to_window(
    img_w: float,
    img_h: float,
    client_w: float,
    client_h: float
) -> ViewportState:
    """Zoom the image to fit the client area and center it.

    Example: a 100x50 image in a 200x200 window gets scale 2.0 and
    origin (0, 50).
    """
    scale = compute_fit_scale(img_w, img_h, client_w, client_h)
    return center_view_for(scale, img_w, img_h, client_w, client_h, fitted=True)


def actual_size(
    img_w: float,
    img_h: float,
    client_w: float,
    client_h: float
) -> ViewportState:
    """Show the image at 1:1 scale, centered."""
    return center_view_for(1.0, img_w, img_h, client_w, client_h)


def pan(view: ViewportState, dx: float, dy: float) -> ViewportState:
    """Move the image by (dx, dy) screen pixels."""
    return ViewportState(
        scale=view.scale,
        offx=view.offx + dx,
        offy=view.offy + dy,
        fitted=False,
    )


def move_to(view: ViewportState, offx: float, offy: float) -> ViewportState:
    """Place the image's top-left corner at (offx, offy)."""
    return pan(view, offx - view.offx, offy - view.offy)


def zoom(
    view: ViewportState,
    pivot: Tuple[float, float],
    wheel_delta_sign: float,
    zoom_factor: float = ZOOM_FACTOR,
    min_scale: float = MIN_ZOOM,
    max_scale: float = MAX_ZOOM
) -> ViewportState:
    """Zoom one wheel tick towards (or away from) the pivot.

    The image point under ``pivot`` stays at the same screen position:

        act = origin1 + pos * scale1 = origin2 + pos * scale2
        origin2 = origin1 + (1 - scale2 / scale1) * (act - origin1)

    Args:
        view: Current view.
        pivot: Screen point (x, y) held fixed, usually the mouse position.
        wheel_delta_sign: Positive zooms in, negative zooms out, zero is ignored.
        zoom_factor: Multiplier applied per tick.
        min_scale: Lower scale bound.
        max_scale: Upper scale bound.

    Returns:
        New ViewportState with ``fitted`` cleared (an unchanged copy for a
        zero delta).
    """
    if not wheel_delta_sign:
        return view.copy()

    if wheel_delta_sign > 0:
        new_scale = view.scale * zoom_factor
    else:
        new_scale = view.scale / zoom_factor
    new_scale = clamp(new_scale, min_scale, max_scale)

    factor = 1.0 - new_scale / view.scale
    px, py = pivot
    return ViewportState(
        scale=new_scale,
        offx=view.offx + factor * (px - view.offx),
        offy=view.offy + factor * (py - view.offy),
        fitted=False,
    )


def rotate90(
    view: ViewportState,
    clockwise: bool,
    img_w: float,
    img_h: float,
    client_w: float,
    client_h: float
) -> Tuple[float, float, ViewportState]:
    """Follow a 90 degree rotation of the image.

    A fitted view is simply re-fitted with swapped dimensions. Otherwise the
    origin is rotated about the window center, (x, y) -> (-y, x) for
    clockwise, and shifted by the rotated image size so the new top-left
    corner lands where the rotated picture starts.

    Args:
        view: Current view.
        clockwise: Direction of rotation.
        img_w: Image width before rotation.
        img_h: Image height before rotation.
        client_w: Client area width.
        client_h: Client area height.

    Returns:
        (new_w, new_h, new_view) where new_w/new_h are the swapped dimensions.
    """
    new_w, new_h = img_h, img_w

    if view.fitted:
        return new_w, new_h, fit_to_window(new_w, new_h, client_w, client_h)

    cx = client_w / 2.0
    cy = client_h / 2.0
    off_x = view.offx - cx
    off_y = view.offy - cy

    if clockwise:
        nx = cx - off_y - new_w * view.scale
        ny = cy + off_x
    else:
        nx = cx + off_y
        ny = cy - off_x - new_h * view.scale

    return new_w, new_h, ViewportState(scale=view.scale, offx=nx, offy=ny, fitted=False)


def flip_horizontal(view: ViewportState, img_w: float, client_w: float) -> ViewportState:
    """Mirror the image position about the window's vertical center line."""
    if view.fitted:
        return view.copy()
    center = client_w / 2.0
    result = view.copy()
    result.offx = 2.0 * center - view.offx - img_w * view.scale
    return result


def flip_vertical(view: ViewportState, img_h: float, client_h: float) -> ViewportState:
    """Mirror the image position about the window's horizontal center line."""
    if view.fitted:
        return view.copy()
    center = client_h / 2.0
    result = view.copy()
    result.offy = 2.0 * center - view.offy - img_h * view.scale
    return result


def image_rect(view: ViewportState, img_w: float, img_h: float) -> Tuple[float, float, float, float]:
    """Screen rectangle (x, y, w, h) covered by the scaled image."""
    return (view.offx, view.offy, img_w * view.scale, img_h * view.scale)
