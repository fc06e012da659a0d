"""Raylib compatibility layer - abstracts differences between python-raylib and raylibpy."""

from __future__ import annotations
import ctypes
from typing import Any

# Try to import raylib
try:
    import raylib as rl
    RL_VERSION = "python-raylib"
except ImportError:
    import raylibpy as rl
    RL_VERSION = "raylibpy"

# PIXELFORMAT_UNCOMPRESSED_R8G8B8A8
_PIXELFORMAT_RGBA8 = getattr(rl, "PIXELFORMAT_UNCOMPRESSED_R8G8B8A8", 7)


class _CTypesRect(ctypes.Structure):
    """Fallback Rectangle structure for ctypes."""
    _fields_ = [
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
        ("width", ctypes.c_float),
        ("height", ctypes.c_float),
    ]


class _CTypesVec2(ctypes.Structure):
    """Fallback Vector2 structure for ctypes."""
    _fields_ = [
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
    ]


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    """Create a raylib Rectangle compatible with the current binding."""
    if hasattr(rl, 'ffi'):
        r = rl.ffi.new("Rectangle *")
        r[0].x = float(x)
        r[0].y = float(y)
        r[0].width = float(w)
        r[0].height = float(h)
        return r[0]
    if hasattr(rl, 'Rectangle'):
        return rl.Rectangle(float(x), float(y), float(w), float(h))
    return _CTypesRect(float(x), float(y), float(w), float(h))


def make_vec2(x: float, y: float) -> Any:
    """Create a raylib Vector2 compatible with the current binding."""
    if hasattr(rl, 'ffi'):
        v = rl.ffi.new("Vector2 *")
        v[0].x = float(x)
        v[0].y = float(y)
        return v[0]
    if hasattr(rl, 'Vector2'):
        return rl.Vector2(float(x), float(y))
    return _CTypesVec2(float(x), float(y))


def make_color(r: int, g: int, b: int, a: int = 255) -> Any:
    """Create a raylib Color compatible with the current binding."""
    if hasattr(rl, 'ffi'):
        c = rl.ffi.new("Color *")
        c[0].r, c[0].g, c[0].b, c[0].a = int(r), int(g), int(b), int(a)
        return c[0]
    return rl.Color(int(r), int(g), int(b), int(a))


def _text_arg(text: str) -> Any:
    return text.encode('utf-8') if hasattr(rl, 'ffi') else text


def draw_text(text: str, x: int, y: int, size: int, color: Any) -> None:
    """Draw text with encoding handled per binding."""
    rl.DrawText(_text_arg(text), int(x), int(y), int(size), color)


def measure_text(text: str, size: int) -> int:
    """Measure text width with encoding handled per binding."""
    return rl.MeasureText(_text_arg(text), int(size))


def set_window_title(title: str) -> None:
    rl.SetWindowTitle(_text_arg(title))


def texture_from_pil(img: Any) -> Any:
    """Upload an RGBA PIL image to a GPU texture with mipmaps."""
    w, h = img.size
    raw = img.tobytes()
    if hasattr(rl, 'ffi'):
        buf = rl.ffi.new("unsigned char[]", raw)
        image = rl.ffi.new("Image *")
        image[0].data = buf
        image[0].width = w
        image[0].height = h
        image[0].mipmaps = 1
        image[0].format = _PIXELFORMAT_RGBA8
        tex_p = rl.ffi.new("Texture2D *", rl.LoadTextureFromImage(image[0]))
        rl.GenTextureMipmaps(tex_p)
        return tex_p[0]

    buf = ctypes.create_string_buffer(raw, len(raw))
    image = rl.Image(ctypes.cast(buf, ctypes.c_void_p), w, h, 1, _PIXELFORMAT_RGBA8)
    tex = rl.LoadTextureFromImage(image)
    rl.GenTextureMipmaps(ctypes.byref(tex))
    return tex


def set_texture_filter(tex: Any, mode: int) -> None:
    rl.SetTextureFilter(tex, int(mode))


def get_texture_id(tex: Any) -> int:
    """Safely get texture ID."""
    return getattr(tex, 'id', 0) or 0


def is_texture_valid(tex: Any) -> bool:
    """Check if texture is valid and loaded."""
    return get_texture_id(tex) > 0


# Re-export commonly used raylib items
__all__ = [
    'rl',
    'RL_VERSION',
    'make_rect',
    'make_vec2',
    'make_color',
    'draw_text',
    'measure_text',
    'set_window_title',
    'texture_from_pil',
    'set_texture_filter',
    'get_texture_id',
    'is_texture_valid',
]
