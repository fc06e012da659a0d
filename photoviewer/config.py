"""Application configuration constants."""

from __future__ import annotations

# Performance
TARGET_FPS = 60

# Window
WINDOW_TITLE = "PhotoViewer"
WINDOW_DEFAULT_W = 1024
WINDOW_DEFAULT_H = 768
WINDOW_MIN_W = 200
WINDOW_MIN_H = 150

# Drag sampling interval (milliseconds)
DRAG_INTERVAL_MS = 13

# Zoom
ZOOM_FACTOR = 1.25
MIN_ZOOM = 0.0001
MAX_ZOOM = 1000.0

# Context menu
MENU_ITEM_HEIGHT = 26
MENU_ITEM_WIDTH = 190
MENU_PADDING = 4
MENU_MARGIN = 5
MENU_FONT_SIZE = 18
MENU_BG_ALPHA = 0.95
MENU_HOVER_ALPHA = 0.3

# Notification box
NOTIFY_WIDTH = 460
NOTIFY_HEIGHT = 150
NOTIFY_TITLE_SIZE = 22
NOTIFY_TEXT_SIZE = 18
NOTIFY_PADDING = 16

# Empty-window hint
EMPTY_HINT = "Right-click or press O to open an image"
EMPTY_HINT_SIZE = 20

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_NEXT_IMAGE = 262        # KEY_RIGHT
KEY_NEXT_IMAGE_ALT = 267    # KEY_PAGE_DOWN
KEY_PREV_IMAGE = 263        # KEY_LEFT
KEY_PREV_IMAGE_ALT = 266    # KEY_PAGE_UP
KEY_ROTATE = 82             # KEY_R (Shift+R rotates anticlockwise)
KEY_ROTATE_CCW = 76         # KEY_L
KEY_FLIP_H = 72             # KEY_H
KEY_FLIP_V = 86             # KEY_V
KEY_RESET_FIT = 70          # KEY_F
KEY_ACTUAL_SIZE = 65        # KEY_A
KEY_ACTUAL_SIZE_ALT = 49    # KEY_ONE
KEY_OPEN = 79               # KEY_O
KEY_NEW_WINDOW = 78         # KEY_N (with Ctrl)
KEY_CLOSE = 256             # KEY_ESCAPE
KEY_CONFIRM = 257           # KEY_ENTER
KEY_CONFIRM_ALT = 335       # KEY_KP_ENTER
KEY_SHIFT_LEFT = 340
KEY_SHIFT_RIGHT = 344
KEY_CTRL_LEFT = 341
KEY_CTRL_RIGHT = 345

# Supported image extensions (compared lower-case, without the dot)
IMG_EXTS = frozenset({"bmp", "gif", "jpg", "jpeg", "jpe", "jfif", "png", "tif", "tiff"})

# Open dialog filter
OPEN_DIALOG_TITLE = "Open Image"
OPEN_DIALOG_FILETYPES = [
    ("Image files", " ".join(f"*.{ext}" for ext in sorted(IMG_EXTS))),
    ("All files", "*.*"),
]
