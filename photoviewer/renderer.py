"""Renderer - handles all drawing operations.

The Renderer only reads state and draws to screen. It also owns the GPU
copy of the current image, re-uploading it when the ImageHandle is
replaced or its pixels change.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Tuple

if TYPE_CHECKING:
    from .state import AppState

from .rl_compat import (
    rl,
    make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    draw_text as RL_DrawText, measure_text,
    texture_from_pil, set_texture_filter, is_texture_valid,
)
from .types import ImageHandle
from .view_math import image_rect
from .state.ui import MenuPanel
from .config import (
    MENU_ITEM_HEIGHT, MENU_FONT_SIZE, MENU_BG_ALPHA, MENU_HOVER_ALPHA,
    NOTIFY_WIDTH, NOTIFY_HEIGHT, NOTIFY_TITLE_SIZE, NOTIFY_TEXT_SIZE, NOTIFY_PADDING,
    EMPTY_HINT, EMPTY_HINT_SIZE,
)
from .logging import log


def _contrast_rgb(bg: Tuple[int, int, int]) -> Tuple[int, int, int]:
    """Gray that stays readable on the given background."""
    return (90, 90, 90) if sum(bg) >= 384 else (170, 170, 170)


@dataclass
class Renderer:
    """
    Handles all drawing operations.

    Usage:
        renderer = Renderer()
        renderer.draw_frame(state)
        ...
        renderer.unload()
    """

    _tex: Any = None
    _tex_src: Optional[ImageHandle] = None
    _tex_rev: int = -1

    # ═══════════════════════════════════════════════════════════════════════
    # Texture management
    # ═══════════════════════════════════════════════════════════════════════

    def _sync_texture(self, ti: Optional[ImageHandle]) -> None:
        """Make sure the GPU texture matches the current image pixels."""
        if ti is self._tex_src and (ti is None or ti.revision == self._tex_rev):
            return
        self.unload()
        if ti is not None:
            self._tex = texture_from_pil(ti.image)
            self._tex_src = ti
            self._tex_rev = ti.revision
            log(f"[TEX] Uploaded {ti.w}x{ti.h} rev={ti.revision}")

    def unload(self) -> None:
        """Release the GPU texture, if any."""
        if self._tex is not None and is_texture_valid(self._tex):
            rl.UnloadTexture(self._tex)
        self._tex = None
        self._tex_src = None
        self._tex_rev = -1

    # ═══════════════════════════════════════════════════════════════════════
    # Frame
    # ═══════════════════════════════════════════════════════════════════════

    def draw_frame(self, state: "AppState") -> None:
        """Draw the whole window for the current state."""
        self._sync_texture(state.view.image)

        rl.BeginDrawing()
        try:
            bg = state.ui.bg_color
            rl.ClearBackground(RL_Color(bg[0], bg[1], bg[2], 255))
            self.draw_image(state)
            self.draw_context_menu(state)
            self.draw_notification(state)
        finally:
            rl.EndDrawing()

    # ═══════════════════════════════════════════════════════════════════════
    # Image rendering
    # ═══════════════════════════════════════════════════════════════════════

    def draw_image(self, state: "AppState") -> None:
        """Draw the current image at the current viewport."""
        ti = state.view.image
        if ti is None or self._tex is None:
            self._draw_empty_hint(state)
            return

        set_texture_filter(self._tex, state.ui.interpolation)
        rl.DrawTexturePro(
            self._tex,
            RL_Rect(0, 0, ti.w, ti.h),
            RL_Rect(*image_rect(state.view.view, ti.w, ti.h)),
            RL_V2(0, 0), 0.0, RL_Color(255, 255, 255, 255)
        )

    def _draw_empty_hint(self, state: "AppState") -> None:
        cw, ch = state.window.size
        c = _contrast_rgb(state.ui.bg_color)
        tw = measure_text(EMPTY_HINT, EMPTY_HINT_SIZE)
        RL_DrawText(EMPTY_HINT, (cw - tw) // 2, (ch - EMPTY_HINT_SIZE) // 2,
                    EMPTY_HINT_SIZE, RL_Color(c[0], c[1], c[2], 255))

    # ═══════════════════════════════════════════════════════════════════════
    # Context menu
    # ═══════════════════════════════════════════════════════════════════════

    def draw_context_menu(self, state: "AppState") -> None:
        menu = state.ui.context_menu
        if not menu.visible:
            return
        for panel in menu.layout(state.window.client_w, state.window.client_h):
            self._draw_menu_panel(panel, menu.hover)

    def _draw_menu_panel(self, panel: MenuPanel, hover: Tuple[int, ...]) -> None:
        x, y, w, h = panel.rect
        rl.DrawRectangle(int(x), int(y), int(w), int(h),
                         RL_Color(245, 245, 245, int(255 * MENU_BG_ALPHA)))
        rl.DrawRectangleLinesEx(RL_Rect(x, y, w, h), 1.0, RL_Color(120, 120, 120, 255))

        text_color = RL_Color(20, 20, 20, 255)
        text_dy = (MENU_ITEM_HEIGHT - MENU_FONT_SIZE) // 2
        for i, item in enumerate(panel.items):
            ix, iy, iw, ih = panel.item_rect(i)
            if hover == panel.path + (i,):
                rl.DrawRectangle(int(ix), int(iy), int(iw), int(ih),
                                 RL_Color(0, 120, 215, int(255 * MENU_HOVER_ALPHA)))
            if item.checked:
                rl.DrawCircle(int(ix + 12), int(iy + ih / 2), 4.0, text_color)
            RL_DrawText(item.label, int(ix + 26), int(iy + text_dy), MENU_FONT_SIZE, text_color)
            if item.has_submenu:
                RL_DrawText(">", int(ix + iw - 18), int(iy + text_dy), MENU_FONT_SIZE, text_color)

    # ═══════════════════════════════════════════════════════════════════════
    # Notification
    # ═══════════════════════════════════════════════════════════════════════

    def draw_notification(self, state: "AppState") -> None:
        note = state.ui.notification
        if not note.visible:
            return

        cw, ch = state.window.size
        rl.DrawRectangle(0, 0, cw, ch, RL_Color(0, 0, 0, 110))

        x = (cw - NOTIFY_WIDTH) // 2
        y = (ch - NOTIFY_HEIGHT) // 2
        rl.DrawRectangle(x, y, NOTIFY_WIDTH, NOTIFY_HEIGHT, RL_Color(250, 250, 250, 255))
        rl.DrawRectangleLinesEx(RL_Rect(x, y, NOTIFY_WIDTH, NOTIFY_HEIGHT), 1.0,
                                RL_Color(200, 40, 40, 255))

        ty = y + NOTIFY_PADDING
        RL_DrawText(note.title, x + NOTIFY_PADDING, ty, NOTIFY_TITLE_SIZE, RL_Color(200, 40, 40, 255))
        ty += NOTIFY_TITLE_SIZE + NOTIFY_PADDING // 2
        for line in note.text.splitlines():
            if line:
                RL_DrawText(line, x + NOTIFY_PADDING, ty, NOTIFY_TEXT_SIZE, RL_Color(30, 30, 30, 255))
            ty += NOTIFY_TEXT_SIZE + 2

        ok = "OK"
        ok_w = measure_text(ok, NOTIFY_TEXT_SIZE)
        RL_DrawText(ok, x + NOTIFY_WIDTH - NOTIFY_PADDING - ok_w,
                    y + NOTIFY_HEIGHT - NOTIFY_PADDING - NOTIFY_TEXT_SIZE,
                    NOTIFY_TEXT_SIZE, RL_Color(0, 90, 180, 255))
