"""UI state - context menu, notification box, display options."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from ..config import MENU_ITEM_HEIGHT, MENU_ITEM_WIDTH, MENU_PADDING, MENU_MARGIN
from ..math_utils import split_camel_case
from ..types import Interpolation, BackgroundColor, UIAction

# (x, y, w, h)
Rect = Tuple[float, float, float, float]


@dataclass
class MenuItem:
    """A single context menu entry; entries with children open a submenu."""
    label: str
    action: Optional[UIAction] = None
    payload: Any = None
    children: List[MenuItem] = field(default_factory=list)
    checked: bool = False

    @property
    def has_submenu(self) -> bool:
        return bool(self.children)


def build_menu_items(interpolation: Interpolation,
                     background: BackgroundColor) -> List[MenuItem]:
    """Context menu entries with check marks for the current options."""
    interpolation_items = [
        MenuItem(split_camel_case(mode.name), UIAction.SET_INTERPOLATION, mode,
                 checked=(mode == interpolation))
        for mode in Interpolation
    ]
    background_items = [
        MenuItem(color.name, UIAction.SET_BACKGROUND, color,
                 checked=(color == background))
        for color in BackgroundColor
    ]
    return [
        MenuItem("Open", UIAction.OPEN_IMAGE),
        MenuItem("Interpolation", children=interpolation_items),
        MenuItem("Background", children=background_items),
        MenuItem("Reset View", UIAction.RESET_FIT),
        MenuItem("Actual Size", UIAction.RESET_ACTUAL_SIZE),
        MenuItem("New Window", UIAction.NEW_WINDOW),
    ]


@dataclass
class MenuPanel:
    """One drawn column of menu items (the root menu or an open submenu)."""
    rect: Rect
    items: List[MenuItem]
    path: Tuple[int, ...]  # path of the parent item, () for the root

    def item_rect(self, index: int) -> Rect:
        x, y, w, _ = self.rect
        return (x, y + MENU_PADDING + index * MENU_ITEM_HEIGHT, w, MENU_ITEM_HEIGHT)


def _panel_size(n_items: int) -> Tuple[int, int]:
    return MENU_ITEM_WIDTH, n_items * MENU_ITEM_HEIGHT + MENU_PADDING * 2


def _contains(rect: Rect, x: float, y: float) -> bool:
    rx, ry, rw, rh = rect
    return rx <= x < rx + rw and ry <= y < ry + rh


@dataclass
class ContextMenuState:
    """State for right-click context menu."""
    visible: bool = False
    x: int = 0
    y: int = 0
    items: List[MenuItem] = field(default_factory=list)
    hover: Tuple[int, ...] = ()
    open_submenu: int = -1

    def show(self, x: int, y: int, items: List[MenuItem]) -> None:
        """Show menu at position."""
        self.visible = True
        self.x = x
        self.y = y
        self.items = items
        self.hover = ()
        self.open_submenu = -1

    def hide(self) -> None:
        self.visible = False
        self.hover = ()
        self.open_submenu = -1

    def layout(self, screen_w: int, screen_h: int) -> List[MenuPanel]:
        """Panels to draw, root first, kept inside the window."""
        if not self.visible or not self.items:
            return []

        w, h = _panel_size(len(self.items))
        x = max(MENU_MARGIN, min(self.x, screen_w - w - MENU_MARGIN))
        y = max(MENU_MARGIN, min(self.y, screen_h - h - MENU_MARGIN))
        root = MenuPanel((x, y, w, h), self.items, ())
        panels = [root]

        if 0 <= self.open_submenu < len(self.items):
            parent = self.items[self.open_submenu]
            if parent.has_submenu:
                sw, sh = _panel_size(len(parent.children))
                _, item_y, _, _ = root.item_rect(self.open_submenu)
                sx = x + w
                if sx + sw > screen_w - MENU_MARGIN:
                    sx = x - sw
                sy = max(MENU_MARGIN, min(item_y - MENU_PADDING, screen_h - sh - MENU_MARGIN))
                panels.append(MenuPanel((sx, sy, sw, sh), parent.children,
                                        (self.open_submenu,)))
        return panels

    def item_at(self, mx: float, my: float,
                screen_w: int, screen_h: int) -> Optional[Tuple[int, ...]]:
        """Path of the item under the pointer, or None outside the menu."""
        # Submenus are drawn on top, so test them first
        for panel in reversed(self.layout(screen_w, screen_h)):
            if not _contains(panel.rect, mx, my):
                continue
            for i in range(len(panel.items)):
                if _contains(panel.item_rect(i), mx, my):
                    return panel.path + (i,)
            return panel.path
        return None

    def contains(self, mx: float, my: float, screen_w: int, screen_h: int) -> bool:
        return self.item_at(mx, my, screen_w, screen_h) is not None

    def update_hover(self, mx: float, my: float, screen_w: int, screen_h: int) -> None:
        """Track the hovered item and open the submenu under the pointer."""
        path = self.item_at(mx, my, screen_w, screen_h)
        self.hover = path or ()
        if path and len(path) == 1:
            item = self.items[path[0]]
            self.open_submenu = path[0] if item.has_submenu else -1

    def get_item(self, path: Tuple[int, ...]) -> Optional[MenuItem]:
        """Resolve an item path such as (1, 2) to its MenuItem."""
        items = self.items
        item = None
        for index in path:
            if not 0 <= index < len(items):
                return None
            item = items[index]
            items = item.children
        return item


@dataclass
class NotificationState:
    """A modal message box; while visible it swallows input."""
    visible: bool = False
    title: str = ""
    text: str = ""

    def show(self, title: str, text: str) -> None:
        self.visible = True
        self.title = title
        self.text = text

    def dismiss(self) -> bool:
        was_visible = self.visible
        self.visible = False
        return was_visible


@dataclass
class UIState:
    """State for UI elements and display options."""
    interpolation: Interpolation = Interpolation.NearestNeighbor
    background: BackgroundColor = BackgroundColor.Black
    context_menu: ContextMenuState = field(default_factory=ContextMenuState)
    notification: NotificationState = field(default_factory=NotificationState)

    @property
    def bg_color(self) -> Tuple[int, int, int]:
        return self.background.rgb

    def menu_items(self) -> List[MenuItem]:
        return build_menu_items(self.interpolation, self.background)
