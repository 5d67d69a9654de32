from __future__ import annotations
import logging
from typing import List, Optional
import pygame

from maui.settings import AppCfg
from maui.ui.style import Theme
from maui.ui.fonts import FontCache
from maui.ui.motion_tracker import TouchMotionTracker
from maui.ui.widget import Widget
from maui.ui.widgets.label import Label
from maui.ui.widgets.list_box import ListBox, Orientation, AnimationType

logger = logging.getLogger(__name__)


class LoggingSelectionListener:
    """Logs list box notifications; keeps the last message for the status line."""
    def __init__(self, name: str):
        self.name = name
        self.last_message = ""

    def item_selected(self, sender: ListBox, selected_widget: Widget,
                      unselected_widget: Optional[Widget]) -> None:
        self.last_message = f"{self.name}: selected {getattr(selected_widget, 'text', '?')}"
        logger.info("%s: item %d selected", self.name, sender.get_selected_index())

    def blocked(self, sender: ListBox, direction: int) -> None:
        self.last_message = f"{self.name}: blocked ({direction:+d})"
        logger.info("%s: navigation blocked, direction %+d", self.name, direction)


class ListDemoScene:
    """
    A vertical list on the left, a horizontal strip at the bottom.
      - Tab moves key focus between the two lists
      - W toggles wrapping, A toggles linear animation on the focused list
      - Drag / flick / wheel to scroll, click to select
    """
    def __init__(self, cfg: AppCfg, theme: Theme, item_count: int = 30, strip_count: int = 12):
        self.cfg = cfg
        self.theme = theme
        self.fonts = FontCache()
        self.request_quit = False

        lb = cfg.list_box
        self.lists: List[ListBox] = [
            self._make_list(Orientation.parse(lb.orientation), "Item", item_count),
            self._make_list(Orientation.HORIZONTAL, "Tab", strip_count, item_w=120),
        ]
        self.listeners = [LoggingSelectionListener("list"), LoggingSelectionListener("strip")]
        for box, listener in zip(self.lists, self.listeners):
            box.add_item_selected_listener(listener)
            box.set_selected_index(0, fire_listeners=False)
        self._focus = 0
        self.lists[0].set_focused(True)

    def _make_list(self, orientation: Orientation, prefix: str, count: int, item_w: int = 0) -> ListBox:
        lb = self.cfg.list_box
        box = ListBox(
            orientation=orientation,
            animation_type=AnimationType.parse(lb.animation),
            wrapping=lb.wrapping,
            style=self.theme.list_box,
            cfg=lb,
            fling=self.cfg.fling,
            tracker=TouchMotionTracker(self.cfg.tracker.window_ms, self.cfg.tracker.max_samples),
        )
        box.set_auto_size(lb.auto_size)
        for i in range(count):
            label = Label(f"{prefix} {i + 1}", self.fonts, font_path=self.theme.font_path,
                          font_size=self.theme.font_size, style=self.theme.label, width=item_w or 240)
            label.fit_height()
            box.add(label)
        return box

    # --- layout ---
    def on_resize(self, screen: pygame.Surface) -> None:
        w, h = screen.get_size()
        margin = 16
        strip_h = 72
        main, strip = self.lists
        main.set_position(margin, margin)
        main.set_size(max(1, w // 2 - margin * 2), max(1, h - strip_h - margin * 4))
        strip.set_position(margin, h - strip_h - margin)
        strip.set_size(max(1, w - margin * 2), strip_h)

    # --- loop ---
    def handle_event(self, e: pygame.event.Event) -> bool:
        if e.type == pygame.KEYDOWN:
            if e.key == pygame.K_TAB:
                self._cycle_focus()
                return True
            box = self.lists[self._focus]
            if e.key == pygame.K_w:
                box.set_wrapping(not box.is_wrapping())
                logger.info("wrapping -> %s", box.is_wrapping())
                return True
            if e.key == pygame.K_a:
                nxt = AnimationType.NONE if box.get_animation_type() is AnimationType.LINEAR else AnimationType.LINEAR
                box.set_animation_type(nxt)
                logger.info("animation -> %s", nxt.value)
                return True
            return box.handle_event(e)

        for box in self.lists:
            if box.handle_event(e):
                return True
        return False

    def update(self, dt: float) -> None:
        for box in self.lists:
            box.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        for box in self.lists:
            box.draw(surface)
            self._draw_overflow_marks(surface, box)

        msg = next((l.last_message for l in self.listeners if l.last_message), "")
        if msg:
            text = self.fonts.render(self.theme.font_path, max(12, self.theme.font_size - 4), msg,
                                     self.theme.label.text_rgb)
            surface.blit(text, (self.lists[0].rect.right + 24, self.lists[0].rect.y))

    # --- helpers ---
    def _cycle_focus(self) -> None:
        self.lists[self._focus].set_focused(False)
        self._focus = (self._focus + 1) % len(self.lists)
        self.lists[self._focus].set_focused(True)

    def _draw_overflow_marks(self, surface: pygame.Surface, box: ListBox) -> None:
        color = self.theme.label.focus_ring_rgba
        r = box.rect
        vertical = box.get_orientation() is Orientation.VERTICAL
        if box.list_front_outside_bounds():
            if vertical:
                pygame.draw.line(surface, color, (r.x + 8, r.y + 2), (r.right - 8, r.y + 2), 2)
            else:
                pygame.draw.line(surface, color, (r.x + 2, r.y + 8), (r.x + 2, r.bottom - 8), 2)
        if box.list_back_outside_bounds():
            if vertical:
                pygame.draw.line(surface, color, (r.x + 8, r.bottom - 3), (r.right - 8, r.bottom - 3), 2)
            else:
                pygame.draw.line(surface, color, (r.right - 3, r.y + 8), (r.right - 3, r.bottom - 8), 2)
