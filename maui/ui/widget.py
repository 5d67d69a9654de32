from __future__ import annotations
from typing import List, Protocol, Tuple
import pygame


class WidgetListener(Protocol):
    def bounds_changed(self, widget: "Widget", rect: pygame.Rect) -> None: ...
    def focus_changed(self, widget: "Widget", focused: bool) -> None: ...


class Widget(Protocol):
    """
    Capability a list box needs from its children. Anything with a rect,
    a draw hook and listener registration can be laid out; selection,
    focus, enable and key hooks are looked up with getattr when present.
    """
    rect: pygame.Rect

    def set_position(self, x: int, y: int) -> None: ...
    def set_width(self, w: int) -> None: ...
    def set_height(self, h: int) -> None: ...
    def draw(self, surface: pygame.Surface, translation: Tuple[int, int] = (0, 0)) -> None: ...
    def add_widget_listener(self, listener: WidgetListener) -> None: ...
    def remove_widget_listener(self, listener: WidgetListener) -> None: ...


class BasicWidget:
    """
    Plain geometry + state holder implementing the Widget capability.
      - Geometry setters notify listeners through bounds_changed()
      - set_focused() notifies through focus_changed()
      - draw() is a no-op; subclasses paint inside self.rect moved by `translation`
    """
    def __init__(self, x: int = 0, y: int = 0, width: int = 0, height: int = 0) -> None:
        self.rect = pygame.Rect(int(x), int(y), max(0, int(width)), max(0, int(height)))
        self.enabled = True
        self.focused = False
        self.selected = False
        self._listeners: List[WidgetListener] = []

    # ----- listeners -----
    def add_widget_listener(self, listener: WidgetListener) -> None:
        if not any(l is listener for l in self._listeners):
            self._listeners.append(listener)

    def remove_widget_listener(self, listener: WidgetListener) -> None:
        self._listeners = [l for l in self._listeners if l is not listener]

    # ----- geometry -----
    def set_position(self, x: int, y: int) -> None:
        self._set_rect(pygame.Rect(int(x), int(y), self.rect.w, self.rect.h))

    def set_size(self, w: int, h: int) -> None:
        self._set_rect(pygame.Rect(self.rect.x, self.rect.y, max(0, int(w)), max(0, int(h))))

    def set_width(self, w: int) -> None:
        self.set_size(w, self.rect.h)

    def set_height(self, h: int) -> None:
        self.set_size(self.rect.w, h)

    def hit_test(self, pos: Tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)

    # ----- state -----
    def set_enabled(self, enabled: bool = True) -> None:
        self.enabled = bool(enabled)

    def set_selected(self, selected: bool = True) -> None:
        self.selected = bool(selected)

    def set_focused(self, focused: bool = True) -> None:
        focused = bool(focused)
        if focused == self.focused:
            return
        self.focused = focused
        for l in list(self._listeners):
            l.focus_changed(self, focused)

    def draw(self, surface: pygame.Surface, translation: Tuple[int, int] = (0, 0)) -> None:
        pass

    # ----- helpers -----
    def _set_rect(self, rect: pygame.Rect) -> None:
        if rect == self.rect:
            return
        self.rect = rect
        self._on_bounds_changed()
        for l in list(self._listeners):
            l.bounds_changed(self, self.rect.copy())

    def _on_bounds_changed(self) -> None:
        """Hook for subclasses that re-layout on resize."""
