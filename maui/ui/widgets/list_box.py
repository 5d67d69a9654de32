from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Protocol, Tuple
import logging
import pygame

from maui.settings import ListBoxCfg, FlingCfg
from maui.ui.anim import ScrollAnimation, ease_linear, ease_out_cubic, ease_out_quad
from maui.ui.motion_tracker import MotionTracker, TouchMotionTracker
from maui.ui.scroll_model import ScrollModel
from maui.ui.style import ListBoxStyle
from maui.ui.widget import BasicWidget, Widget

logger = logging.getLogger(__name__)

NO_SELECTION = -1


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, name: str) -> "Orientation":
        try:
            return cls(str(name).lower())
        except ValueError:
            raise ValueError(f"Unknown list box orientation: {name!r}") from None


class AnimationType(Enum):
    NONE = "none"
    LINEAR = "linear"

    @classmethod
    def parse(cls, name: str) -> "AnimationType":
        try:
            return cls(str(name).lower())
        except ValueError:
            raise ValueError(f"Unknown list box animation type: {name!r}") from None


class ItemSelectedListener(Protocol):
    def item_selected(self, sender: "ListBox", selected_widget: Widget,
                      unselected_widget: Optional[Widget]) -> None: ...
    # direction is -1 for select_previous_item, +1 for select_next_item
    def blocked(self, sender: "ListBox", direction: int) -> None: ...


@dataclass
class TouchState:
    touched: bool = False
    dir_x: float = 0.0
    dir_y: float = 0.0
    vel_x: float = 0.0
    vel_y: float = 0.0
    release_ms: int = 0
    touched_offset: int = 0             # scroll offset when the press started
    press_pos: Tuple[int, int] = (0, 0)
    last_pos: Tuple[int, int] = (0, 0)
    travel: int = 0                     # furthest distance from press_pos along the axis


def _call(widget: Optional[Widget], name: str, *args) -> None:
    fn = getattr(widget, name, None) if widget is not None else None
    if callable(fn):
        fn(*args)


class ListBox(BasicWidget):
    """
    Single-axis container with a selection cursor and a scrollable window.

    - Children are laid out back to back along the orientation axis
    - Navigation is decoupled from input: select_next_item()/select_previous_item()
      wrap around or report `blocked` to listeners
    - scroll_offset is how far the content is scrolled towards its back;
      selection changes jump there or animate linearly on run_timer_event()
    - Pointer drags move the offset freely (overscroll allowed); release
      snaps back into bounds or flings with constant deceleration
    """
    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        orientation: Orientation = Orientation.VERTICAL,
        animation_type: AnimationType = AnimationType.NONE,
        wrapping: bool = True,
        *,
        style: Optional[ListBoxStyle] = None,
        cfg: Optional[ListBoxCfg] = None,
        fling: Optional[FlingCfg] = None,
        clock: Optional[Callable[[], int]] = None,
        tracker: Optional[MotionTracker] = None,
    ):
        super().__init__(x, y, width, height)
        self.style = style or ListBoxStyle()
        self.cfg = cfg or ListBoxCfg()
        self.fling = fling or FlingCfg()
        self._clock = clock or pygame.time.get_ticks
        self._tracker: MotionTracker = tracker or TouchMotionTracker()

        self.children: List[Widget] = []
        self._orientation = orientation
        self._animation_type = animation_type
        self._wrapping = bool(wrapping)
        self._auto_size = False
        self._selected_index = NO_SELECTION
        self._scroll_offset = 0
        self._animation: Optional[ScrollAnimation] = None
        self.draw_background = True
        self.focused_widget: Optional[Widget] = None
        self.touch = TouchState()
        self._item_listeners: List[ItemSelectedListener] = []

        # Layout along the axis in content space: (start, length) per child
        self._slots: List[Tuple[int, int]] = []
        self._content_extent = 0
        self._rebuilding = False
        self._hover_pos: Tuple[int, int] = (-1, -1)

    # ------------------------------------------------------------------ #
    # Children
    # ------------------------------------------------------------------ #
    def add(self, w: Widget) -> None:
        if self._index_of(w) >= 0:
            logger.debug("ListBox.add: widget already a child, ignoring")
            return
        self.children.append(w)
        w.add_widget_listener(self)
        self.rebuild()

    def remove(self, w: Widget) -> None:
        idx = self._index_of(w)
        if idx < 0:
            return
        del self.children[idx]
        w.remove_widget_listener(self)
        if w is self.focused_widget:
            self.focused_widget = None
        if idx == self._selected_index:
            _call(w, "set_selected", False)
            if self.focused:
                _call(w, "set_focused", False)
            self._selected_index = NO_SELECTION
        elif idx < self._selected_index:
            self._selected_index -= 1
        self.rebuild()
        self._animation = None
        self._scroll_offset = self._scroll_model().nearest_bound()

    def clear(self) -> None:
        for w in self.children:
            w.remove_widget_listener(self)
        _call(self.get_selected_widget(), "set_selected", False)
        self.children.clear()
        self._slots.clear()
        self._content_extent = 0
        self._selected_index = NO_SELECTION
        self._scroll_offset = 0
        self._animation = None
        self.focused_widget = None
        self.touch = TouchState()

    def rebuild(self) -> None:
        """Reposition every child sequentially along the axis (autosizing the cross axis)."""
        self._rebuilding = True
        try:
            inner = self._inner_rect()
            gap = max(0, int(self.style.item_gap))
            pos = 0
            slots: List[Tuple[int, int]] = []
            for w in self.children:
                if self._vertical():
                    if self._auto_size:
                        w.set_width(inner.w)
                    w.set_position(inner.x, inner.y + pos)
                    length = w.rect.h
                else:
                    if self._auto_size:
                        w.set_height(inner.h)
                    w.set_position(inner.x + pos, inner.y)
                    length = w.rect.w
                slots.append((pos, length))
                pos += length + gap
            self._slots = slots
            self._content_extent = (pos - gap) if slots else 0
        finally:
            self._rebuilding = False

    # ------------------------------------------------------------------ #
    # Selection
    # ------------------------------------------------------------------ #
    def select_next_item(self, fire_listeners: bool = True) -> None:
        """Down when vertical, right when horizontal."""
        self._navigate(+1, fire_listeners)

    def select_previous_item(self, fire_listeners: bool = True) -> None:
        """Up when vertical, left when horizontal."""
        self._navigate(-1, fire_listeners)

    def set_selected_index(self, index: int, fire_listeners: bool = True) -> None:
        """
        NO_SELECTION clears the selection (no notification). Anything else
        out of range is clamped to the first/last child.
        """
        index = int(index)
        if index == NO_SELECTION:
            old_w = self.get_selected_widget()
            _call(old_w, "set_selected", False)
            self._selected_index = NO_SELECTION
            if self.focused and old_w is not None:
                if self.focused_widget is old_w:
                    self.focused_widget = None
                _call(old_w, "set_focused", False)
            return
        n = len(self.children)
        if n == 0:
            logger.debug("ListBox.set_selected_index(%d) on empty list ignored", index)
            return
        clamped = max(0, min(n - 1, index))
        if clamped != index:
            logger.debug("ListBox.set_selected_index(%d) clamped to %d", index, clamped)
        self._change_selection(clamped, fire_listeners)

    def get_selected_index(self) -> int:
        return self._selected_index

    def get_selected_widget(self) -> Optional[Widget]:
        if self._selected_index == NO_SELECTION:
            return None
        return self.children[self._selected_index]

    def add_item_selected_listener(self, listener: ItemSelectedListener) -> None:
        if not any(l is listener for l in self._item_listeners):
            self._item_listeners.append(listener)

    def remove_item_selected_listener(self, listener: ItemSelectedListener) -> None:
        self._item_listeners = [l for l in self._item_listeners if l is not listener]

    # ------------------------------------------------------------------ #
    # Properties
    # ------------------------------------------------------------------ #
    def set_orientation(self, orientation: Orientation) -> None:
        if orientation is self._orientation:
            return
        self._orientation = orientation
        self._animation = None
        self.rebuild()
        self._scroll_offset = self._scroll_model().nearest_bound()

    def get_orientation(self) -> Orientation:
        return self._orientation

    def set_animation_type(self, animation_type: AnimationType) -> None:
        self._animation_type = animation_type
        if animation_type is AnimationType.NONE and self._animation is not None:
            self._scroll_offset = self._animation.offset_to
            self._animation = None

    def get_animation_type(self) -> AnimationType:
        return self._animation_type

    def set_wrapping(self, wrapping: bool = True) -> None:
        self._wrapping = bool(wrapping)

    def is_wrapping(self) -> bool:
        return self._wrapping

    def set_auto_size(self, auto_size: bool = True) -> None:
        self._auto_size = bool(auto_size)
        self._relayout()

    def is_auto_size(self) -> bool:
        return self._auto_size

    def set_draw_background(self, draw: bool = True) -> None:
        self.draw_background = bool(draw)

    def is_transparent(self) -> bool:
        return not self.draw_background

    def get_scroll_offset(self) -> int:
        return self._scroll_offset

    def set_scroll_offset(self, offset: int) -> None:
        self._animation = None
        self._scroll_offset = int(offset)

    def get_translation_x(self) -> int:
        return 0 if self._vertical() else -self._scroll_offset

    def get_translation_y(self) -> int:
        return -self._scroll_offset if self._vertical() else 0

    def is_animating(self) -> bool:
        return self._animation is not None

    def list_front_outside_bounds(self) -> bool:
        """True when the first child starts before the visible window."""
        if not self._slots:
            return False
        start, _ = self._slots[0]
        return start - self._scroll_offset < 0

    def list_back_outside_bounds(self) -> bool:
        """True when the last child ends past the visible window."""
        if not self._slots:
            return False
        start, length = self._slots[-1]
        return start + length - self._scroll_offset > self._viewport_extent()

    # ------------------------------------------------------------------ #
    # Focus / enable
    # ------------------------------------------------------------------ #
    def is_focusable(self) -> bool:
        return self.enabled and bool(self.children)

    def is_focusable_in_key_mode(self) -> bool:
        return self.is_focusable()

    def set_focused(self, focused: bool = True) -> None:
        super().set_focused(focused)
        _call(self.focused_widget or self.get_selected_widget(), "set_focused", bool(focused))

    def set_focused_widget(self, w: Optional[Widget]) -> None:
        if w is not None and self._index_of(w) < 0:
            logger.debug("ListBox.set_focused_widget: widget is not a child, ignoring")
            return
        prev = self.focused_widget
        if prev is w:
            return
        self.focused_widget = w
        if self.focused:
            _call(prev, "set_focused", False)
            _call(w, "set_focused", True)

    def set_enabled(self, enabled: bool = True) -> None:
        super().set_enabled(enabled)
        for w in self.children:
            _call(w, "set_enabled", bool(enabled))
        if not enabled:
            self.touch.touched = False

    # WidgetListener
    def bounds_changed(self, widget: Widget, rect: pygame.Rect) -> None:
        if self._rebuilding or self._index_of(widget) < 0:
            return
        self._relayout()

    def focus_changed(self, widget: Widget, focused: bool) -> None:
        if not focused:
            return
        idx = self._index_of(widget)
        if idx < 0:
            return
        self.focused_widget = widget
        self._change_selection(idx, True)

    # ------------------------------------------------------------------ #
    # Timer
    # ------------------------------------------------------------------ #
    def run_timer_event(self) -> None:
        a = self._animation
        if a is None:
            return
        now = self._now()
        self._scroll_offset = a.value_at(now)
        if a.finished(now):
            self._animation = None

    def update(self, dt: float) -> None:
        if self._animation is not None:
            self.run_timer_event()

    # ------------------------------------------------------------------ #
    # Input
    # ------------------------------------------------------------------ #
    def pointer_pressed(self, point: Tuple[int, int], id: int = 0) -> bool:
        if not self.enabled or not self.rect.collidepoint(point):
            return False
        pos = (int(point[0]), int(point[1]))
        self._animation = None
        self.touch = TouchState(touched=True, touched_offset=self._scroll_offset,
                                press_pos=pos, last_pos=pos)
        self._tracker.reset()
        self._tracker.add_point(pos[0], pos[1], self._now())
        return True

    def pointer_moved(self, point: Tuple[int, int], id: int = 0) -> bool:
        t = self.touch
        if not t.touched:
            return False
        pos = (int(point[0]), int(point[1]))
        self._tracker.add_point(pos[0], pos[1], self._now())
        self._scroll_offset -= self._axis(pos) - self._axis(t.last_pos)
        t.last_pos = pos
        t.travel = max(t.travel, abs(self._axis(pos) - self._axis(t.press_pos)))
        return True

    def pointer_released(self, point: Tuple[int, int], id: int = 0) -> bool:
        t = self.touch
        if not t.touched:
            return False
        pos = (int(point[0]), int(point[1]))
        if pos != t.last_pos:
            self.pointer_moved(pos, id)
        t.touched = False
        t.release_ms = self._now()
        t.vel_x, t.vel_y = self._tracker.velocity()
        t.dir_x, t.dir_y = self._tracker.direction()

        if t.travel < self.cfg.tap_slop_px:
            self._settle(0.0)
            idx = self._child_at(pos)
            if idx >= 0:
                self._change_selection(idx, True)
            return True

        self._settle(t.vel_y if self._vertical() else t.vel_x)
        return True

    def key_pressed(self, key_code: int, native_code: int = 0) -> bool:
        if not self.enabled:
            return False
        handler = getattr(self.focused_widget, "key_pressed", None)
        if callable(handler) and handler(key_code, native_code):
            return True
        if self._vertical():
            prev_key, next_key = pygame.K_UP, pygame.K_DOWN
        else:
            prev_key, next_key = pygame.K_LEFT, pygame.K_RIGHT
        if key_code == next_key:
            self.select_next_item()
            return True
        if key_code == prev_key:
            self.select_previous_item()
            return True
        return False

    def wheel_scrolled(self, dy: int) -> bool:
        if not self.enabled:
            return False
        self._animation = None
        model = self._scroll_model()
        model.scroll(-int(dy) * self.cfg.wheel_pixels)
        self._scroll_offset = model.offset
        return True

    def handle_event(self, e: pygame.event.Event) -> bool:
        """pygame adapter: left mouse button as pointer 0, KEYDOWN, wheel while hovered."""
        if e.type == pygame.MOUSEBUTTONDOWN and getattr(e, "button", 0) == 1:
            return self.pointer_pressed(e.pos, 0)
        if e.type == pygame.MOUSEMOTION:
            self._hover_pos = e.pos
            return self.pointer_moved(e.pos, 0)
        if e.type == pygame.MOUSEBUTTONUP and getattr(e, "button", 0) == 1:
            return self.pointer_released(e.pos, 0)
        if e.type == pygame.KEYDOWN:
            return self.key_pressed(e.key, getattr(e, "scancode", 0))
        if e.type == pygame.MOUSEWHEEL and self.rect.collidepoint(self._hover_pos):
            step = e.y if (self._vertical() or not e.x) else -e.x
            return self.wheel_scrolled(step)
        return False

    # ------------------------------------------------------------------ #
    # Drawing
    # ------------------------------------------------------------------ #
    def draw(self, surface: pygame.Surface, translation: Tuple[int, int] = (0, 0)) -> None:
        st = self.style
        r = self.rect.move(translation)
        if self.draw_background:
            pygame.draw.rect(surface, st.bg_rgba, r, border_radius=st.radius)
            if st.border_px > 0:
                pygame.draw.rect(surface, st.border_rgba, r, width=st.border_px, border_radius=st.radius)

        inner = self._inner_rect().move(translation)
        if inner.w <= 0 or inner.h <= 0:
            return
        old_clip = surface.get_clip()
        surface.set_clip(inner.clip(old_clip))
        try:
            tx = translation[0] + self.get_translation_x()
            ty = translation[1] + self.get_translation_y()
            selected = self.get_selected_widget()
            for w in self.children:
                wr = w.rect.move(tx, ty)
                if not wr.colliderect(inner):
                    continue
                if w is selected and st.highlight_rgba[3] > 0:
                    pygame.draw.rect(surface, st.highlight_rgba, wr, border_radius=st.highlight_radius)
                w.draw(surface, (tx, ty))
        finally:
            surface.set_clip(old_clip)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _on_bounds_changed(self) -> None:
        self._relayout()

    def _relayout(self) -> None:
        """Rebuild, then pull a resting offset (or an animation target) back into bounds."""
        self.rebuild()
        if self.touch.touched:
            return
        model = self._scroll_model()
        a = self._animation
        if a is not None:
            target = model.clamped(a.offset_to)
            if target != a.offset_to:
                self._animation = None
                self._scroll_offset = target
            return
        self._scroll_offset = model.nearest_bound()

    def _now(self) -> int:
        return int(self._clock())

    def _vertical(self) -> bool:
        return self._orientation is Orientation.VERTICAL

    def _axis(self, pos: Tuple[int, int]) -> int:
        return pos[1] if self._vertical() else pos[0]

    def _index_of(self, w: Widget) -> int:
        for i, c in enumerate(self.children):
            if c is w:
                return i
        return -1

    def _inner_rect(self) -> pygame.Rect:
        t, r, b, l = self.style.padding
        return pygame.Rect(self.rect.x + l, self.rect.y + t,
                           max(0, self.rect.w - l - r), max(0, self.rect.h - t - b))

    def _viewport_extent(self) -> int:
        inner = self._inner_rect()
        return inner.h if self._vertical() else inner.w

    def _scroll_model(self, offset: Optional[int] = None) -> ScrollModel:
        return ScrollModel(
            content=self._content_extent,
            viewport=self._viewport_extent(),
            offset=self._scroll_offset if offset is None else offset,
        )

    def _child_at(self, pos: Tuple[int, int]) -> int:
        if not self._inner_rect().collidepoint(pos):
            return -1
        x, y = pos
        if self._vertical():
            y += self._scroll_offset
        else:
            x += self._scroll_offset
        for i, w in enumerate(self.children):
            if w.rect.collidepoint((x, y)):
                return i
        return -1

    def _navigate(self, direction: int, fire_listeners: bool) -> None:
        n = len(self.children)
        if n == 0:
            return
        if self._selected_index == NO_SELECTION:
            candidate = 0 if direction > 0 else n - 1
        else:
            candidate = self._selected_index + direction
        if not 0 <= candidate < n:
            if not self._wrapping:
                logger.debug("ListBox navigation blocked (direction=%+d)", direction)
                for l in tuple(self._item_listeners):
                    l.blocked(self, direction)
                return
            candidate = 0 if direction > 0 else n - 1
        self._change_selection(candidate, fire_listeners)

    def _change_selection(self, index: int, fire_listeners: bool) -> None:
        prev = self._selected_index
        if index == prev:
            return
        old_w = self.children[prev] if prev != NO_SELECTION else None
        new_w = self.children[index]
        self._selected_index = index
        _call(old_w, "set_selected", False)
        _call(new_w, "set_selected", True)
        if self.focused:
            self.focused_widget = new_w
            _call(old_w, "set_focused", False)
            _call(new_w, "set_focused", True)
        self._scroll_into_view(index)
        if fire_listeners:
            for l in tuple(self._item_listeners):
                l.item_selected(self, new_w, old_w)

    def _scroll_into_view(self, index: int) -> None:
        start, length = self._slots[index]
        resting = self._animation.offset_to if self._animation is not None else self._scroll_offset
        target = self._scroll_model(resting).reveal(start, start + length)
        self._scroll_to(target, self.cfg.animation_ms, ease_linear)

    def _scroll_to(self, target: int, duration_ms: int, ease: Callable[[float], float]) -> None:
        if self._animation_type is AnimationType.NONE or duration_ms <= 0 or target == self._scroll_offset:
            self._animation = None
            self._scroll_offset = int(target)
            return
        self._animation = ScrollAnimation(self._scroll_offset, int(target), self._now(), int(duration_ms), ease)

    def _settle(self, velocity: float) -> None:
        """
        After release: overscroll animates back to the nearest bound; otherwise a
        fast enough release flings v*|v|/(2*decel) px against the finger motion,
        decelerating uniformly for |v|/decel seconds (capped).
        """
        model = self._scroll_model()
        if model.outside():
            self._scroll_to(model.nearest_bound(), self.cfg.snap_back_ms, ease_out_cubic)
            return
        if self._animation_type is AnimationType.NONE:
            return
        speed = abs(velocity)
        decel = self.fling.deceleration
        if speed < self.fling.min_velocity or decel <= 0:
            return
        distance = velocity * speed / (2.0 * decel)
        duration_ms = min(int(self.fling.max_duration_ms), int(speed / decel * 1000.0))
        target = model.clamped(self._scroll_offset - int(round(distance)))
        if target != self._scroll_offset:
            self._scroll_to(target, duration_ms, ease_out_quad)
