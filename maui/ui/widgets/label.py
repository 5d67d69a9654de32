from __future__ import annotations
from typing import Optional, Tuple
import pygame

from maui.ui.widget import BasicWidget
from maui.ui.style import LabelStyle
from maui.ui.fonts import FontCache


class Label(BasicWidget):
    """
    Single line of text, vertically centered, left aligned with style.pad_x.
    Colour follows enabled/selected state; a ring is drawn while focused.
    """
    def __init__(
        self,
        text: str,
        fonts: FontCache,
        *,
        font_path: Optional[str] = None,
        font_size: int = 22,
        style: Optional[LabelStyle] = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
    ):
        super().__init__(x, y, width, height)
        self.text = text
        self.fonts = fonts
        self.font_path = font_path
        self.font_size = int(font_size)
        self.style = style or LabelStyle()

    def fit_height(self, pad_y: int = 8) -> None:
        """Size the label to its font's line height plus vertical padding."""
        line_h = self.fonts.get(self.font_path, self.font_size).get_linesize()
        self.set_height(line_h + pad_y * 2)

    def draw(self, surface: pygame.Surface, translation: Tuple[int, int] = (0, 0)) -> None:
        r = self.rect.move(translation)
        if r.w <= 0 or r.h <= 0:
            return
        st = self.style
        if st.bg_rgba:
            pygame.draw.rect(surface, st.bg_rgba, r, border_radius=4)

        if not self.enabled:
            color = st.disabled_rgb
        elif self.selected:
            color = st.selected_rgb
        else:
            color = st.text_rgb
        surf = self.fonts.render(self.font_path, self.font_size, self.text, color)
        surface.blit(surf, (r.x + st.pad_x, r.y + (r.h - surf.get_height()) // 2))

        if self.focused:
            pygame.draw.rect(surface, st.focus_ring_rgba, r, width=1, border_radius=4)
