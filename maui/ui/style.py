from dataclasses import dataclass, replace, field
from typing import Optional

@dataclass
class ListBoxStyle:
    padding: tuple[int, int, int, int] = (6, 6, 6, 6)   # t, r, b, l
    item_gap: int = 4
    radius: int = 10
    bg_rgba: tuple[int, int, int, int] = (20, 22, 27, 235)
    border_rgba: tuple[int, int, int, int] = (60, 64, 72, 255)
    border_px: int = 1
    highlight_rgba: tuple[int, int, int, int] = (120, 160, 240, 96)
    highlight_radius: int = 6
    def derive(self, **overrides): return replace(self, **overrides)

@dataclass
class LabelStyle:
    text_rgb: tuple[int, int, int] = (237, 237, 237)
    disabled_rgb: tuple[int, int, int] = (120, 122, 128)
    selected_rgb: tuple[int, int, int] = (255, 255, 255)
    bg_rgba: Optional[tuple[int, int, int, int]] = None
    focus_ring_rgba: tuple[int, int, int, int] = (255, 255, 255, 160)
    pad_x: int = 10
    def derive(self, **overrides): return replace(self, **overrides)

@dataclass
class Theme:
    font_path: str | None = None
    font_size: int = 22
    bg_rgb: tuple[int, int, int] = (14, 15, 18)
    list_box: ListBoxStyle = field(default_factory=ListBoxStyle)
    label: LabelStyle = field(default_factory=LabelStyle)
