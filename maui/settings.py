from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict
import logging

import yaml

from maui.ui.style import Theme

logger = logging.getLogger(__name__)

@dataclass
class WindowCfg:
    width: int = 960
    height: int = 600
    title: str = "MAUI ListBox"
    bg_rgb: tuple[int, int, int] = (14, 15, 18)

@dataclass
class ListBoxCfg:
    orientation: str = "vertical"    # vertical | horizontal
    animation: str = "none"          # none | linear
    wrapping: bool = True
    auto_size: bool = True
    animation_ms: int = 250          # Selection scroll animation length
    snap_back_ms: int = 200          # Overscroll -> nearest bound after release
    tap_slop_px: int = 8             # Release within this travel counts as a tap
    wheel_pixels: int = 40

@dataclass
class FlingCfg:
    min_velocity: float = 300.0      # px/s along the list axis
    deceleration: float = 4000.0     # px/s^2
    max_duration_ms: int = 900

@dataclass
class TrackerCfg:
    window_ms: int = 100
    max_samples: int = 16

@dataclass
class AppCfg:
    fps: int = 60
    log_level: str = "INFO"
    window: WindowCfg = field(default_factory=WindowCfg)
    list_box: ListBoxCfg = field(default_factory=ListBoxCfg)
    fling: FlingCfg = field(default_factory=FlingCfg)
    tracker: TrackerCfg = field(default_factory=TrackerCfg)


def _get(d: dict, path: str, default: Any):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur

def load_ui_defaults(path: str = "demo/config/defaults.yaml") -> Dict[str, Any]:
    """ Raw YAML mapping; empty when the file does not exist. """
    p = Path(path)
    if not p.exists():
        logger.warning("Config file '%s' not found, using built-in defaults", path)
        return {}
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def settings_from_defaults(data: Dict[str, Any]) -> AppCfg:
    lb, fl, tr = ListBoxCfg(), FlingCfg(), TrackerCfg()
    return AppCfg(
        fps=int(_get(data, "fps", 60)),
        log_level=str(_get(data, "log_level", "INFO")).upper(),
        window=WindowCfg(
            width=int(_get(data, "window.width", 960)),
            height=int(_get(data, "window.height", 600)),
            title=str(_get(data, "window.title", "MAUI ListBox")),
            bg_rgb=tuple(_get(data, "window.bg_rgb", (14, 15, 18))),
        ),
        list_box=ListBoxCfg(
            orientation=str(_get(data, "list_box.orientation", lb.orientation)).lower(),
            animation=str(_get(data, "list_box.animation", lb.animation)).lower(),
            wrapping=bool(_get(data, "list_box.wrapping", lb.wrapping)),
            auto_size=bool(_get(data, "list_box.auto_size", lb.auto_size)),
            animation_ms=int(_get(data, "list_box.animation_ms", lb.animation_ms)),
            snap_back_ms=int(_get(data, "list_box.snap_back_ms", lb.snap_back_ms)),
            tap_slop_px=int(_get(data, "list_box.tap_slop_px", lb.tap_slop_px)),
            wheel_pixels=int(_get(data, "list_box.wheel_pixels", lb.wheel_pixels)),
        ),
        fling=FlingCfg(
            min_velocity=float(_get(data, "list_box.fling.min_velocity", fl.min_velocity)),
            deceleration=float(_get(data, "list_box.fling.deceleration", fl.deceleration)),
            max_duration_ms=int(_get(data, "list_box.fling.max_duration_ms", fl.max_duration_ms)),
        ),
        tracker=TrackerCfg(
            window_ms=int(_get(data, "list_box.tracker.window_ms", tr.window_ms)),
            max_samples=int(_get(data, "list_box.tracker.max_samples", tr.max_samples)),
        ),
    )

def load_settings(path: str = "demo/config/defaults.yaml") -> AppCfg:
    return settings_from_defaults(load_ui_defaults(path))

def build_theme_from_defaults(defaults: Dict[str, Any]) -> Theme:
    tdata = defaults.get("theme", {}) or {}
    th = Theme()

    # core
    th.font_path = tdata.get("font_path", th.font_path)
    th.font_size = int(tdata.get("font_size", th.font_size))
    th.bg_rgb    = tuple(tdata.get("bg_rgb", th.bg_rgb))

    # list box
    lb = tdata.get("list_box", {}) or {}
    s = th.list_box
    s.padding          = tuple(lb.get("padding", s.padding))
    s.item_gap         = int(lb.get("item_gap", s.item_gap))
    s.radius           = int(lb.get("radius", s.radius))
    s.bg_rgba          = tuple(lb.get("bg_rgba", s.bg_rgba))
    s.border_rgba      = tuple(lb.get("border_rgba", s.border_rgba))
    s.border_px        = int(lb.get("border_px", s.border_px))
    s.highlight_rgba   = tuple(lb.get("highlight_rgba", s.highlight_rgba))
    s.highlight_radius = int(lb.get("highlight_radius", s.highlight_radius))

    # labels
    lt = tdata.get("label", {}) or {}
    ls = th.label
    ls.text_rgb        = tuple(lt.get("text_rgb", ls.text_rgb))
    ls.disabled_rgb    = tuple(lt.get("disabled_rgb", ls.disabled_rgb))
    ls.selected_rgb    = tuple(lt.get("selected_rgb", ls.selected_rgb))
    bg = lt.get("bg_rgba", ls.bg_rgba)
    ls.bg_rgba         = tuple(bg) if bg is not None else None
    ls.focus_ring_rgba = tuple(lt.get("focus_ring_rgba", ls.focus_ring_rgba))
    ls.pad_x           = int(lt.get("pad_x", ls.pad_x))

    return th
