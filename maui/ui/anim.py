from dataclasses import dataclass
from typing import Callable

def ease_linear(t: float) -> float: return t
def ease_out_quad(t: float) -> float: t = max(0.0, min(1.0, t)); return 1 - (1 - t) ** 2  # constant deceleration
def ease_out_cubic(t: float) -> float: t = max(0.0, min(1.0, t)); return 1 - (1 - t) ** 3

@dataclass
class ScrollAnimation:
    """
    In-flight interpolation of a scroll offset, driven by an absolute clock
    (milliseconds) rather than accumulated frame deltas.
    """
    offset_from: int
    offset_to: int
    start_ms: int
    duration_ms: int
    ease: Callable[[float], float] = ease_linear

    def progress(self, now_ms: int) -> float:
        if self.duration_ms <= 0:
            return 1.0
        return max(0.0, min(1.0, (now_ms - self.start_ms) / self.duration_ms))

    def finished(self, now_ms: int) -> bool:
        return self.progress(now_ms) >= 1.0

    def value_at(self, now_ms: int) -> int:
        u = self.progress(now_ms)
        if u >= 1.0:
            return self.offset_to
        v = self.offset_from + (self.offset_to - self.offset_from) * self.ease(u)
        return int(round(v))
