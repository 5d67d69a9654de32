from __future__ import annotations
from collections import deque
from typing import Deque, Protocol, Tuple
import math


class MotionTracker(Protocol):
    """What the list box needs from a touch velocity estimator."""
    def reset(self) -> None: ...
    def add_point(self, x: int, y: int, t_ms: int) -> None: ...
    def velocity(self) -> Tuple[float, float]: ...
    def direction(self) -> Tuple[float, float]: ...


class TouchMotionTracker:
    """
    Windowed velocity estimate over recent pointer samples.

    Only samples no older than `window_ms` (relative to the newest one) are
    kept, capped at `max_samples`. Velocity is the displacement between the
    oldest and newest kept sample over their time difference, in px/s.
    """
    def __init__(self, window_ms: int = 100, max_samples: int = 16) -> None:
        self.window_ms = max(1, int(window_ms))
        self._samples: Deque[Tuple[int, int, int]] = deque(maxlen=max(2, int(max_samples)))

    def reset(self) -> None:
        self._samples.clear()

    def add_point(self, x: int, y: int, t_ms: int) -> None:
        self._samples.append((int(x), int(y), int(t_ms)))
        newest = self._samples[-1][2]
        while len(self._samples) > 2 and newest - self._samples[0][2] > self.window_ms:
            self._samples.popleft()

    def velocity(self) -> Tuple[float, float]:
        if len(self._samples) < 2:
            return 0.0, 0.0
        x0, y0, t0 = self._samples[0]
        x1, y1, t1 = self._samples[-1]
        dt_ms = t1 - t0
        if dt_ms <= 0:
            return 0.0, 0.0
        return (x1 - x0) * 1000.0 / dt_ms, (y1 - y0) * 1000.0 / dt_ms

    def direction(self) -> Tuple[float, float]:
        vx, vy = self.velocity()
        mag = math.hypot(vx, vy)
        if mag <= 0.0:
            return 0.0, 0.0
        return vx / mag, vy / mag
