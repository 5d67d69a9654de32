from __future__ import annotations
from dataclasses import dataclass
from collections import OrderedDict
from typing import Tuple, Optional
import pygame

@dataclass(frozen=True)
class FontKey:
    path: Optional[str]
    size: int

class FontCache:
    """
    Small LRU of pygame fonts shared by labels.
      - font = fonts.get(path, size)
      - w, h = fonts.measure(path, size, "Item 3")
    The font module is initialised on first use so widgets can be built
    before pygame.init().
    """

    def __init__(self, max_entries: int = 16) -> None:
        self._cache: "OrderedDict[FontKey, pygame.font.Font]" = OrderedDict()
        self._max = max(1, int(max_entries))

    def get(self, path: Optional[str], size: int) -> pygame.font.Font:
        k = FontKey(path, int(size))
        f = self._cache.get(k)
        if f is not None:
            self._cache.move_to_end(k)
            return f
        if not pygame.font.get_init():
            pygame.font.init()
        f = pygame.font.Font(k.path, k.size)
        self._cache[k] = f
        while len(self._cache) > self._max:
            self._cache.popitem(last=False)
        return f

    def render(self, path: Optional[str], size: int, text: str,
               color: Tuple[int, int, int]) -> pygame.Surface:
        return self.get(path, size).render(text or "", True, color)

    def measure(self, path: Optional[str], size: int, text: str) -> Tuple[int, int]:
        return self.get(path, size).size(text or "")

    def clear(self) -> None:
        self._cache.clear()
