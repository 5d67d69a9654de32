from dataclasses import dataclass

@dataclass
class ScrollModel:
    content: int = 0
    viewport: int = 0
    offset: int = 0

    def min(self) -> int: return 0
    def max(self) -> int: return max(0, self.content - self.viewport)
    def clamp(self): self.offset = self.clamped(self.offset)
    def clamped(self, v: int) -> int: return max(self.min(), min(self.max(), int(v)))
    def scroll(self, d: int): self.offset += int(d); self.clamp()
    def outside(self) -> bool: return self.offset < self.min() or self.offset > self.max()
    def nearest_bound(self) -> int: return self.clamped(self.offset)

    def reveal(self, start: int, end: int) -> int:
        """Offset that brings [start, end) into the viewport with minimal travel."""
        target = self.offset
        if start - target < 0:
            target = start
        elif end - target > self.viewport:
            target = min(start, end - self.viewport)  # items taller than the viewport show their start
        return self.clamped(target)
