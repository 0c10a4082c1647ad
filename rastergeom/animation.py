"""A square that slides back and forth across the screen."""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[int, int]


@dataclass
class Slider:
    """Horizontal bouncing motion between ``left`` and ``right``, ``speed`` pixels per frame."""

    x: int = 0
    moving_left: bool = False
    speed: int = 3
    left: int = 0
    right: int = 600
    size: int = 40
    bottom: int = 220

    @property
    def rectangle(self) -> list[Point]:
        """Corners of the square at its current position."""
        x, y, s = self.x, self.bottom, self.size
        return [(x, y), (x + s, y), (x + s, y + s), (x, y + s)]

    def step(self) -> int:
        """Advance one frame and return the new position."""
        self.x += -self.speed if self.moving_left else self.speed
        if self.x == self.right:
            self.moving_left = True
        if self.x == self.left:
            self.moving_left = False
        return self.x

    def frames(self, count: int) -> list[int]:
        """Advance ``count`` frames and return the position after each."""
        if count < 0:
            raise ValueError("frame count must not be negative")
        return [self.step() for _ in range(count)]