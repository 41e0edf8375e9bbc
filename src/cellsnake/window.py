from __future__ import annotations

from dataclasses import dataclass

from .linalg import Vec2


@dataclass(frozen=True)
class Window:
    """Viewport from ``ul`` (inclusive) towards ``lr`` on the canvas."""

    ul: Vec2
    lr: Vec2

    @property
    def width(self) -> int:
        return self.lr.x - self.ul.x

    @property
    def height(self) -> int:
        return self.lr.y - self.ul.y

    def to_screen(self, p: Vec2) -> Vec2:
        return p + self.ul

    def center_point(self) -> Vec2:
        # Local coordinates; pass through to_screen before touching a canvas.
        return Vec2(self.width // 2, self.height // 2)
