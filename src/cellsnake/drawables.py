from __future__ import annotations

from typing import Protocol

from . import config
from .canvas import Canvas, styled
from .linalg import Vec2
from .window import Window


class Drawable(Protocol):
    def update(self, model) -> None: ...

    def render(self, canvas: Canvas, window: Window) -> None: ...

    def accumulate_positions(self, dst: dict[Vec2, int]) -> None: ...


class Wall:
    __slots__ = ("pos",)

    def __init__(self, pos: Vec2):
        self.pos = pos

    def update(self, model) -> None:
        pass

    def render(self, canvas: Canvas, window: Window) -> None:
        p = window.to_screen(self.pos)
        canvas.set(styled(config.WALL_GLYPH, config.WALL_FG, config.WALL_BG), p.x, p.y)

    def accumulate_positions(self, dst: dict[Vec2, int]) -> None:
        dst[self.pos] = dst.get(self.pos, 0) + 1

    def __repr__(self):
        return f"Wall({self.pos!r})"


def build_perimeter(window: Window) -> list[Wall]:
    """One wall per cell on the outer ring of the window's local space."""
    w, h = window.width, window.height
    walls: list[Wall] = []
    for y in range(h):
        for x in range(w):
            if x in (0, w - 1) or y in (0, h - 1):
                walls.append(Wall(Vec2(x, y)))
    return walls


class ScoreBanner:
    """Ranked high-score listing with the live score marked."""

    header = "HI SCORES"

    def __init__(self):
        self.text: tuple[str, ...] = (self.header,)

    def update(self, model) -> None:
        ranked = sorted([*model.history, model.score], reverse=True)
        lines = [self.header]
        for rank, score in enumerate(ranked, start=1):
            if score == model.score:
                lines.append(f"   > {score:10d}")
            else:
                lines.append(f"{rank:3d}: {score:10d}")
        self.text = tuple(lines)

    def render(self, canvas: Canvas, window: Window) -> None:
        p = window.to_screen(Vec2(0, 0))
        for i, line in enumerate(self.text):
            if p.y + i >= canvas.height:
                break
            canvas.place_text(line, p.x, p.y + i)

    def accumulate_positions(self, dst: dict[Vec2, int]) -> None:
        pass
