from __future__ import annotations

import logging
from collections import Counter
from enum import IntEnum

from . import config
from .canvas import styled
from .linalg import Vec2

log = logging.getLogger(__name__)


class Direction(IntEnum):
    STOPPED = 0
    LEFT = 1
    DOWN = 2
    UP = 3
    RIGHT = 4


DIRECTION_VECS = {
    Direction.STOPPED: Vec2(0, 0),
    Direction.LEFT: Vec2(-1, 0),
    Direction.DOWN: Vec2(0, 1),
    Direction.UP: Vec2(0, -1),
    Direction.RIGHT: Vec2(1, 0),
}

HEAD_GLYPHS = {
    Direction.STOPPED: config.STOPPED_GLYPH,
    Direction.LEFT: config.LEFT_GLYPH,
    Direction.DOWN: config.DOWN_GLYPH,
    Direction.UP: config.UP_GLYPH,
    Direction.RIGHT: config.RIGHT_GLYPH,
}


class Segment:
    __slots__ = ("pos", "next")

    def __init__(self, pos: Vec2, next: Segment | None = None):
        self.pos = pos
        self.next = next


class Snake:
    """Snake body as a forward-linked chain of segments, head first.

    The snake owns its whole chain through ``head``. It grows by one unit of
    ``max_length`` every ``config.GROWTH_PERIOD`` movement frames and the tail
    is cut back to ``max_length`` after each move.
    """

    def __init__(
        self,
        pos: Vec2,
        direction: Direction = Direction.STOPPED,
        max_length: int = config.DEFAULT_MAX_SNAKE_LENGTH,
    ):
        self.head: Segment | None = Segment(pos)
        self.direction = direction
        self.max_length = max_length
        self.frame = 0
        self.length = 1

    def velocity(self) -> Vec2:
        return DIRECTION_VECS[self.direction]

    def head_glyph(self) -> str:
        return HEAD_GLYPHS[self.direction]

    def is_moving(self) -> bool:
        return self.direction != Direction.STOPPED

    def set_direction(self, direction: Direction) -> None:
        # Reversing into the body is allowed; it kills the snake next tick.
        self.direction = direction

    def up(self) -> None:
        self.set_direction(Direction.UP)

    def down(self) -> None:
        self.set_direction(Direction.DOWN)

    def left(self) -> None:
        self.set_direction(Direction.LEFT)

    def right(self) -> None:
        self.set_direction(Direction.RIGHT)

    def copy(self) -> Snake:
        """Independent snake with its own copy of the chain."""
        twin = Snake(Vec2(), self.direction, self.max_length)
        head = None
        for p in reversed(list(self.positions())):
            head = Segment(p, head)
        twin.head = head
        twin.frame = self.frame
        twin.length = self.length
        return twin

    def positions(self):
        node = self.head
        while node is not None:
            yield node.pos
            node = node.next

    def update(self) -> None:
        if self.head is None or not self.is_moving():
            return
        self.head = Segment(self.head.pos + self.velocity(), self.head)
        self.frame += 1
        if self.frame % config.GROWTH_PERIOD == 0:
            self.max_length += 1
        self.trim(self.max_length)

    def trim(self, max_length: int) -> None:
        i = 0
        node = self.head
        while node is not None:
            i += 1
            self.length = i
            if i >= max_length:
                node.next = None
                return
            node = node.next

    def check_for_collisions(self) -> bool:
        collisions = Counter()
        hits = 0
        nodes = 0
        for p in self.positions():
            nodes += 1
            collisions[p] += 1
            if collisions[p] > 1:
                hits += 1

        if hits:
            log.debug("hits = %d, nodes = %d", hits, nodes)
            log.debug("%r", dict(collisions))
        return hits > 0

    def render(self, canvas, window) -> None:
        if self.head is None:
            return
        tail = styled(config.TAIL_GLYPH, config.TAIL_FG)
        for p in self.positions():
            s = window.to_screen(p)
            canvas.set(tail, s.x, s.y)
        s = window.to_screen(self.head.pos)
        canvas.set(styled(self.head_glyph(), config.HEAD_FG), s.x, s.y)
