from __future__ import annotations

from collections import namedtuple
from enum import Enum

from . import config
from .drawables import ScoreBanner


class Phase(Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    QUITTING = "quitting"


GameModel = namedtuple(
    "GameModel",
    [
        "phase",
        "snake",
        "drawables",
        "banner",
        "game_board",
        "score_board",
        "score",
        "history",
        "width",
        "height",
        "max_snake_length",
        "tick_interval",
    ],
)
# phase: Phase
# snake: Snake | None, None until the terminal size is known
# drawables: tuple of non-snake drawables on the game board (walls)
# banner: ScoreBanner drawn into score_board
# game_board, score_board: Window | None
# score: int, live score of the current snake
# history: tuple[int, ...] of banked scores, ascending
# width, height: terminal size in cells
# max_snake_length: max_length given to newly spawned snakes
# tick_interval: seconds between ticks

# Events delivered by a front end.
Resize = namedtuple("Resize", ["width", "height"])
Key = namedtuple("Key", ["name"])
Tick = namedtuple("Tick", [])

# Commands returned to the front end.
ArmTick = namedtuple("ArmTick", ["delay"])
EnterAltScreen = namedtuple("EnterAltScreen", [])
Quit = namedtuple("Quit", [])


def initial_model(tick_interval: float = config.TICK_INTERVAL) -> GameModel:
    return GameModel(
        phase=Phase.INITIALIZING,
        snake=None,
        drawables=(),
        banner=ScoreBanner(),
        game_board=None,
        score_board=None,
        score=0,
        history=(),
        width=0,
        height=0,
        max_snake_length=config.DEFAULT_MAX_SNAKE_LENGTH,
        tick_interval=tick_interval,
    )


class Functor:
    """Tiny helper for chaining model transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
