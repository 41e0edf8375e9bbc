from .canvas import Canvas, Cell, styled
from .drawables import Drawable, ScoreBanner, Wall, build_perimeter
from .linalg import Vec2
from .logic import advance, init, update
from .render import compose, view
from .snake import Direction, Segment, Snake
from .state import GameModel, Phase, initial_model
from .window import Window

__all__ = [
    "Canvas",
    "Cell",
    "styled",
    "Drawable",
    "ScoreBanner",
    "Wall",
    "build_perimeter",
    "Vec2",
    "advance",
    "init",
    "update",
    "compose",
    "view",
    "Direction",
    "Segment",
    "Snake",
    "GameModel",
    "Phase",
    "initial_model",
    "Window",
]
