from __future__ import annotations

from . import config
from .canvas import Canvas
from .state import GameModel, Phase

INITIALIZING_TEXT = "Initializing..."
TOO_SMALL_TEXT = "Terminal too small"


def layout_fits(model: GameModel) -> bool:
    board = model.game_board
    return (
        model.width > config.SCORE_PANEL_WIDTH
        and board is not None
        and board.width >= config.MIN_BOARD_SIZE
        and board.height >= config.MIN_BOARD_SIZE
    )


def compose(model: GameModel) -> Canvas | None:
    if model.phase is Phase.INITIALIZING or not layout_fits(model):
        return None

    canvas = Canvas(model.width, model.height)
    for d in model.drawables:
        d.render(canvas, model.game_board)
    if model.snake is not None:
        model.snake.render(canvas, model.game_board)
    model.banner.render(canvas, model.score_board)
    return canvas


def view(model: GameModel) -> str:
    if model.phase is Phase.INITIALIZING:
        return INITIALIZING_TEXT
    canvas = compose(model)
    if canvas is None:
        return TOO_SMALL_TEXT
    return canvas.render()
