from __future__ import annotations

import logging

from . import config
from .drawables import ScoreBanner, build_perimeter
from .linalg import Vec2
from .snake import Direction, Snake
from .state import (
    ArmTick,
    EnterAltScreen,
    Functor,
    GameModel,
    Key,
    Phase,
    Quit,
    Resize,
    Tick,
)
from .window import Window

log = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def spawn_snake(model: GameModel, pos: Vec2, direction: Direction | None = None) -> GameModel:
    """Replace the snake with a fresh one-segment snake at ``pos``.

    The previous snake's direction carries over unless ``direction`` is given.
    """
    if direction is None:
        direction = model.snake.direction if model.snake is not None else Direction.STOPPED
    snake = Snake(pos, direction, model.max_snake_length)
    return model._replace(snake=snake)


def bank_score(model: GameModel) -> GameModel:
    history = tuple(sorted([*model.history, model.score]))
    return model._replace(history=history, score=0)


def handle_resize(model: GameModel, event: Resize) -> GameModel:
    w, h = event.width, event.height
    score_board = Window(Vec2(0, 0), Vec2(config.SCORE_PANEL_WIDTH, h - 1))
    game_board = Window(Vec2(config.SCORE_PANEL_WIDTH + 1, 0), Vec2(w - 1, h - 1))
    log.info("terminal %dx%d, game board %dx%d", w, h, game_board.width, game_board.height)

    model = model._replace(
        phase=Phase.RUNNING,
        width=w,
        height=h,
        score_board=score_board,
        game_board=game_board,
        max_snake_length=config.MAX_LENGTH_PER_BOARD_COLUMN * game_board.width,
        drawables=tuple(build_perimeter(game_board)),
    )
    return spawn_snake(model, game_board.center_point(), Direction.STOPPED)


def handle_key(model: GameModel, event: Key):
    if event.name in config.QUIT_KEYS:
        log.info("quit requested with %r", event.name)
        return model._replace(phase=Phase.QUITTING), Quit()
    direction = KEY_DIRECTIONS.get(event.name)
    if direction is None or model.snake is None:
        return model, None
    snake = model.snake.copy()
    snake.set_direction(direction)
    return model._replace(snake=snake), None


def add_length_to_score(model: GameModel) -> GameModel:
    return model._replace(score=model.score + model.snake.length)


def update_banner(model: GameModel) -> GameModel:
    banner = ScoreBanner()
    banner.update(model)
    return model._replace(banner=banner)


def move_snake(model: GameModel) -> GameModel:
    snake = model.snake.copy()
    snake.update()
    return model._replace(snake=snake)


def update_drawables(model: GameModel) -> GameModel:
    for d in model.drawables:
        d.update(model)
    return model


def check_self_collision(model: GameModel) -> GameModel:
    if not model.snake.check_for_collisions():
        return model
    log.info("snake ran into itself, banking %d", model.score)
    return bank_score(spawn_snake(model, model.snake.head.pos))


def obstacle_positions(model: GameModel) -> dict[Vec2, int]:
    occupied: dict[Vec2, int] = {}
    for d in model.drawables:
        d.accumulate_positions(occupied)
    return occupied


def check_obstacle_collision(model: GameModel) -> GameModel:
    if obstacle_positions(model).get(model.snake.head.pos, 0) == 0:
        return model
    log.info("snake hit an obstacle, banking %d", model.score)
    model = spawn_snake(model, model.game_board.center_point(), Direction.STOPPED)
    return bank_score(model)


def advance(model: GameModel) -> GameModel:
    """One simulation step. Both death checks run every tick."""
    return (
        Functor(model)
        .map(add_length_to_score)
        .map(update_banner)
        .map(move_snake)
        .map(update_drawables)
        .map(check_self_collision)
        .map(check_obstacle_collision)
        .get()
    )


def init(model: GameModel):
    return ArmTick(model.tick_interval)


def update(model: GameModel, event):
    """Apply one event. Returns the next model and an optional command."""
    if model.phase is Phase.QUITTING:
        return model, None
    if isinstance(event, Resize):
        return handle_resize(model, event), EnterAltScreen()
    if isinstance(event, Key):
        return handle_key(model, event)
    if isinstance(event, Tick):
        if model.phase is Phase.RUNNING:
            model = advance(model)
        return model, ArmTick(model.tick_interval)
    return model, None
