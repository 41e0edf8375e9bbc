import logging

from cellsnake import config
from cellsnake.canvas import Canvas, Cell
from cellsnake.linalg import Vec2
from cellsnake.snake import Direction, Segment, Snake
from cellsnake.window import Window


def chain_length(snake):
    return len(list(snake.positions()))


def test_moving_right_advances_one_cell_per_update():
    snake = Snake(Vec2(5, 5), Direction.RIGHT)
    for i in range(1, 8):
        snake.update()
        assert snake.head.pos == Vec2(5 + i, 5)


def test_stopped_snake_does_not_move_or_count_frames():
    snake = Snake(Vec2(5, 5))
    for _ in range(20):
        snake.update()
    assert snake.head.pos == Vec2(5, 5)
    assert snake.frame == 0
    assert snake.max_length == config.DEFAULT_MAX_SNAKE_LENGTH


def test_max_length_grows_every_tenth_frame_and_bounds_the_chain():
    snake = Snake(Vec2(0, 0), Direction.RIGHT, max_length=3)
    previous = snake.max_length
    for frame in range(1, 36):
        snake.update()
        expected_growth = 1 if frame % config.GROWTH_PERIOD == 0 else 0
        assert snake.max_length == previous + expected_growth
        assert chain_length(snake) <= snake.max_length
        assert snake.length == chain_length(snake)
        previous = snake.max_length
    assert snake.max_length == 6
    assert chain_length(snake) == 6


def test_trim_severs_the_nth_link():
    snake = Snake(Vec2(0, 0), Direction.RIGHT, max_length=100)
    for _ in range(4):
        snake.update()
    assert chain_length(snake) == 5

    snake.trim(3)

    assert list(snake.positions()) == [Vec2(4, 0), Vec2(3, 0), Vec2(2, 0)]
    assert snake.length == 3
    assert snake.head.next.next.next is None


def test_trim_on_short_chain_keeps_everything():
    snake = Snake(Vec2(0, 0), Direction.RIGHT, max_length=100)
    snake.update()
    snake.trim(10)
    assert snake.length == 2
    assert chain_length(snake) == 2


def test_fresh_snake_never_collides():
    assert not Snake(Vec2(3, 3)).check_for_collisions()


def test_collision_when_position_repeats():
    snake = Snake(Vec2(1, 1))
    snake.head = Segment(Vec2(1, 1), Segment(Vec2(1, 2), Segment(Vec2(1, 1))))
    assert snake.check_for_collisions()


def test_turning_back_onto_the_body_collides():
    snake = Snake(Vec2(0, 0), Direction.RIGHT, max_length=100)
    for d in (Direction.RIGHT, Direction.RIGHT, Direction.DOWN, Direction.LEFT):
        snake.set_direction(d)
        snake.update()
        assert not snake.check_for_collisions()
    snake.up()
    snake.update()
    assert snake.head.pos == Vec2(1, 0)
    assert snake.check_for_collisions()


def test_reversal_is_not_guarded():
    snake = Snake(Vec2(0, 0), Direction.RIGHT, max_length=100)
    snake.update()
    snake.left()
    assert snake.direction == Direction.LEFT
    snake.update()
    assert snake.check_for_collisions()


def test_render_draws_tail_then_head_through_window():
    canvas = Canvas(6, 3)
    window = Window(Vec2(1, 0), Vec2(5, 2))
    snake = Snake(Vec2(0, 1), Direction.RIGHT, max_length=5)
    snake.update()
    snake.render(canvas, window)

    assert canvas.get(2, 1) == Cell(config.RIGHT_GLYPH, config.HEAD_FG, None)
    assert canvas.get(1, 1) == Cell(config.TAIL_GLYPH, config.TAIL_FG, None)
    assert canvas.get(0, 1) == " "


def test_stopped_head_glyph():
    canvas = Canvas(2, 2)
    Snake(Vec2(1, 1)).render(canvas, Window(Vec2(0, 0), Vec2(2, 2)))
    assert str(canvas.get(1, 1)) == config.STOPPED_GLYPH


def test_collision_diagnostics_are_logged(caplog):
    snake = Snake(Vec2(0, 0), Direction.RIGHT, max_length=100)
    snake.update()
    snake.left()
    snake.update()
    with caplog.at_level(logging.DEBUG, logger="cellsnake.snake"):
        assert snake.check_for_collisions()
    assert "hits = 1, nodes = 3" in caplog.text


def test_copy_owns_its_own_chain():
    snake = Snake(Vec2(0, 0), Direction.RIGHT, max_length=100)
    for _ in range(3):
        snake.update()

    twin = snake.copy()
    twin.left()
    twin.update()
    twin.trim(2)

    assert snake.direction == Direction.RIGHT
    assert list(snake.positions()) == [Vec2(3, 0), Vec2(2, 0), Vec2(1, 0), Vec2(0, 0)]
    assert snake.length == 4
    assert list(twin.positions()) == [Vec2(2, 0), Vec2(3, 0)]
    assert twin.frame == 4
