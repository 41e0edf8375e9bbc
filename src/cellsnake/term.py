from __future__ import annotations

import curses
import logging
import time

from .canvas import Cell
from .logic import init, update
from .render import compose, view
from .state import ArmTick, EnterAltScreen, Key, Quit, Resize, Tick, initial_model

log = logging.getLogger(__name__)

KEY_NAMES = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    27: "esc",
    3: "ctrl+c",
}


def key_name(code: int) -> str | None:
    """Canonical key name for a curses key code, or None if unknown."""
    if code in KEY_NAMES:
        return KEY_NAMES[code]
    if 32 <= code < 127:
        return chr(code)
    return None


class ColorPairs:
    """Allocates curses colour pairs on demand for xterm-256 fg/bg pairs."""

    def __init__(self):
        self.pairs: dict[tuple[str | None, str | None], int] = {}
        self.enabled = False
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            self.enabled = curses.COLORS >= 256

    def attr(self, fg: str | None, bg: str | None) -> int:
        if not self.enabled:
            return curses.A_REVERSE if bg is not None else curses.A_NORMAL
        key = (fg, bg)
        if key not in self.pairs:
            n = len(self.pairs) + 1
            if n >= curses.COLOR_PAIRS:
                return curses.A_NORMAL
            curses.init_pair(n, int(fg) if fg else -1, int(bg) if bg else -1)
            self.pairs[key] = n
        return curses.color_pair(self.pairs[key])


def put(stdscr, y: int, x: int, text: str, attr: int = 0) -> None:
    try:
        stdscr.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off screen.
        h, w = stdscr.getmaxyx()
        if (y, x + len(text)) != (h - 1, w):
            raise


def draw(stdscr, model, palette: ColorPairs) -> None:
    stdscr.erase()
    canvas = compose(model)
    if canvas is None:
        text = view(model)
        _, w = stdscr.getmaxyx()
        put(stdscr, 0, 0, text[: max(0, w - 1)])
    else:
        for y, row in enumerate(canvas.rows):
            for x, cell in enumerate(row):
                if isinstance(cell, Cell):
                    put(stdscr, y, x, cell.text, palette.attr(cell.fg, cell.bg))
                elif cell != " ":
                    put(stdscr, y, x, cell)
    stdscr.refresh()


def _loop(stdscr, tick_interval: float):
    curses.raw()
    stdscr.keypad(True)
    palette = ColorPairs()

    model = initial_model(tick_interval)
    next_tick = None
    running = True

    def dispatch(event):
        nonlocal model, next_tick, running
        model, cmd = update(model, event)
        if isinstance(cmd, ArmTick):
            next_tick = time.monotonic() + cmd.delay
        elif isinstance(cmd, EnterAltScreen):
            try:
                curses.curs_set(0)
            except curses.error:
                pass
        elif isinstance(cmd, Quit):
            running = False

    next_tick = time.monotonic() + init(model).delay
    h, w = stdscr.getmaxyx()
    dispatch(Resize(w, h))
    draw(stdscr, model, palette)

    while running:
        now = time.monotonic()
        if next_tick is not None and now >= next_tick:
            next_tick = None
            dispatch(Tick())
            draw(stdscr, model, palette)
            continue

        timeout = -1 if next_tick is None else max(0, int((next_tick - now) * 1000))
        stdscr.timeout(timeout)
        code = stdscr.getch()
        if code == -1:
            continue
        if code == curses.KEY_RESIZE:
            h, w = stdscr.getmaxyx()
            dispatch(Resize(w, h))
            draw(stdscr, model, palette)
            continue
        name = key_name(code)
        if name is not None:
            dispatch(Key(name))
    return model


def run(tick_interval: float) -> int:
    log.info("starting terminal front end")
    model = curses.wrapper(_loop, tick_interval)
    log.info("terminal front end stopped, history %s", list(model.history))
    return 0
