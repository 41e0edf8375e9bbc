from __future__ import annotations

import logging

import pygame

from . import config
from .canvas import Cell
from .logic import init, update
from .render import compose, view
from .state import ArmTick, EnterAltScreen, Key, Quit, Resize, Tick, initial_model

log = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

KEY_NAMES = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_ESCAPE: "esc",
}

# xterm colours 0-15
BASE_COLORS = [
    (0, 0, 0), (128, 0, 0), (0, 128, 0), (128, 128, 0),
    (0, 0, 128), (128, 0, 128), (0, 128, 128), (192, 192, 192),
    (128, 128, 128), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (0, 0, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
]
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def xterm_rgb(code: str) -> tuple[int, int, int]:
    n = int(code)
    if n < 16:
        return BASE_COLORS[n]
    if n < 232:
        n -= 16
        return (CUBE_LEVELS[n // 36], CUBE_LEVELS[(n // 6) % 6], CUBE_LEVELS[n % 6])
    g = 8 + 10 * (n - 232)
    return (g, g, g)


def key_name(key: int, mod: int, unicode: str) -> str | None:
    if key == pygame.K_c and mod & pygame.KMOD_CTRL:
        return "ctrl+c"
    if key in KEY_NAMES:
        return KEY_NAMES[key]
    if unicode and unicode.isprintable():
        return unicode
    return None


def cells_for(pixels: tuple[int, int], cell_size: tuple[int, int]) -> tuple[int, int]:
    return pixels[0] // cell_size[0], pixels[1] // cell_size[1]


class GlyphCache:
    def __init__(self, font: pygame.font.Font):
        self.font = font
        self.surfaces: dict[tuple[str, str | None], pygame.Surface] = {}

    def get(self, text: str, fg: str | None) -> pygame.Surface:
        key = (text, fg)
        if key not in self.surfaces:
            color = xterm_rgb(fg) if fg else config.FOREGROUND
            self.surfaces[key] = self.font.render(text, True, color)
        return self.surfaces[key]


def draw_model(screen: pygame.Surface, model, glyphs: GlyphCache, cell_size) -> None:
    cw, ch = cell_size
    screen.fill(config.BACKGROUND)
    canvas = compose(model)
    if canvas is None:
        screen.blit(glyphs.get(view(model), None), (0, 0))
    else:
        for y, row in enumerate(canvas.rows):
            for x, cell in enumerate(row):
                if isinstance(cell, Cell):
                    text, fg, bg = cell
                else:
                    text, fg, bg = cell, None, None
                if bg is not None:
                    pygame.draw.rect(screen, xterm_rgb(bg), pygame.Rect(x * cw, y * ch, cw, ch))
                if text != " ":
                    screen.blit(glyphs.get(text, fg), (x * cw, y * ch))
    pygame.display.flip()


def run(tick_interval: float, font_size: int = config.FONT_SIZE) -> int:
    pygame.init()
    font = pygame.font.SysFont(config.FONT_NAMES, font_size)
    cell_size = (font.size("M")[0], font.get_linesize())
    cols, rows = config.WINDOW_CELLS
    screen = pygame.display.set_mode((cols * cell_size[0], rows * cell_size[1]), pygame.RESIZABLE)
    pygame.display.set_caption("cellsnake")
    clock = pygame.time.Clock()
    glyphs = GlyphCache(font)
    log.info("starting pygame front end, cell size %s", cell_size)

    model = initial_model(tick_interval)
    running = True

    def dispatch(event):
        nonlocal model, running
        model, cmd = update(model, event)
        if isinstance(cmd, ArmTick):
            pygame.time.set_timer(TICK_EVENT, max(1, int(cmd.delay * 1000)), loops=1)
        elif isinstance(cmd, EnterAltScreen):
            log.debug("window owns the display, nothing to take over")
        elif isinstance(cmd, Quit):
            running = False

    first_tick = init(model)
    pygame.time.set_timer(TICK_EVENT, max(1, int(first_tick.delay * 1000)), loops=1)
    dispatch(Resize(*cells_for(screen.get_size(), cell_size)))

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                dispatch(Key("ctrl+c"))
            elif event.type == pygame.VIDEORESIZE:
                dispatch(Resize(*cells_for((event.w, event.h), cell_size)))
            elif event.type == TICK_EVENT:
                dispatch(Tick())
            elif event.type == pygame.KEYDOWN:
                name = key_name(event.key, event.mod, event.unicode)
                if name is not None:
                    dispatch(Key(name))
            if not running:
                break

        if running:
            draw_model(pygame.display.get_surface(), model, glyphs, cell_size)
            clock.tick(config.FRAME_RATE)

    pygame.time.set_timer(TICK_EVENT, 0)
    pygame.quit()
    log.info("pygame front end stopped, history %s", list(model.history))
    return 0
