from __future__ import annotations

# Simulation
TICK_HZ = 15
TICK_INTERVAL = 1.0 / TICK_HZ
GROWTH_PERIOD = 10  # movement frames per extra unit of max length
DEFAULT_MAX_SNAKE_LENGTH = 500
MAX_LENGTH_PER_BOARD_COLUMN = 2

# Layout (character cells)
SCORE_PANEL_WIDTH = 24
MIN_BOARD_SIZE = 3

# Glyphs
BLANK = " "
TAIL_GLYPH = "◦"
WALL_GLYPH = " "
STOPPED_GLYPH = "○"
LEFT_GLYPH = "◀"
DOWN_GLYPH = "▼"
UP_GLYPH = "▲"
RIGHT_GLYPH = "►"

# Colours are xterm-256 palette indices.
TAIL_FG = "180"
HEAD_FG = "204"
WALL_FG = "87"
WALL_BG = "67"

# Input
QUIT_KEYS = frozenset({"q", "esc", "ctrl+c"})

# pygame front end
FONT_SIZE = 18
FONT_NAMES = "dejavusansmono,menlo,consolas,couriernew,monospace"
WINDOW_CELLS = (100, 32)
BACKGROUND = (0, 0, 0)
FOREGROUND = (220, 220, 220)
FRAME_RATE = 60
