"""Shared corner styles and colour codes."""

from .layout import Corners

# .------.
# |      |
# `------'
CORNERS_ROUND = Corners(top_left=".", top_right=".", bottom_left="`", bottom_right="'")

CORNERS_NONE = Corners(top_left=None, top_right=None, bottom_left=None, bottom_right=None)

COLOR_WHITE = 0x0F
COLOR_MAGENTA = 5
COLOR_LIGHTMAGENTA = 13
COLOR_YELLOW = 3
COLOR_LIGHTYELLOW = 11