"""Character canvases and the widget interface that draws into them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

NIO_MAX_ROWS = 30
NIO_MAX_COLS = 53

# Drawn as a space, but unlike a space it overwrites what lies beneath it.
WIPE_CHAR = "\ue000"

Canvas = List[List[str]]


class Widget(ABC):
    """Something that can be laid out and drawn onto a canvas."""

    @abstractmethod
    def min_size(self) -> Tuple[int, int]:
        """Return the smallest (width, height) the widget needs."""

    @abstractmethod
    def render(self, width: int, height: int) -> Canvas:
        """Draw the widget into a canvas of the given size."""

    def flex_factor(self) -> Optional[int]:
        """Return the layout flex factor, or None when the widget is rigid."""
        return None


def create_canvas(width: int, height: int) -> Canvas:
    """Return a canvas of spaces."""
    return [[" "] * width for _ in range(height)]


def canvas_to_string(canvas: Canvas) -> str:
    """Join a canvas into lines, turning wipe characters into spaces."""
    return "\n".join(
        "".join(" " if ch == WIPE_CHAR else ch for ch in row) for row in canvas
    )


def overlay(canvas: Canvas, child: Canvas, offset_x: int, offset_y: int) -> None:
    """Draw the non-space cells of ``child`` onto ``canvas`` at the offset, clipped."""
    parent_height = len(canvas)
    parent_width = len(canvas[0]) if canvas else 0
    for y, child_row in enumerate(child, start=offset_y):
        if y >= parent_height:
            break
        target = canvas[y]
        for x, ch in enumerate(child_row, start=offset_x):
            if x >= parent_width:
                break
            if ch != " ":
                target[x] = ch


def render_ui(widget: Widget) -> str:
    """Render a widget at full screen size and return it as text."""
    return canvas_to_string(widget.render(NIO_MAX_COLS, NIO_MAX_ROWS))