"""Leaf widgets: text, images, dividers, progress bars, and two wrappers."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .rendering import Canvas, Widget, create_canvas


def _lines(data: str) -> List[str]:
    """Split into lines the way a text file is read: no trailing empty line."""
    parts = data.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class Text(Widget):
    """A string, optionally word-wrapped to a maximum width."""

    def __init__(self, text: str) -> None:
        self.text = str(text)
        self._max_width: Optional[int] = None

    def max_width(self, width: int) -> "Text":
        """Wrap the text at spaces so no line exceeds ``width`` where possible."""
        self._max_width = width
        return self

    def wrapped_lines(self) -> List[str]:
        """Return the lines the text is drawn as."""
        if self._max_width is None:
            return [self.text]
        lines: List[str] = []
        current = ""
        for word in self.text.split():
            if not current:
                current = word
            elif len(current) + 1 + len(word) <= self._max_width:
                current = f"{current} {word}"
            else:
                lines.append(current)
                current = word
        if current:
            lines.append(current)
        return lines

    def min_size(self) -> Tuple[int, int]:
        lines = self.wrapped_lines()
        return (max((len(line) for line in lines), default=0), len(lines))

    def render(self, width: int, height: int) -> Canvas:
        canvas = create_canvas(width, height)
        for row, line in zip(canvas, self.wrapped_lines()):
            visible = line[:width]
            row[: len(visible)] = visible
        return canvas


def text(s: str) -> Text:
    """Create a Text widget."""
    return Text(s)


class Image(Widget):
    """Multi-line ASCII art drawn from the top-left corner."""

    def __init__(self, data: str) -> None:
        self.data = data

    def min_size(self) -> Tuple[int, int]:
        lines = _lines(self.data)
        return (max((len(line) for line in lines), default=0), len(lines))

    def render(self, width: int, height: int) -> Canvas:
        canvas = create_canvas(width, height)
        for row, line in zip(canvas, _lines(self.data)):
            visible = line[:width]
            row[: len(visible)] = visible
        return canvas


def image(data: str) -> Image:
    """Create an Image widget from ASCII art."""
    return Image(data)


class Orientation(Enum):
    """Direction a divider runs in."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Divider(Widget):
    """A line of one repeated character."""

    def __init__(self, ch: str) -> None:
        self.ch = ch
        self.orientation = Orientation.HORIZONTAL

    def vertical(self) -> "Divider":
        """Make the divider run top to bottom."""
        self.orientation = Orientation.VERTICAL
        return self

    def min_size(self) -> Tuple[int, int]:
        return (1, 1)

    def render(self, width: int, height: int) -> Canvas:
        if self.orientation is Orientation.HORIZONTAL:
            return [[self.ch] * width]
        canvas = create_canvas(width, height)
        if width > 0:
            col = width // 2 if width > 1 else 0
            for row in canvas:
                row[col] = self.ch
        return canvas


def divider(ch: str) -> Divider:
    """Create a horizontal Divider."""
    return Divider(ch)


class ProgressBar(Widget):
    """A bar filled in proportion to a fraction between 0 and 1."""

    def __init__(self, fraction: float, background: str, foreground: str, tip: str) -> None:
        self.fraction = fraction
        self.background = background
        self.foreground = foreground
        self.tip = tip

    def min_size(self) -> Tuple[int, int]:
        return (5, 1)

    def render(self, width: int, height: int) -> Canvas:
        fraction = min(max(self.fraction, 0.0), 1.0)
        active = math.floor(width * fraction)
        filled = min(width, active)
        bar = [self.foreground] * filled + [self.background] * (width - filled)
        if 0 < active <= width and fraction < 1.0:
            bar[active - 1] = self.tip
        return [list(bar) for _ in range(height)]


def progress_bar(fraction: float, foreground: str, tip: str, background: str) -> ProgressBar:
    """Create a ProgressBar."""
    return ProgressBar(fraction, background, foreground, tip)


class Flexible(Widget):
    """Wraps a child and gives it a share of spare space in rows and columns."""

    def __init__(self, flex: int, child: Widget) -> None:
        self.flex = flex
        self.child = child

    def min_size(self) -> Tuple[int, int]:
        return self.child.min_size()

    def render(self, width: int, height: int) -> Canvas:
        return self.child.render(width, height)

    def flex_factor(self) -> Optional[int]:
        return self.flex


def flexible(flex: int, child: Widget) -> Flexible:
    """Create a Flexible wrapper."""
    return Flexible(flex, child)


class BuilderWidget(Widget):
    """Builds its child anew each time it is measured or drawn."""

    def __init__(self, factory: Callable[[], Widget]) -> None:
        self.factory = factory

    def min_size(self) -> Tuple[int, int]:
        return self.factory().min_size()

    def render(self, width: int, height: int) -> Canvas:
        return self.factory().render(width, height)


def builder(factory: Callable[[], Widget]) -> BuilderWidget:
    """Create a BuilderWidget from a function that returns a widget."""
    return BuilderWidget(factory)