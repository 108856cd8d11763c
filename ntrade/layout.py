"""Layout widgets: alignment, borders, padding, fixed sizes, rows, columns and stacks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .rendering import Canvas, Widget, create_canvas, overlay


class AlignHorizontal(Enum):
    """Horizontal placement of a child inside its area."""

    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"


class AlignVertical(Enum):
    """Vertical placement of a child inside its area."""

    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"


class Align(Widget):
    """Places a child at its natural size somewhere inside the given area."""

    def __init__(self, child: Widget) -> None:
        self.child = child
        self.h_align = AlignHorizontal.CENTER
        self.v_align = AlignVertical.CENTER

    def horizontal(self, h: AlignHorizontal) -> "Align":
        """Set the horizontal alignment."""
        self.h_align = h
        return self

    def vertical(self, v: AlignVertical) -> "Align":
        """Set the vertical alignment."""
        self.v_align = v
        return self

    def min_size(self) -> Tuple[int, int]:
        return self.child.min_size()

    def render(self, width: int, height: int) -> Canvas:
        canvas = create_canvas(width, height)
        child_w, child_h = self.child.min_size()
        render_w = width if self.h_align is AlignHorizontal.STRETCH else min(child_w, width)
        render_h = height if self.v_align is AlignVertical.STRETCH else min(child_h, height)

        if self.h_align is AlignHorizontal.CENTER:
            offset_x = (width - render_w) // 2
        elif self.h_align is AlignHorizontal.END:
            offset_x = width - render_w
        else:
            offset_x = 0

        if self.v_align is AlignVertical.CENTER:
            offset_y = (height - render_h) // 2
        elif self.v_align is AlignVertical.END:
            offset_y = height - render_h
        else:
            offset_y = 0

        overlay(canvas, self.child.render(render_w, render_h), offset_x, offset_y)
        return canvas


def align(child: Widget) -> Align:
    """Create an Align widget, centred both ways by default."""
    return Align(child)


@dataclass(frozen=True)
class Borders:
    """Characters for each side of a border; None leaves that side out."""

    left: Optional[str]
    right: Optional[str]
    top: Optional[str]
    bottom: Optional[str]


@dataclass(frozen=True)
class Corners:
    """Characters for each corner of a border; None draws a space there."""

    top_left: Optional[str]
    top_right: Optional[str]
    bottom_left: Optional[str]
    bottom_right: Optional[str]


_DEFAULT_BORDERS = Borders(left="|", right="|", top="-", bottom="-")
_DEFAULT_CORNERS = Corners(top_left="+", top_right="+", bottom_left="+", bottom_right="+")


def _present(ch: Optional[str]) -> int:
    return 0 if ch is None else 1


class Border(Widget):
    """Draws a frame around a child."""

    def __init__(self, child: Widget) -> None:
        self.child = child
        self.border_chars = _DEFAULT_BORDERS
        self.corner_chars = _DEFAULT_CORNERS

    def borders(self, borders: Borders) -> "Border":
        """Set the side characters."""
        self.border_chars = borders
        return self

    def corners(self, corners: Corners) -> "Border":
        """Set the corner characters."""
        self.corner_chars = corners
        return self

    def min_size(self) -> Tuple[int, int]:
        child_w, child_h = self.child.min_size()
        b = self.border_chars
        return (
            child_w + _present(b.left) + _present(b.right),
            child_h + _present(b.top) + _present(b.bottom),
        )

    def render(self, width: int, height: int) -> Canvas:
        min_w, min_h = self.min_size()
        width = max(width, min_w)
        height = max(height, min_h)
        canvas = create_canvas(width, height)
        b = self.border_chars
        c = self.corner_chars

        if b.top is not None:
            canvas[0] = [b.top] * width
        if b.bottom is not None:
            canvas[height - 1] = [b.bottom] * width
        if b.left is not None:
            for row in canvas:
                row[0] = b.left
        if b.right is not None:
            for row in canvas:
                row[width - 1] = b.right

        if b.top is not None and b.left is not None:
            canvas[0][0] = c.top_left or " "
        if b.top is not None and b.right is not None:
            canvas[0][width - 1] = c.top_right or " "
        if b.bottom is not None and b.left is not None:
            canvas[height - 1][0] = c.bottom_left or " "
        if b.bottom is not None and b.right is not None:
            canvas[height - 1][width - 1] = c.bottom_right or " "

        x_offset = _present(b.left)
        y_offset = _present(b.top)
        inner_w = width - x_offset - _present(b.right)
        inner_h = height - y_offset - _present(b.bottom)
        overlay(canvas, self.child.render(inner_w, inner_h), x_offset, y_offset)
        return canvas


def border(child: Widget) -> Border:
    """Create a Border with '|' and '-' sides and '+' corners."""
    return Border(child)


class Padding(Widget):
    """Adds empty space around a child."""

    def __init__(self, child: Widget) -> None:
        self.child = child
        self.pad_top = 0
        self.pad_left = 0
        self.pad_right = 0
        self.pad_bottom = 0

    def top(self, amount: int) -> "Padding":
        """Set the top padding."""
        self.pad_top = amount
        return self

    def left(self, amount: int) -> "Padding":
        """Set the left padding."""
        self.pad_left = amount
        return self

    def right(self, amount: int) -> "Padding":
        """Set the right padding."""
        self.pad_right = amount
        return self

    def bottom(self, amount: int) -> "Padding":
        """Set the bottom padding."""
        self.pad_bottom = amount
        return self

    def all(self, amount: int) -> "Padding":
        """Set the padding on all four sides."""
        self.pad_top = self.pad_left = self.pad_right = self.pad_bottom = amount
        return self

    def horizontal(self, amount: int) -> "Padding":
        """Set the left and right padding."""
        self.pad_left = self.pad_right = amount
        return self

    def vertical(self, amount: int) -> "Padding":
        """Set the top and bottom padding."""
        self.pad_top = self.pad_bottom = amount
        return self

    def min_size(self) -> Tuple[int, int]:
        child_w, child_h = self.child.min_size()
        return (
            child_w + self.pad_left + self.pad_right,
            child_h + self.pad_top + self.pad_bottom,
        )

    def render(self, width: int, height: int) -> Canvas:
        canvas = create_canvas(width, height)
        inner_w = max(0, width - (self.pad_left + self.pad_right))
        inner_h = max(0, height - (self.pad_top + self.pad_bottom))
        overlay(canvas, self.child.render(inner_w, inner_h), self.pad_left, self.pad_top)
        return canvas


def padding(child: Widget) -> Padding:
    """Create a Padding widget with no padding yet."""
    return Padding(child)


class SizedBox(Widget):
    """Forces its child to a given width, height or both."""

    def __init__(self, child: Widget) -> None:
        self.child = child
        self.forced_width: Optional[int] = None
        self.forced_height: Optional[int] = None

    def width(self, w: int) -> "SizedBox":
        """Force the width."""
        self.forced_width = w
        return self

    def height(self, h: int) -> "SizedBox":
        """Force the height."""
        self.forced_height = h
        return self

    def min_size(self) -> Tuple[int, int]:
        child_w, child_h = self.child.min_size()
        return (
            child_w if self.forced_width is None else self.forced_width,
            child_h if self.forced_height is None else self.forced_height,
        )

    def render(self, width: int, height: int) -> Canvas:
        canvas = create_canvas(width, height)
        child_w = width if self.forced_width is None else self.forced_width
        child_h = height if self.forced_height is None else self.forced_height
        overlay(canvas, self.child.render(child_w, child_h), 0, 0)
        return canvas


def sizedbox(child: Widget) -> SizedBox:
    """Create a SizedBox that keeps the child's size until told otherwise."""
    return SizedBox(child)


def _total_flex(children: Iterable[Widget]) -> int:
    return sum(f for f in (child.flex_factor() for child in children) if f is not None)


class Column(Widget):
    """Stacks children top to bottom; flexible children share spare rows."""

    def __init__(self, children: Iterable[Widget]) -> None:
        self.children: List[Widget] = list(children)

    def min_size(self) -> Tuple[int, int]:
        sizes = [child.min_size() for child in self.children]
        return (max((w for w, _ in sizes), default=0), sum(h for _, h in sizes))

    def render(self, width: int, height: int) -> Canvas:
        canvas = create_canvas(width, height)
        heights = [child.min_size()[1] for child in self.children]
        remaining = max(0, height - sum(heights))
        total_flex = _total_flex(self.children)
        if total_flex > 0:
            for i, child in enumerate(self.children):
                flex = child.flex_factor()
                if flex is not None:
                    heights[i] += remaining * flex // total_flex
        y_offset = 0
        for child, child_h in zip(self.children, heights):
            overlay(canvas, child.render(width, child_h), 0, y_offset)
            y_offset += child_h
            if y_offset >= height:
                break
        return canvas


def column(children: Iterable[Widget]) -> Column:
    """Create a Column."""
    return Column(children)


class Row(Widget):
    """Places children left to right; flexible children share spare columns."""

    def __init__(self, children: Iterable[Widget]) -> None:
        self.children: List[Widget] = list(children)

    def min_size(self) -> Tuple[int, int]:
        sizes = [child.min_size() for child in self.children]
        return (sum(w for w, _ in sizes), max((h for _, h in sizes), default=0))

    def render(self, width: int, height: int) -> Canvas:
        canvas = create_canvas(width, height)
        widths = [child.min_size()[0] for child in self.children]
        extra = max(0, width - sum(widths))
        total_flex = _total_flex(self.children)
        if total_flex > 0:
            for i, child in enumerate(self.children):
                flex = child.flex_factor()
                if flex is not None:
                    widths[i] += extra * flex // total_flex

        # Hand out cells lost to rounding, one per child from the left.
        remainder = max(0, width - sum(widths))
        for i in range(len(widths)):
            if remainder == 0:
                break
            widths[i] += 1
            remainder -= 1

        x_offset = 0
        for child, child_w in zip(self.children, widths):
            overlay(canvas, child.render(child_w, height), x_offset, 0)
            x_offset += child_w
            if x_offset >= width:
                break
        return canvas


def row(children: Iterable[Widget]) -> Row:
    """Create a Row."""
    return Row(children)


class Stack(Widget):
    """Draws children on top of each other, later ones in front."""

    def __init__(self, children: Iterable[Widget]) -> None:
        self.children: List[Widget] = list(children)

    def min_size(self) -> Tuple[int, int]:
        sizes = [child.min_size() for child in self.children]
        return (max((w for w, _ in sizes), default=0), max((h for _, h in sizes), default=0))

    def render(self, width: int, height: int) -> Canvas:
        canvas = create_canvas(width, height)
        for child in self.children:
            overlay(canvas, child.render(width, height), 0, 0)
        return canvas


def stack(children: Iterable[Widget]) -> Stack:
    """Create a Stack."""
    return Stack(children)