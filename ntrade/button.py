"""A framed, centred label that looks different when selected."""

from __future__ import annotations

from typing import Optional, Tuple

from .content import text
from .layout import AlignHorizontal, AlignVertical, Borders, Corners, align, border
from .rendering import Canvas, Widget
from .theme import CORNERS_ROUND

_BORDERS_NORMAL = Borders(left="|", right="|", top="-", bottom="-")
_BORDERS_SELECTED = Borders(left="|", right="|", top="=", bottom="=")
_CORNERS_SELECTED = CORNERS_ROUND


class Button(Widget):
    """A label inside a border; selected buttons use '=' for top and bottom."""

    def __init__(self, text: str) -> None:
        self.text = str(text)
        self.is_selected = False
        self.normal_borders: Optional[Borders] = None
        self.normal_corners: Optional[Corners] = None
        self.selected_borders: Optional[Borders] = None
        self.selected_corners: Optional[Corners] = None

    def selected(self, sel: bool) -> "Button":
        """Set whether the button is drawn as selected."""
        self.is_selected = sel
        return self

    def _build(self) -> Widget:
        label = (
            align(text(self.text))
            .horizontal(AlignHorizontal.CENTER)
            .vertical(AlignVertical.CENTER)
        )
        if self.is_selected:
            borders = self.selected_borders or _BORDERS_SELECTED
            corners = self.selected_corners or _CORNERS_SELECTED
        else:
            borders = self.normal_borders or _BORDERS_NORMAL
            corners = self.normal_corners or CORNERS_ROUND
        return border(align(label)).borders(borders).corners(corners)

    def min_size(self) -> Tuple[int, int]:
        return self._build().min_size()

    def render(self, width: int, height: int) -> Canvas:
        return self._build().render(width, height)


def button(s: str) -> Button:
    """Create an unselected Button with the given label."""
    return Button(s)