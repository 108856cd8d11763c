"""The keys the application reacts to and reading them from the terminal."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from blessed import Terminal


class InputKey(Enum):
    """A key press the screens understand."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESCAPE = "escape"


_BY_NAME = {
    "KEY_UP": InputKey.UP,
    "KEY_DOWN": InputKey.DOWN,
    "KEY_LEFT": InputKey.LEFT,
    "KEY_RIGHT": InputKey.RIGHT,
    "KEY_ENTER": InputKey.ENTER,
    "KEY_ESCAPE": InputKey.ESCAPE,
}

_BY_CHAR = {
    "\r": InputKey.ENTER,
    "\n": InputKey.ENTER,
    "\x1b": InputKey.ESCAPE,
}


def parse_key(keystroke) -> Optional[InputKey]:
    """Map a keystroke (or plain string) to an InputKey, or None if it is not one."""
    name = getattr(keystroke, "name", None)
    if name in _BY_NAME:
        return _BY_NAME[name]
    return _BY_CHAR.get(str(keystroke))


def wait_input() -> InputKey:
    """Block until one of the recognised keys is pressed and return it.

    Input typed before the call is thrown away.
    """
    term = Terminal()
    with term.cbreak():
        while term.inkey(timeout=0):
            pass
        while True:
            key = parse_key(term.inkey())
            if key is not None:
                return key