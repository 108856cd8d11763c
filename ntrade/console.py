"""Terminal output, key input and pauses behind one object."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO

from .keys import InputKey, wait_input
from .rendering import NIO_MAX_COLS, NIO_MAX_ROWS

_CSI = "\x1b["


class Console:
    """Writes screens to a text stream and reads keys from a key source."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        key_source: Optional[Callable[[], InputKey]] = None,
    ) -> None:
        self._stream = stream
        self._key_source = key_source or wait_input

    @property
    def stream(self) -> TextIO:
        return sys.stdout if self._stream is None else self._stream

    def init(self) -> None:
        """Ask the terminal to resize itself to the screen dimensions."""
        self.stream.write(f"{_CSI}8;{NIO_MAX_ROWS};{NIO_MAX_COLS}t")
        self.stream.flush()

    def print(self, s: str) -> None:
        """Write text without a trailing newline."""
        self.stream.write(s)

    def clear_screen(self) -> None:
        """Clear the screen, then the scrollback, leaving the cursor top-left."""
        # The scrollback must be purged after the clear, or the clear would
        # push the current screen back into it.
        self.stream.write(f"{_CSI}2J{_CSI}H")
        self.stream.write(f"{_CSI}3J{_CSI}H")

    def set_color(self, foreground: int) -> None:
        """Set the text colour to a 256-colour palette index."""
        self.stream.write(f"{_CSI}38;5;{foreground}m")

    def flush(self) -> None:
        """Flush pending output."""
        self.stream.flush()

    def dispose(self) -> None:
        """Release the console; a terminal needs nothing released."""

    def read_key(self) -> InputKey:
        """Wait for and return the next recognised key."""
        return self._key_source()

    def sleep(self, ms: int) -> None:
        """Pause for the given number of milliseconds."""
        time.sleep(ms / 1000)