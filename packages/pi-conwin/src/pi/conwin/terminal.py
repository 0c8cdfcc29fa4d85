"""Terminal output back-end.

Provides a ``Terminal`` protocol and a ``ProcessTerminal`` implementation
that writes ANSI escape sequences to ``sys.stdout``.  Only output is
handled; the compositor never reads input.
"""

from __future__ import annotations

import os
import sys
from typing import Protocol

__all__ = ["ProcessTerminal", "Terminal"]

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_RESET = "\x1b[0m"
_MOVE_TO_FMT = "\x1b[{};{}H"


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal output operations."""

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def write(self, data: str) -> None: ...

    def flush(self) -> None: ...

    def move_to(self, row: int, col: int) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def clear_screen(self) -> None: ...

    def reset_style(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Terminal backed by ``sys.stdout``.

    Set ``PI_CONWIN_WRITE_LOG`` to a file path to mirror every write there.
    """

    def __init__(self) -> None:
        self._write_log_path: str = os.environ.get("PI_CONWIN_WRITE_LOG", "")

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    # -- write --------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        sys.stdout.write(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(data)
            except OSError:
                pass

    def flush(self) -> None:
        sys.stdout.flush()

    # -- cursor / screen manipulation --------------------------------------

    def move_to(self, row: int, col: int) -> None:
        """Move the cursor to zero-based *row*/*col*."""
        self.write(_MOVE_TO_FMT.format(row + 1, col + 1))

    def hide_cursor(self) -> None:
        self.write(_HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(_SHOW_CURSOR)

    def clear_screen(self) -> None:
        self.write(_CLEAR_SCREEN)

    def reset_style(self) -> None:
        self.write(_RESET)
