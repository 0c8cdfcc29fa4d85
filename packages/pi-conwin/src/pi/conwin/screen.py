"""Character-grid rendering of windows.

The compositor hands each visible window to a ``Renderer`` as
``render(rect, depth, style, title)`` and never reads anything back.
``ScreenRenderer`` is the stock implementation: it paints onto an in-memory
``Screen`` of styled cells and, when given a ``Terminal``, writes the grid
out on ``flush``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from pi.conwin.geometry import Rect
from pi.conwin.style import WindowStyle, border_glyphs
from pi.conwin.text import iter_cells, truncate_to_width

if TYPE_CHECKING:
    from pi.conwin.terminal import Terminal

__all__ = ["Cell", "Renderer", "Screen", "ScreenRenderer"]

logger = logging.getLogger(__name__)

_RESET = "\x1b[0m"

# Placeholder for the second column of a double-width grapheme.
_CONTINUATION = ""


# ---------------------------------------------------------------------------
# Renderer protocol
# ---------------------------------------------------------------------------


class Renderer(Protocol):
    """Sink for the windows of one draw pass."""

    def clear(self) -> None:
        """Start a new frame."""
        ...

    def render(
        self,
        rect: Rect,
        depth: int,
        style: WindowStyle,
        title: str | None,
    ) -> None:
        """Draw one window.  Called in paint order."""
        ...

    def flush(self) -> None:
        """Finish the frame."""
        ...


# ---------------------------------------------------------------------------
# Screen
# ---------------------------------------------------------------------------


@dataclass
class Cell:
    char: str = " "
    style: WindowStyle | None = None


class Screen:
    """A ``columns`` x ``rows`` grid of styled cells.

    Writes outside the grid are ignored.
    """

    def __init__(self, columns: int, rows: int) -> None:
        self.columns = columns
        self.rows = rows
        self._cells: list[list[Cell]] = []
        self.reset()

    def reset(self) -> None:
        self._cells = [
            [Cell() for _ in range(self.columns)] for _ in range(self.rows)
        ]

    def contains(self, rect: Rect) -> bool:
        """Return ``True`` if *rect* lies entirely on the grid."""
        return (
            rect.x >= 0
            and rect.y >= 0
            and rect.right <= self.columns
            and rect.bottom <= self.rows
        )

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[y][x]

    def put(self, x: int, y: int, char: str, style: WindowStyle | None) -> None:
        if 0 <= x < self.columns and 0 <= y < self.rows:
            self._cells[y][x] = Cell(char, style)

    def write_text(
        self, x: int, y: int, text: str, style: WindowStyle | None
    ) -> None:
        """Paint *text* starting at *x*, one grapheme per cell.

        A wide grapheme that would straddle the right edge is dropped.
        """
        col = x
        for g, width in iter_cells(text):
            if width == 0:
                continue
            if col + width > self.columns:
                break
            self.put(col, y, g, style)
            for extra in range(1, width):
                self.put(col + extra, y, _CONTINUATION, style)
            col += width

    def to_text(self) -> str:
        """Plain-text dump of the grid, one line per row."""
        return "\n".join(
            "".join(c.char for c in row) for row in self._cells
        )

    def to_lines(self) -> list[str]:
        """Render each row as a string with SGR color sequences."""
        lines: list[str] = []
        for row in self._cells:
            parts: list[str] = []
            current: WindowStyle | None = None
            for c in row:
                if c.style != current:
                    parts.append(c.style.sgr() if c.style is not None else _RESET)
                    current = c.style
                parts.append(c.char)
            if current is not None:
                parts.append(_RESET)
            lines.append("".join(parts))
        return lines


# ---------------------------------------------------------------------------
# ScreenRenderer
# ---------------------------------------------------------------------------


class ScreenRenderer:
    """Paints windows onto a :class:`Screen`.

    Windows that do not fit entirely on the screen are skipped rather than
    clipped.
    """

    def __init__(self, screen: Screen, terminal: Terminal | None = None) -> None:
        self.screen = screen
        self.terminal = terminal

    @classmethod
    def for_terminal(cls, terminal: Terminal) -> ScreenRenderer:
        """Build a renderer sized to *terminal*."""
        return cls(Screen(terminal.columns, terminal.rows), terminal)

    def clear(self) -> None:
        self.screen.reset()
        if self.terminal is not None:
            self.terminal.clear_screen()

    def render(
        self,
        rect: Rect,
        depth: int,
        style: WindowStyle,
        title: str | None,
    ) -> None:
        if not self.screen.contains(rect):
            logger.debug("Skipping off-screen window at %r", rect)
            return

        for y in range(rect.y, rect.bottom):
            for x in range(rect.x, rect.right):
                self.screen.put(x, y, " ", style)

        if style.border != "none":
            self._draw_border(rect, style)

        if title:
            self._draw_title(rect, style, title)

    def _draw_border(self, rect: Rect, style: WindowStyle) -> None:
        glyphs = border_glyphs(style.border)
        if glyphs is None or rect.width < 2 or rect.height < 2:
            return

        put = self.screen.put
        left, top = rect.x, rect.y
        right, bottom = rect.right - 1, rect.bottom - 1

        put(left, top, glyphs.top_left, style)
        put(right, top, glyphs.top_right, style)
        put(left, bottom, glyphs.bottom_left, style)
        put(right, bottom, glyphs.bottom_right, style)

        for x in range(left + 1, right):
            put(x, top, glyphs.horizontal, style)
            put(x, bottom, glyphs.horizontal, style)

        for y in range(top + 1, bottom):
            put(left, y, glyphs.vertical, style)
            put(right, y, glyphs.vertical, style)

    def _draw_title(self, rect: Rect, style: WindowStyle, title: str) -> None:
        if style.border != "none":
            # Inset past the corner and one rule segment on each side.
            if rect.width > 4:
                text = truncate_to_width(title, rect.width - 4)
                self.screen.write_text(rect.x + 2, rect.y, text, style)
        elif rect.width > 0 and rect.height > 0:
            text = truncate_to_width(title, rect.width)
            self.screen.write_text(rect.x, rect.y, text, style)

    def flush(self) -> None:
        if self.terminal is None:
            return
        for row, line in enumerate(self.screen.to_lines()):
            self.terminal.move_to(row, 0)
            self.terminal.write(line)
        self.terminal.reset_style()
        self.terminal.flush()
