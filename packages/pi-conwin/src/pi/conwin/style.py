"""Window styling: console colors, border styles, and glyph sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

__all__ = [
    "BorderStyle",
    "BorderGlyphs",
    "Color",
    "WindowStyle",
    "bg_code",
    "border_glyphs",
    "fg_code",
]

# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

Color = Literal[
    "black",
    "dark_red",
    "dark_green",
    "dark_yellow",
    "dark_blue",
    "dark_magenta",
    "dark_cyan",
    "gray",
    "dark_gray",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
]

COLORS: tuple[str, ...] = get_args(Color)

# Index into COLORS -> SGR foreground code.  The first eight are the normal
# palette (30-37), the rest the bright palette (90-97).
_FG_CODES: dict[str, int] = {
    name: (30 + i if i < 8 else 90 + i - 8) for i, name in enumerate(COLORS)
}

_RESET = "\x1b[0m"


def fg_code(color: Color) -> int:
    """Return the SGR foreground code for *color*."""
    try:
        return _FG_CODES[color]
    except KeyError:
        raise ValueError(f"Unknown color: {color!r}") from None


def bg_code(color: Color) -> int:
    """Return the SGR background code for *color*."""
    return fg_code(color) + 10


# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------

BorderStyle = Literal["none", "single", "double"]


@dataclass(frozen=True)
class BorderGlyphs:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str


_BORDER_GLYPHS: dict[str, BorderGlyphs] = {
    "single": BorderGlyphs("┌", "┐", "└", "┘", "─", "│"),
    "double": BorderGlyphs("╔", "╗", "╚", "╝", "═", "║"),
}


def border_glyphs(style: BorderStyle) -> BorderGlyphs | None:
    """Return the glyph set for *style*, or ``None`` for ``"none"``."""
    if style == "none":
        return None
    try:
        return _BORDER_GLYPHS[style]
    except KeyError:
        raise ValueError(f"Unknown border style: {style!r}") from None


# ---------------------------------------------------------------------------
# WindowStyle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WindowStyle:
    """Visual attributes of a window; consumed only by renderers."""

    border: BorderStyle = "none"
    foreground: Color = "white"
    background: Color = "black"

    def sgr(self) -> str:
        """Return the escape sequence selecting this style's colors."""
        return f"\x1b[{fg_code(self.foreground)};{bg_code(self.background)}m"

    def apply(self, text: str) -> str:
        """Wrap *text* in this style followed by a reset."""
        return f"{self.sgr()}{text}{_RESET}"
