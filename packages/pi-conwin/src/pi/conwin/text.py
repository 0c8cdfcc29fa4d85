"""Terminal text measurement for window titles.

Widths are measured per grapheme cluster: ``grapheme`` does the
segmentation and ``wcwidth`` supplies the column count, with a fast path for
plain ASCII.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterator

import grapheme
import wcwidth as _wcwidth

__all__ = ["iter_cells", "strip_ansi", "truncate_to_width", "visible_width"]

# CSI, OSC 8 and APC sequences never take up columns.
_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"        # CSI
    r"|\x1b\]8;;[^\x07]*\x07"       # OSC 8
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"  # APC
)

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def _grapheme_width(g: str) -> int:
    """Return the column width of one grapheme cluster."""
    if not g:
        return 0

    first = g[0]
    cp = ord(first)
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0

    if len(g) > 1:
        # VS16, ZWJ sequences and skin tones render as emoji.
        for ch in g:
            c = ord(ch)
            if c in (0xFE0F, 0x200D) or 0x1F3FB <= c <= 0x1F3FF:
                return 2
        if unicodedata.category(first).startswith("M"):
            return 0

    return max(_wcwidth.wcwidth(first), 0)


def strip_ansi(text: str) -> str:
    return _STRIP_RE.sub("", text)


def visible_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies."""
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


def iter_cells(text: str) -> Iterator[tuple[str, int]]:
    """Yield ``(grapheme, width)`` pairs for plain (ANSI-free) *text*."""
    for g in grapheme.graphemes(text):
        yield g, _grapheme_width(g)


def truncate_to_width(text: str, max_width: int, ellipsis: str = "") -> str:
    """Cut *text* at a grapheme boundary so it fits in *max_width* columns.

    When cutting is needed, *ellipsis* is appended and counts towards the
    width.  ANSI sequences in *text* are dropped.
    """
    if max_width <= 0:
        return ""

    text = strip_ansi(text)
    if visible_width(text) <= max_width:
        return text

    target = max_width - visible_width(ellipsis)
    if target <= 0:
        return _take_columns(ellipsis, max_width)
    return _take_columns(text, target) + ellipsis


def _take_columns(text: str, max_cols: int) -> str:
    result: list[str] = []
    cols = 0
    for g, w in iter_cells(text):
        if cols + w > max_cols:
            break
        result.append(g)
        cols += w
    return "".join(result)
