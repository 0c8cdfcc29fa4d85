"""Full-occlusion visibility checks.

A window is hidden when some *other* window of greater or equal depth fully
contains its rectangle.  Only depth and geometry are compared; paint order
and the parent/child relation play no part, so a child gets no immunity
from windows that cover it at its own depth or above.  Partial overlap never
hides a window.
"""

from __future__ import annotations

from typing import Iterable

from pi.conwin.window import Window

__all__ = ["find_occluder", "is_visible"]


def find_occluder(target: Window, windows: Iterable[Window]) -> Window | None:
    """Return the first window in *windows* that fully hides *target*."""
    for other in windows:
        if other is target or other.depth < target.depth:
            continue
        if other.rect.covers(target.rect):
            return other
    return None


def is_visible(target: Window, windows: Iterable[Window]) -> bool:
    """Return ``True`` unless *target* is fully covered within *windows*."""
    return find_occluder(target, windows) is None
