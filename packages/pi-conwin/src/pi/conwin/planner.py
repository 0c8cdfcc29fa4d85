"""Draw-order planning over the window forest.

Produces the flat sequence in which windows must be painted so that stacking
looks right: top-level windows and each sibling group in ascending depth
(stable, so insertion order breaks ties), every window immediately followed
by its own subtree.

The planner never raises for malformed hierarchies.  A window reached again
while it is still on the active recursion path is a cycle; that revisit and
everything below it is skipped.  The path set is per-branch, so a window
that legitimately appears under two different branches is emitted on both.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from pi.conwin.window import Window

__all__ = ["compute_draw_order", "sorted_by_depth"]

logger = logging.getLogger(__name__)


def sorted_by_depth(windows: Iterable[Window]) -> list[Window]:
    """Return *windows* stable-sorted ascending by depth."""
    return sorted(windows, key=lambda w: w.depth)


def compute_draw_order(
    top_level: Iterable[Window],
    on_cycle: Callable[[Window], None] | None = None,
) -> list[Window]:
    """Flatten the forest rooted at *top_level* into draw order.

    *on_cycle*, if given, is called with each window whose revisit was
    truncated.
    """
    order: list[Window] = []
    path: set[int] = set()

    def emit(window: Window) -> None:
        key = id(window)
        if key in path:
            logger.debug("Cycle at %r; skipping revisit and its subtree", window)
            if on_cycle is not None:
                on_cycle(window)
            return

        path.add(key)
        order.append(window)
        for child in sorted_by_depth(window.children):
            emit(child)
        path.remove(key)

    for window in sorted_by_depth(top_level):
        emit(window)

    return order
