"""Hierarchy store: the authoritative set of top-level windows.

Child windows are reached through their parents; only parentless windows
live in the top-level collection.  The store keeps ``parent`` back-references
and ``children`` lists consistent for the mutations it performs.
"""

from __future__ import annotations

import logging
from typing import Iterator, Literal, get_args

from pi.conwin.planner import compute_draw_order
from pi.conwin.window import Window

__all__ = ["InvalidArgumentError", "OrphanPolicy", "ORPHAN_POLICIES", "WindowStore"]

logger = logging.getLogger(__name__)

# "keep"    -> children stay attached to the removed window (not drawn).
# "promote" -> direct children become top-level windows.
OrphanPolicy = Literal["keep", "promote"]

ORPHAN_POLICIES: tuple[str, ...] = get_args(OrphanPolicy)


class InvalidArgumentError(ValueError):
    """Raised when a store mutation receives a missing window or a cyclic parent."""


def _index_of(windows: list[Window], window: Window) -> int:
    for i, candidate in enumerate(windows):
        if candidate is window:
            return i
    return -1


class WindowStore:
    """Owns the top-level windows of a forest.

    Parameters
    ----------
    orphan_policy:
        What :meth:`remove` does with the removed window's children.
    """

    def __init__(self, orphan_policy: OrphanPolicy = "keep") -> None:
        if orphan_policy not in ORPHAN_POLICIES:
            raise ValueError(f"Unknown orphan policy: {orphan_policy!r}")
        self.orphan_policy: OrphanPolicy = orphan_policy
        self._top_level: list[Window] = []

    # -- mutation -------------------------------------------------------------

    def add(self, window: Window | None, parent: Window | None = None) -> None:
        """Add *window*, optionally as a child of *parent*.

        With *parent*, the window is first unlinked from the top level or its
        previous parent.  *parent* must not be *window* or one of its
        descendants.  Without *parent*, a window that already has a parent is
        reachable through it and is not placed in the top-level collection.
        """
        if window is None:
            raise InvalidArgumentError("window must not be None")

        if parent is not None:
            if parent is window or any(
                d is parent for d in window.iter_descendants()
            ):
                raise InvalidArgumentError(
                    f"{parent!r} is {window!r} or one of its descendants"
                )
            self._detach(window, keep_parent=parent)
            window.parent = parent
            if _index_of(parent.children, window) == -1:
                parent.children.append(window)
            logger.debug("Added %r as child of %r", window, parent)
            return

        if window.parent is not None:
            logger.debug("%r already has parent %r", window, window.parent)
            return

        if _index_of(self._top_level, window) == -1:
            self._top_level.append(window)
            logger.debug("Added top-level %r", window)

    def remove(self, window: Window | None) -> None:
        """Detach *window* from the top level and from its parent."""
        if window is None:
            raise InvalidArgumentError("window must not be None")

        self._detach(window)
        logger.debug("Removed %r", window)

        if self.orphan_policy == "promote" and window.children:
            self._promote_children(window)

    def _detach(self, window: Window, keep_parent: Window | None = None) -> None:
        """Unlink *window* from the top level and from its current parent.

        The link to *keep_parent* is left in place.
        """
        idx = _index_of(self._top_level, window)
        if idx != -1:
            self._top_level.pop(idx)

        parent = window.parent
        if parent is None or parent is keep_parent:
            return
        idx = _index_of(parent.children, window)
        if idx != -1:
            parent.children.pop(idx)
        window.parent = None

    def _promote_children(self, window: Window) -> None:
        orphans = list(window.children)
        window.children.clear()
        for child in orphans:
            child.parent = None
            if _index_of(self._top_level, child) == -1:
                self._top_level.append(child)
        logger.debug("Promoted %d orphan(s) of %r to top level", len(orphans), window)

    def clear(self) -> None:
        """Forget every top-level window."""
        self._top_level.clear()

    # -- queries --------------------------------------------------------------

    @property
    def top_level(self) -> tuple[Window, ...]:
        """Top-level windows in insertion order."""
        return tuple(self._top_level)

    def __iter__(self) -> Iterator[Window]:
        """Iterate every reachable window in draw order."""
        return iter(compute_draw_order(self._top_level))

    def __len__(self) -> int:
        return len(compute_draw_order(self._top_level))

    def __contains__(self, window: object) -> bool:
        return any(w is window for w in self)
