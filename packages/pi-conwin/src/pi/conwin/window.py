"""Window nodes: geometry, depth, style, and hierarchy links.

A window owns its ``children`` list.  The ``parent`` link is a weak
back-reference used for detachment; it never keeps the parent alive.
Consistency between the two is maintained by :class:`pi.conwin.store.WindowStore`,
not by the window itself.
"""

from __future__ import annotations

import weakref
from typing import Iterator

from pi.conwin.geometry import Position, Rect, Size
from pi.conwin.style import WindowStyle

__all__ = ["Window"]


class Window:
    """A rectangular window on the character grid.

    Equality and hashing are by identity; two windows with the same
    geometry are still distinct nodes.

    Parameters
    ----------
    rect:
        Position and size on screen.
    title:
        Optional caption drawn by the renderer.
    style:
        Border and colors, consumed only by the renderer.
    depth:
        Ordering key among siblings (or among top-level windows).
    parent:
        If given, the new window is appended to ``parent.children``.
    """

    def __init__(
        self,
        rect: Rect,
        title: str | None = None,
        style: WindowStyle | None = None,
        depth: int = 0,
        parent: Window | None = None,
    ) -> None:
        self.rect = rect
        self.title = title
        self.style = style if style is not None else WindowStyle()
        self.depth = depth
        self.children: list[Window] = []
        self._parent_ref: weakref.ref[Window] | None = None

        if parent is not None:
            self.parent = parent
            parent.children.append(self)

    @classmethod
    def at(
        cls,
        x: int,
        y: int,
        width: int,
        height: int,
        title: str | None = None,
        style: WindowStyle | None = None,
        depth: int = 0,
        parent: Window | None = None,
    ) -> Window:
        """Build a window from raw coordinates."""
        return cls(Rect(x, y, width, height), title, style, depth, parent)

    # -- hierarchy ------------------------------------------------------------

    @property
    def parent(self) -> Window | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: Window | None) -> None:
        # Only the back-reference changes; children lists are left alone.
        self._parent_ref = weakref.ref(value) if value is not None else None

    def iter_descendants(self) -> Iterator[Window]:
        """Yield owned descendants in pre-order, skipping cyclic revisits."""
        path: set[int] = {id(self)}

        def walk(node: Window) -> Iterator[Window]:
            for child in node.children:
                if id(child) in path:
                    continue
                yield child
                path.add(id(child))
                yield from walk(child)
                path.discard(id(child))

        yield from walk(self)

    # -- geometry shortcuts ---------------------------------------------------

    @property
    def position(self) -> Position:
        return self.rect.position

    @position.setter
    def position(self, value: Position) -> None:
        self.rect = Rect.from_parts(value, self.rect.size)

    @property
    def size(self) -> Size:
        return self.rect.size

    @size.setter
    def size(self, value: Size) -> None:
        self.rect = Rect.from_parts(self.rect.position, value)

    def __repr__(self) -> str:
        r = self.rect
        label = f" {self.title!r}" if self.title else ""
        return f"<Window{label} ({r.x},{r.y} {r.width}x{r.height}) depth={self.depth}>"
