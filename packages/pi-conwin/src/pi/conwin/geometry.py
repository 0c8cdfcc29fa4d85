"""Geometry primitives: screen positions, sizes, and rectangles.

All values are integer character-cell coordinates with the origin at the
top-left of the screen.  Sizes are not validated; zero or negative extents
simply produce degenerate rectangles.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Position", "Size", "Rect"]


@dataclass(frozen=True)
class Position:
    """A column/row coordinate."""

    x: int
    y: int

    @classmethod
    def zero(cls) -> Position:
        return cls(0, 0)


@dataclass(frozen=True)
class Size:
    """A width/height extent in character cells."""

    width: int
    height: int

    @classmethod
    def zero(cls) -> Size:
        return cls(0, 0)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle ``[x, x + width) x [y, y + height)``."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_parts(cls, position: Position, size: Size) -> Rect:
        return cls(position.x, position.y, size.width, size.height)

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge."""
        return self.y + self.height

    def covers(self, other: Rect) -> bool:
        """Return ``True`` if this rectangle fully contains *other*.

        Edges may coincide.  A zero-area *other* is covered by any rectangle
        containing its origin.
        """
        return (
            self.x <= other.x
            and self.y <= other.y
            and self.right >= other.right
            and self.bottom >= other.bottom
        )
