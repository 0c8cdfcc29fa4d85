"""Window manager: hierarchy mutation plus the draw pass.

A draw pass flattens the forest into paint order, checks each window for
full occlusion against every reachable window, and hands the visible ones to
a :class:`~pi.conwin.screen.Renderer`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pi.conwin.config import Config
from pi.conwin.planner import compute_draw_order
from pi.conwin.store import WindowStore
from pi.conwin.visibility import find_occluder, is_visible
from pi.conwin.window import Window

if TYPE_CHECKING:
    from pi.conwin.screen import Renderer

__all__ = ["DrawReport", "WindowManager"]

logger = logging.getLogger(__name__)


@dataclass
class DrawReport:
    """Outcome of one :meth:`WindowManager.draw_all` pass."""

    order: list[Window] = field(default_factory=list)
    drawn: list[Window] = field(default_factory=list)
    hidden: list[Window] = field(default_factory=list)


class WindowManager:
    """Owns a window forest and draws it.

    Parameters
    ----------
    renderer:
        Default renderer for :meth:`draw_all`.
    config:
        Orphan policy and frame-clearing behaviour.
    """

    def __init__(
        self,
        renderer: Renderer | None = None,
        config: Config | None = None,
    ) -> None:
        self.config = config if config is not None else Config()
        self.renderer = renderer
        self.store = WindowStore(self.config.orphan_policy)

    # ------------------------------------------------------------------
    # Hierarchy
    # ------------------------------------------------------------------

    def add_window(self, window: Window | None, parent: Window | None = None) -> None:
        """Add *window* at the top level, or under *parent*."""
        self.store.add(window, parent)

    def remove_window(self, window: Window | None) -> None:
        """Detach *window*; its children follow the configured orphan policy."""
        self.store.remove(window)

    @property
    def windows(self) -> list[Window]:
        """Every reachable window, in draw order."""
        return self.compute_draw_order()

    # ------------------------------------------------------------------
    # Ordering / visibility
    # ------------------------------------------------------------------

    def compute_draw_order(self) -> list[Window]:
        return compute_draw_order(self.store.top_level)

    def is_visible(self, window: Window) -> bool:
        """Check *window* against every reachable window."""
        return is_visible(window, self.compute_draw_order())

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw_all(self, renderer: Renderer | None = None) -> DrawReport:
        """Run one draw pass and report what was painted."""
        renderer = renderer if renderer is not None else self.renderer
        if renderer is None:
            raise RuntimeError("No renderer configured for draw_all()")

        if self.config.clear_before_draw:
            renderer.clear()

        report = DrawReport(order=self.compute_draw_order())
        for window in report.order:
            occluder = find_occluder(window, report.order)
            if occluder is not None:
                logger.debug("%r hidden behind %r", window, occluder)
                report.hidden.append(window)
                continue
            renderer.render(window.rect, window.depth, window.style, window.title)
            report.drawn.append(window)

        renderer.flush()
        logger.debug(
            "Draw pass: %d window(s), %d drawn, %d hidden",
            len(report.order),
            len(report.drawn),
            len(report.hidden),
        )
        return report
