"""Tests for Screen and ScreenRenderer."""

from __future__ import annotations

from pi.conwin.geometry import Rect
from pi.conwin.manager import WindowManager
from pi.conwin.screen import Screen, ScreenRenderer
from pi.conwin.style import WindowStyle
from pi.conwin.window import Window

from .virtual_terminal import VirtualTerminal

SINGLE = WindowStyle(border="single")
DOUBLE = WindowStyle(border="double")
PLAIN = WindowStyle()


def _rows(screen: Screen) -> list[str]:
    return screen.to_text().split("\n")


# ---------------------------------------------------------------------------
# Screen
# ---------------------------------------------------------------------------


class TestScreen:
    def test_starts_blank(self) -> None:
        screen = Screen(4, 2)
        assert _rows(screen) == ["    ", "    "]

    def test_put_outside_is_ignored(self) -> None:
        screen = Screen(2, 2)
        screen.put(-1, 0, "x", None)
        screen.put(2, 0, "x", None)
        screen.put(0, 5, "x", None)
        assert _rows(screen) == ["  ", "  "]

    def test_contains(self) -> None:
        screen = Screen(10, 5)
        assert screen.contains(Rect(0, 0, 10, 5))
        assert not screen.contains(Rect(-1, 0, 2, 2))
        assert not screen.contains(Rect(5, 0, 6, 2))
        assert not screen.contains(Rect(0, 4, 2, 2))

    def test_write_text_wide_grapheme_takes_two_cells(self) -> None:
        screen = Screen(5, 1)
        screen.write_text(0, 0, "a世b", None)
        assert screen.cell(1, 0).char == "世"
        assert screen.cell(2, 0).char == ""
        assert screen.cell(3, 0).char == "b"

    def test_write_text_drops_straddling_wide_grapheme(self) -> None:
        screen = Screen(2, 1)
        screen.write_text(1, 0, "世", None)
        assert _rows(screen) == ["  "]

    def test_to_lines_emits_color_and_reset(self) -> None:
        screen = Screen(2, 1)
        style = WindowStyle(foreground="yellow", background="blue")
        screen.put(0, 0, "x", style)
        (line,) = screen.to_lines()
        assert line.startswith(style.sgr() + "x")
        assert "\x1b[0m" in line

    def test_reset(self) -> None:
        screen = Screen(1, 1)
        screen.put(0, 0, "x", None)
        screen.reset()
        assert _rows(screen) == [" "]


# ---------------------------------------------------------------------------
# ScreenRenderer
# ---------------------------------------------------------------------------


class TestBorders:
    def test_single_border(self) -> None:
        screen = Screen(4, 3)
        ScreenRenderer(screen).render(Rect(0, 0, 4, 3), 0, SINGLE, None)
        assert _rows(screen) == ["┌──┐", "│  │", "└──┘"]

    def test_double_border(self) -> None:
        screen = Screen(3, 3)
        ScreenRenderer(screen).render(Rect(0, 0, 3, 3), 0, DOUBLE, None)
        assert _rows(screen) == ["╔═╗", "║ ║", "╚═╝"]

    def test_no_border_fills_background(self) -> None:
        screen = Screen(3, 2)
        screen.put(1, 1, "x", None)
        ScreenRenderer(screen).render(Rect(0, 0, 3, 2), 0, PLAIN, None)
        assert _rows(screen) == ["   ", "   "]
        assert screen.cell(1, 1).style == PLAIN


class TestTitles:
    def test_bordered_title_inset(self) -> None:
        screen = Screen(10, 3)
        ScreenRenderer(screen).render(Rect(0, 0, 10, 3), 0, SINGLE, "Hi")
        assert _rows(screen)[0] == "┌─Hi─────┐"

    def test_bordered_title_truncated(self) -> None:
        screen = Screen(8, 3)
        ScreenRenderer(screen).render(Rect(0, 0, 8, 3), 0, SINGLE, "Very long title")
        assert _rows(screen)[0] == "┌─Very─┐"

    def test_bordered_title_skipped_when_too_narrow(self) -> None:
        screen = Screen(4, 3)
        ScreenRenderer(screen).render(Rect(0, 0, 4, 3), 0, SINGLE, "Title")
        assert _rows(screen)[0] == "┌──┐"

    def test_borderless_title_at_origin(self) -> None:
        screen = Screen(6, 2)
        ScreenRenderer(screen).render(Rect(1, 0, 4, 2), 0, PLAIN, "abcdef")
        assert _rows(screen)[0] == " abcd "


class TestBounds:
    def test_off_screen_window_skipped(self) -> None:
        screen = Screen(5, 5)
        ScreenRenderer(screen).render(Rect(3, 3, 5, 5), 0, SINGLE, "x")
        assert screen.to_text() == Screen(5, 5).to_text()

    def test_negative_origin_skipped(self) -> None:
        screen = Screen(5, 5)
        ScreenRenderer(screen).render(Rect(-1, 0, 3, 3), 0, SINGLE, None)
        assert screen.to_text() == Screen(5, 5).to_text()


class TestTerminalOutput:
    def test_for_terminal_matches_size(self) -> None:
        term = VirtualTerminal(rows=7, columns=13)
        renderer = ScreenRenderer.for_terminal(term)
        assert (renderer.screen.columns, renderer.screen.rows) == (13, 7)

    def test_clear_clears_terminal(self) -> None:
        term = VirtualTerminal(rows=2, columns=2)
        renderer = ScreenRenderer.for_terminal(term)
        renderer.clear()
        assert term.clear_count == 1

    def test_flush_writes_rows(self) -> None:
        term = VirtualTerminal(rows=3, columns=6)
        renderer = ScreenRenderer.for_terminal(term)
        renderer.render(Rect(0, 0, 6, 3), 0, SINGLE, "ok")
        renderer.flush()
        assert "ok" in term.output
        assert "\x1b[3;1H" in term.output
        assert term.flush_count == 1

    def test_flush_without_terminal_is_noop(self) -> None:
        ScreenRenderer(Screen(1, 1)).flush()


class TestComposition:
    """Painter's order through WindowManager onto a real screen."""

    def test_child_painted_over_parent(self) -> None:
        screen = Screen(10, 4)
        manager = WindowManager(ScreenRenderer(screen))
        parent = Window.at(0, 0, 10, 4, style=SINGLE)
        Window.at(2, 1, 3, 1, "abc", depth=1, parent=parent)
        manager.add_window(parent)
        manager.draw_all()
        assert _rows(screen) == [
            "┌────────┐",
            "│ abc    │",
            "│        │",
            "└────────┘",
        ]

    def test_occluded_window_not_painted(self) -> None:
        screen = Screen(6, 3)
        manager = WindowManager(ScreenRenderer(screen))
        under = Window.at(1, 1, 2, 1, "zz", depth=0)
        over = Window.at(0, 0, 6, 3, depth=1)
        manager.add_window(under)
        manager.add_window(over)
        report = manager.draw_all()
        assert report.hidden == [under]
        assert "zz" not in screen.to_text()
