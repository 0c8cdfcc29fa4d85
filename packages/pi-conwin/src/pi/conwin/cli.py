"""Entry point for the conwin-demo CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pi.conwin.config import LOG_LEVELS, Config, load_config
from pi.conwin.manager import WindowManager
from pi.conwin.screen import Screen, ScreenRenderer
from pi.conwin.style import WindowStyle
from pi.conwin.terminal import ProcessTerminal
from pi.conwin.window import Window


def build_demo(manager: WindowManager) -> dict[str, Window]:
    """Populate *manager* with the demo scene and return its windows by name."""
    main = Window.at(
        1, 1, 78, 23, "Main Window (Z=0)",
        WindowStyle("double", "white", "dark_gray"), depth=0,
    )
    second = Window.at(
        10, 3, 50, 15, "Second Window (Z=1)",
        WindowStyle("single", "white", "blue"), depth=1,
    )
    child = Window.at(
        5, 2, 30, 8, "Child of Second (Z=0)",
        WindowStyle("single", "black", "green"), depth=0,
    )
    top = Window.at(
        20, 8, 35, 10, "Top Window (Z=2)",
        WindowStyle("double", "yellow", "magenta"), depth=2,
    )
    obscured = Window.at(
        22, 9, 10, 5, "Obscured? (Z=0)",
        WindowStyle("single", "white", "red"), depth=0,
    )

    manager.add_window(main)
    manager.add_window(second)
    manager.add_window(child, parent=second)
    manager.add_window(top)
    manager.add_window(obscured)

    return {
        "main": main,
        "second": second,
        "child": child,
        "top": top,
        "obscured": obscured,
    }


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="conwin-demo", description="pi-conwin: draw a demo window stack"
    )
    parser.add_argument("--config", default=None, help="JSON settings file")
    parser.add_argument("--log-level", default=None, choices=list(LOG_LEVELS))
    parser.add_argument(
        "--no-clear", action="store_true", help="Do not clear the screen before drawing"
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the composed 80x25 grid as plain text instead of drawing",
    )
    parser.add_argument(
        "--wait", action="store_true", help="Wait for Enter before exiting"
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        parser.error(str(exc))
    config = config.merged(
        {
            "log_level": args.log_level,
            "clear_before_draw": False if args.no_clear else None,
        }
    )

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.dump:
        _dump(config)
        return

    terminal = ProcessTerminal()
    manager = WindowManager(ScreenRenderer.for_terminal(terminal), config)
    build_demo(manager)

    if config.hide_cursor:
        terminal.hide_cursor()
    try:
        manager.draw_all()
        terminal.move_to(max(terminal.rows - 1, 0), 0)
        terminal.write("Demo complete.")
        if args.wait:
            terminal.write(" Press Enter to exit...")
            terminal.flush()
            sys.stdin.readline()
        terminal.write("\n")
    finally:
        if config.hide_cursor:
            terminal.show_cursor()
        terminal.flush()


def _dump(config: Config) -> None:
    screen = Screen(80, 25)
    manager = WindowManager(ScreenRenderer(screen), config)
    build_demo(manager)
    report = manager.draw_all()
    print(screen.to_text())
    for window in report.hidden:
        print(f"hidden: {window.title}")


if __name__ == "__main__":
    main()
