"""pi-conwin: nested terminal windows with depth ordering and occlusion culling."""

# Geometry
from pi.conwin.geometry import Position, Rect, Size

# Styling
from pi.conwin.style import BorderGlyphs, BorderStyle, Color, WindowStyle, border_glyphs

# Window nodes
from pi.conwin.window import Window

# Hierarchy store
from pi.conwin.store import InvalidArgumentError, OrphanPolicy, WindowStore

# Draw order and visibility
from pi.conwin.planner import compute_draw_order
from pi.conwin.visibility import find_occluder, is_visible

# Rendering
from pi.conwin.screen import Cell, Renderer, Screen, ScreenRenderer
from pi.conwin.terminal import ProcessTerminal, Terminal
from pi.conwin.text import truncate_to_width, visible_width

# Orchestration
from pi.conwin.config import Config, load_config
from pi.conwin.manager import DrawReport, WindowManager

__all__ = [
    # Geometry
    "Position",
    "Rect",
    "Size",
    # Styling
    "BorderGlyphs",
    "BorderStyle",
    "Color",
    "WindowStyle",
    "border_glyphs",
    # Window
    "Window",
    # Store
    "InvalidArgumentError",
    "OrphanPolicy",
    "WindowStore",
    # Planning / visibility
    "compute_draw_order",
    "find_occluder",
    "is_visible",
    # Rendering
    "Cell",
    "Renderer",
    "Screen",
    "ScreenRenderer",
    "ProcessTerminal",
    "Terminal",
    "truncate_to_width",
    "visible_width",
    # Orchestration
    "Config",
    "DrawReport",
    "WindowManager",
    "load_config",
]
