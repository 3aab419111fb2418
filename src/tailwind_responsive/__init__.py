"""Tailwind-style responsive breakpoints.

The resolver (``classify`` / ``resolve``) is pure Python; the widget and
observer helpers build on PyQt6.
"""

from .responsive import (  # noqa: F401
    Breakpoint,
    BREAKPOINTS,
    INITIAL,
    list_breakpoints,
    get_breakpoint,
    breakpoint_index,
    classify,
    classify_width,
    resolve,
    resolve_values,
)
from .width_provider import (  # noqa: F401
    WidthProvider,
    fixed_width,
    widget_width,
    screen_width,
    current_breakpoint,
    responsive_value,
)
from .widgets import select_display_element, responsive_widget  # noqa: F401
from .breakpoint_observer import BreakpointObserver  # noqa: F401

__all__ = [
    "Breakpoint",
    "BREAKPOINTS",
    "INITIAL",
    "list_breakpoints",
    "get_breakpoint",
    "breakpoint_index",
    "classify",
    "classify_width",
    "resolve",
    "resolve_values",
    "WidthProvider",
    "fixed_width",
    "widget_width",
    "screen_width",
    "current_breakpoint",
    "responsive_value",
    "select_display_element",
    "responsive_widget",
    "BreakpointObserver",
]
