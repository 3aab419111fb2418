"""Width providers and provider-bound breakpoint helpers.

A width provider is a zero-argument callable returning the current width in
logical pixels. Passing a provider instead of a raw number keeps call sites
free of any particular measurement source:

    provider = widget_width(main_window)
    columns = responsive_value(provider, 1, sm=2, lg=4)
    print(current_breakpoint(provider))

``screen_width`` queries the primary screen through ``QGuiApplication`` and
falls back to ``settings.FALLBACK_WIDTH`` when running headless.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from PyQt6.QtGui import QGuiApplication
from PyQt6.QtWidgets import QWidget

from . import settings
from .responsive import classify, resolve

__all__ = [
    "WidthProvider",
    "fixed_width",
    "widget_width",
    "screen_width",
    "current_breakpoint",
    "responsive_value",
]

T = TypeVar("T")

WidthProvider = Callable[[], float]

_logger = logging.getLogger(__name__)


def fixed_width(width: float) -> WidthProvider:
    """Provider always reporting ``width`` (tests, server-side rendering)."""

    def _provide() -> float:
        return width

    return _provide


def widget_width(widget: QWidget) -> WidthProvider:
    """Provider reporting the live width of ``widget``."""

    def _provide() -> float:
        return float(widget.width())

    return _provide


def screen_width() -> float:
    """Width of the primary screen's available geometry."""
    if QGuiApplication.instance() is None:
        _logger.debug("No QGuiApplication; using fallback width %s", settings.FALLBACK_WIDTH)
        return settings.FALLBACK_WIDTH
    screen = QGuiApplication.primaryScreen()
    if screen is None:  # pragma: no cover - platform without screens
        _logger.debug("No primary screen; using fallback width %s", settings.FALLBACK_WIDTH)
        return settings.FALLBACK_WIDTH
    return float(screen.availableGeometry().width())


def current_breakpoint(provider: WidthProvider = screen_width) -> str:
    return classify(provider())


def responsive_value(
    provider: WidthProvider,
    initial: T,
    sm: Optional[T] = None,
    md: Optional[T] = None,
    lg: Optional[T] = None,
    xl: Optional[T] = None,
    xxl: Optional[T] = None,
) -> T:
    """``resolve`` against the width reported by ``provider``."""
    return resolve(provider(), initial, sm=sm, md=md, lg=lg, xl=xl, xxl=xxl)
