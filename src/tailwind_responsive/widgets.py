"""Widget selection on top of the breakpoint resolver.

``select_display_element`` picks one of several prepared widgets for a width.
When nothing applies and no default widget was given, an empty ``QWidget`` is
returned so layouts always receive something they can add.

Example:
    view = select_display_element(
        window.width(),
        QLabel("Mobile Layout"),
        sm=QLabel("Tablet Layout"),
        lg=desktop_splitter,
    )
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtWidgets import QWidget

from .responsive import resolve
from .width_provider import WidthProvider

__all__ = ["select_display_element", "responsive_widget"]


def select_display_element(
    width: float,
    initial: Optional[QWidget] = None,
    sm: Optional[QWidget] = None,
    md: Optional[QWidget] = None,
    lg: Optional[QWidget] = None,
    xl: Optional[QWidget] = None,
    xxl: Optional[QWidget] = None,
) -> QWidget:
    selected = resolve(width, initial, sm=sm, md=md, lg=lg, xl=xl, xxl=xxl)
    if selected is None:
        return QWidget()
    return selected


def responsive_widget(
    provider: WidthProvider,
    child: Optional[QWidget] = None,
    sm: Optional[QWidget] = None,
    md: Optional[QWidget] = None,
    lg: Optional[QWidget] = None,
    xl: Optional[QWidget] = None,
    xxl: Optional[QWidget] = None,
) -> QWidget:
    """Provider-bound form of :func:`select_display_element`.

    ``child`` is the default widget for the smallest screens.
    """
    return select_display_element(provider(), child, sm=sm, md=md, lg=lg, xl=xl, xxl=xxl)
