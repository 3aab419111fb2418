"""Breakpoint observer for Qt widgets.

Watches registered widgets for resize events, classifies their width and emits
``breakpoint_changed(widget, breakpoint, previous)`` whenever a widget crosses
into a different tier. Resizes within the same tier are suppressed.
``previous`` is None for the first evaluation right after ``observe``.

Usage:
    observer = BreakpointObserver()
    observer.breakpoint_changed.connect(lambda w, bp, prev: relayout(w, bp))
    observer.observe(main_window)

Tracking state is dropped when a watched widget is destroyed, so a new widget
that happens to reuse a dead widget's ``id`` starts fresh.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Dict, Optional

from PyQt6 import sip
from PyQt6.QtCore import QEvent, QObject, pyqtSignal
from PyQt6.QtWidgets import QWidget

from .responsive import classify

__all__ = ["BreakpointObserver"]

_logger = logging.getLogger(__name__)


class _ResizeFilter(QObject):
    def __init__(self, parent: QWidget, observer: "BreakpointObserver"):
        super().__init__(parent)
        self._observer = observer
        self.breakpoint: Optional[str] = None

    def eventFilter(self, watched, event):  # type: ignore[override]
        if event.type() == QEvent.Type.Resize:
            self._observer.evaluate(watched)
        return False


class BreakpointObserver(QObject):
    """Tracks the current breakpoint of each observed widget."""

    breakpoint_changed = pyqtSignal(QWidget, str, object)  # (widget, breakpoint, previous)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._filters: Dict[int, _ResizeFilter] = {}

    def _filter_for(self, widget: QWidget) -> Optional[_ResizeFilter]:
        wid = id(widget)
        filt = self._filters.get(wid)
        if filt is not None and sip.isdeleted(filt):
            # Owner died without a destroyed notification reaching us.
            del self._filters[wid]
            return None
        return filt

    def _forget(self, wid: int, *_args) -> None:
        self._filters.pop(wid, None)

    def observe(self, widget: QWidget) -> None:
        if self._filter_for(widget) is not None:
            return
        wid = id(widget)
        filt = _ResizeFilter(widget, self)
        widget.installEventFilter(filt)
        widget.destroyed.connect(partial(self._forget, wid))
        self._filters[wid] = filt
        self.evaluate(widget)

    def unobserve(self, widget: QWidget) -> None:
        filt = self._filter_for(widget)
        if filt is None:
            return
        del self._filters[id(widget)]
        widget.removeEventFilter(filt)
        filt.deleteLater()

    def observed_count(self) -> int:
        for wid in [w for w, f in self._filters.items() if sip.isdeleted(f)]:
            del self._filters[wid]
        return len(self._filters)

    def breakpoint_for(self, widget: QWidget) -> Optional[str]:
        filt = self._filter_for(widget)
        return filt.breakpoint if filt is not None else None

    def evaluate(self, widget: QWidget) -> Optional[str]:
        """Classify ``widget`` now; emit if its tier changed.

        Returns the widget's breakpoint, or None if the widget is not observed.
        """
        filt = self._filter_for(widget)
        if filt is None:
            return None
        name = classify(float(widget.width()))
        previous = filt.breakpoint
        if previous == name:
            return name
        filt.breakpoint = name
        _logger.debug("Breakpoint %s -> %s at width %d", previous, name, widget.width())
        self.breakpoint_changed.emit(widget, name, previous)
        return name
