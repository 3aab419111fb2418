"""Tests for width providers and provider-bound lookups."""

from PyQt6.QtWidgets import QWidget

from tailwind_responsive import settings, width_provider
from tailwind_responsive.width_provider import (
    current_breakpoint,
    fixed_width,
    responsive_value,
    screen_width,
    widget_width,
)


def test_fixed_width_provider():
    provider = fixed_width(1100)
    assert provider() == 1100
    assert current_breakpoint(provider) == "lg"


def test_responsive_value_reads_provider_each_call():
    widths = iter([300, 700, 1300])

    def provider():
        return next(widths)

    assert [responsive_value(provider, 1, sm=2, lg=4) for _ in range(3)] == [1, 2, 4]


def test_widget_width_tracks_resizes(qtbot):
    w = QWidget()
    qtbot.addWidget(w)
    w.resize(500, 100)
    provider = widget_width(w)
    assert provider() == 500.0
    assert current_breakpoint(provider) == "initial"
    w.resize(900, 100)
    assert current_breakpoint(provider) == "md"
    assert responsive_value(provider, "stack", md="row") == "row"


def test_screen_width_with_application(qapp):
    width = screen_width()
    assert isinstance(width, float)
    assert width >= 0


def test_screen_width_fallback_without_application(monkeypatch):
    class _NoApp:
        @staticmethod
        def instance():
            return None

    monkeypatch.setattr(width_provider, "QGuiApplication", _NoApp)
    monkeypatch.setattr(settings, "FALLBACK_WIDTH", 1280.0)
    assert screen_width() == 1280.0
    assert current_breakpoint() == "xl"
