"""Tests for BreakpointObserver resize tracking."""

from __future__ import annotations

from PyQt6 import sip
from PyQt6.QtWidgets import QWidget

from tailwind_responsive.breakpoint_observer import BreakpointObserver


def _widget(qtbot, width: int) -> QWidget:
    # Hidden widgets report the new width immediately; resize events are deferred until shown.
    w = QWidget()
    w.resize(width, 100)
    qtbot.addWidget(w)
    return w


def _recording_observer():
    obs = BreakpointObserver()
    events = []
    obs.breakpoint_changed.connect(lambda w, bp, prev: events.append((w, bp, prev)))
    return obs, events


def test_observe_emits_initial_breakpoint(qtbot):
    obs, events = _recording_observer()
    w = _widget(qtbot, 500)
    obs.observe(w)
    assert obs.breakpoint_for(w) == "initial"
    assert events == [(w, "initial", None)]


def test_emits_only_on_tier_change(qtbot):
    obs, events = _recording_observer()
    w = _widget(qtbot, 700)
    obs.observe(w)
    # Same tier (sm) -> no signal
    w.resize(750, 100)
    assert obs.evaluate(w) == "sm"
    # Cross into lg
    w.resize(1100, 100)
    assert obs.evaluate(w) == "lg"
    assert [(prev, bp) for _, bp, prev in events] == [(None, "sm"), ("sm", "lg")]


def test_resize_event_triggers_evaluation(qtbot):
    obs, events = _recording_observer()
    parent = QWidget()
    parent.resize(200, 200)
    qtbot.addWidget(parent)
    w = QWidget(parent)
    w.resize(300, 100)
    parent.show()
    obs.observe(w)
    # Children of a visible window receive the Resize event synchronously
    w.resize(1600, 100)
    qtbot.waitUntil(lambda: obs.breakpoint_for(w) == "xxl", timeout=2000)
    assert events[-1][1:] == ("xxl", "initial")


def test_observe_twice_is_noop(qtbot):
    obs, events = _recording_observer()
    w = _widget(qtbot, 900)
    obs.observe(w)
    obs.observe(w)
    assert len(events) == 1
    assert obs.observed_count() == 1


def test_unobserve_forgets_widget(qtbot):
    obs, _ = _recording_observer()
    w = _widget(qtbot, 900)
    obs.observe(w)
    obs.unobserve(w)
    assert obs.breakpoint_for(w) is None
    assert obs.evaluate(w) is None
    assert obs.observed_count() == 0


def test_destroyed_widget_is_dropped_and_replacement_observed(qtbot):
    obs, events = _recording_observer()
    for _ in range(3):
        w = QWidget()
        w.resize(1600, 100)
        obs.observe(w)
        assert obs.observed_count() == 1
        sip.delete(w)
        assert obs.observed_count() == 0
    # Each fresh widget was observed from scratch, even if its id was reused
    assert [(bp, prev) for _, bp, prev in events] == [("xxl", None)] * 3


def test_fresh_widget_reusing_dead_slot_gets_tracked(qtbot):
    obs, events = _recording_observer()
    old = QWidget()
    old.resize(1600, 100)
    obs.observe(old)
    sip.delete(old)
    new = _widget(qtbot, 1600)
    obs.observe(new)
    assert obs.breakpoint_for(new) == "xxl"
    assert len(events) == 2
    assert events[-1][0] is new
