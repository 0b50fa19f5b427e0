"""Tk smoke tests for the timer window."""
from __future__ import annotations

import os
import time

import pytest

tkinter = pytest.importorskip("tkinter")

from wheeltimer.config.settings import Settings
from wheeltimer.core.countdown import CountdownState, CountdownStatus
from wheeltimer.services.event_bus import TIMER_FINISHED, TIMER_STARTED, EventBus
from wheeltimer.ui.app import TimerApp, primary_label


def test_primary_label_follows_status():
    assert primary_label(CountdownState()) == "Start"
    assert primary_label(CountdownState(status=CountdownStatus.RUNNING)) == "Pause"
    assert primary_label(CountdownState(status=CountdownStatus.PAUSED)) == "Resume"
    assert primary_label(CountdownState(status=CountdownStatus.FINISHED)) == "Start"


@pytest.fixture
def app():
    if not os.environ.get("DISPLAY"):
        pytest.skip("requires X server")
    settings = Settings()
    settings.timer.tick_ms = 20
    settings.notifications.sound_enabled = False
    try:
        window = TimerApp(settings, bus=EventBus())
    except tkinter.TclError as exc:  # pragma: no cover - depends on CI environment
        pytest.skip(f"Tk not available: {exc}")
    window.withdraw()
    yield window
    try:
        window.destroy()
    except tkinter.TclError:
        pass


def _pump(window, until, timeout=3.0):
    deadline = time.time() + timeout
    while time.time() < deadline and not until():
        window.update()
        time.sleep(0.01)


def test_wheels_edit_controller_with_wrap(app):
    app.wheels["hours"].step(-1)
    app.wheels["seconds"].step(1)
    assert app.controller.state.clock == (23, 0, 1)
    assert app.wheels["hours"].value == 23


def test_toggle_runs_pauses_and_resumes(app):
    started = []
    app.bus.subscribe(TIMER_STARTED, started.append)
    app.controller.set_clock(0, 1, 0)

    app.toggle()
    assert app.controller.is_running
    assert app._primary_text.get() == "Pause"
    assert not app.wheels["minutes"].enabled
    assert app.cancel_button.instate(["!disabled"])

    app.toggle()
    assert app.controller.is_paused
    assert app._primary_text.get() == "Resume"
    assert app.wheels["minutes"].enabled
    assert len(started) == 1

    app.cancel_button.invoke()
    assert app.controller.status == CountdownStatus.IDLE
    assert app.cancel_button.instate(["disabled"])
    assert app._primary_text.get() == "Start"


def test_finish_shows_toast(app):
    finished = []
    app.bus.subscribe(TIMER_FINISHED, finished.append)
    app.controller.set_clock(0, 0, 2)
    app.toggle()

    _pump(app, lambda: app.controller.is_finished)

    assert app.controller.is_finished
    assert len(finished) == 1
    assert app.toast.visible
    assert app.toast.text == "Time's up!"
    assert app.wheels["seconds"].value == 0
