import pytest

pytest.importorskip("tkinter")

from wheeltimer.ui.wheel import WheelGesture


def test_direction_follows_delta_sign():
    gesture = WheelGesture(throttle_ms=50, min_delta=10)
    assert gesture.feed(30, now_ms=0) == 1
    assert gesture.feed(-30, now_ms=100) == -1


def test_small_deltas_are_ignored():
    gesture = WheelGesture(throttle_ms=50, min_delta=10)
    assert gesture.feed(10, now_ms=0) == 0
    assert gesture.feed(-9, now_ms=100) == 0
    assert gesture.feed(11, now_ms=200) == 1


def test_steps_are_throttled():
    gesture = WheelGesture(throttle_ms=50, min_delta=10)
    assert gesture.feed(120, now_ms=1000) == 1
    assert gesture.feed(120, now_ms=1030) == 0
    assert gesture.feed(120, now_ms=1050) == 0
    assert gesture.feed(120, now_ms=1051) == 1


def test_uses_injected_clock():
    ticks = iter([0.0, 10.0, 100.0])
    gesture = WheelGesture(clock=lambda: next(ticks))
    assert gesture.feed(50) == 1
    assert gesture.feed(50) == 0
    assert gesture.feed(50) == 1
