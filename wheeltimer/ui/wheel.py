"""Scrollable two-digit wheel used to set hours, minutes and seconds."""
from __future__ import annotations

import time
from typing import Callable, Optional

import tkinter as tk

from wheeltimer.config import theme

__all__ = ["DigitWheel", "WheelGesture"]

WHEEL_NOTCH = 120


class WheelGesture:
    """Turn raw scroll/drag deltas into +1/-1 steps.

    A step is only produced when more than ``throttle_ms`` passed since the
    previous step and the delta magnitude exceeds ``min_delta``.
    """

    def __init__(
        self,
        *,
        throttle_ms: int = 50,
        min_delta: float = 10,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.throttle_ms = throttle_ms
        self.min_delta = min_delta
        self._clock = clock or (lambda: time.monotonic() * 1000.0)
        self._last_step: Optional[float] = None

    def feed(self, delta: float, now_ms: Optional[float] = None) -> int:
        now = self._clock() if now_ms is None else now_ms
        if self._last_step is not None and now - self._last_step <= self.throttle_ms:
            return 0
        if abs(delta) <= self.min_delta:
            return 0
        self._last_step = now
        return 1 if delta > 0 else -1


class DigitWheel(tk.Frame):
    """Shows ``NN label`` and reports ``value ± 1`` through ``on_change``.

    Mouse wheel up, dragging down and the Up key increase the value; the
    opposite gestures decrease it. Range normalisation is left to the
    receiver of ``on_change``.
    """

    def __init__(
        self,
        parent: tk.Misc,
        label: str,
        *,
        on_change: Callable[[int], None],
        palette: dict[str, str],
        throttle_ms: int = 50,
        min_delta: int = 10,
    ) -> None:
        super().__init__(parent, bg=palette["COL_BG"], width=120, height=150, takefocus=1)
        self._on_change = on_change
        self._palette = palette
        self._value = 0
        self._enabled = True
        self._drag_y: Optional[int] = None
        self.gesture = WheelGesture(throttle_ms=throttle_ms, min_delta=min_delta)

        self._text = tk.StringVar(value="00")
        self._digits = tk.Label(
            self,
            textvariable=self._text,
            font=theme.FONT_DIGITS,
            bg=palette["COL_BG"],
            fg=palette["COL_TEXT"],
        )
        self._digits.pack(side="left", padx=(8, 4), pady=40)
        self._caption = tk.Label(
            self,
            text=label,
            font=theme.FONT_LABEL,
            bg=palette["COL_BG"],
            fg=palette["COL_MUTED"],
        )
        self._caption.pack(side="left", padx=(0, 8))

        for widget in (self, self._digits, self._caption):
            widget.bind("<MouseWheel>", self._on_mousewheel, add=True)
            widget.bind("<Button-4>", self._on_mousewheel, add=True)
            widget.bind("<Button-5>", self._on_mousewheel, add=True)
            widget.bind("<ButtonPress-1>", self._on_press, add=True)
            widget.bind("<B1-Motion>", self._on_drag, add=True)
            widget.bind("<ButtonRelease-1>", self._on_release, add=True)
        self.bind("<Up>", lambda _e: self.step(1), add=True)
        self.bind("<Down>", lambda _e: self.step(-1), add=True)

    # ------------------------------------------------------------------
    @property
    def value(self) -> int:
        return self._value

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_value(self, value: int) -> None:
        self._value = int(value)
        self._text.set(f"{self._value:02d}")

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)
        colour = self._palette["COL_TEXT"] if self._enabled else self._palette["COL_DISABLED"]
        self._digits.configure(fg=colour)
        self._drag_y = None

    def step(self, direction: int) -> None:
        if not self._enabled or not direction:
            return
        self._on_change(self._value + (1 if direction > 0 else -1))

    # ------------------------------------------------------------------
    def _on_mousewheel(self, event: tk.Event) -> None:
        delta = 0
        if event.num == 4:
            delta = WHEEL_NOTCH
        elif event.num == 5:
            delta = -WHEEL_NOTCH
        elif event.delta:
            delta = int(event.delta)
        if delta:
            self.step(self.gesture.feed(delta))

    def _on_press(self, event: tk.Event) -> None:
        self._drag_y = event.y_root
        try:
            self.focus_set()
        except tk.TclError:
            pass

    def _on_drag(self, event: tk.Event) -> None:
        if self._drag_y is None or not self._enabled:
            return
        direction = self.gesture.feed(event.y_root - self._drag_y)
        if direction:
            self._drag_y = event.y_root
            self.step(direction)

    def _on_release(self, _event: tk.Event) -> None:
        self._drag_y = None
