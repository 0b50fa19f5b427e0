"""Main timer window: three digit wheels, Cancel and Start/Pause/Resume."""
from __future__ import annotations

import logging
import threading
from typing import Optional

import tkinter as tk
from tkinter import ttk

from wheeltimer.config import theme
from wheeltimer.config.settings import Settings
from wheeltimer.core.countdown import CountdownController, CountdownEvent, CountdownState
from wheeltimer.services import sound
from wheeltimer.services.event_bus import CLOCK_CHANGED, EventBus, status_topic
from wheeltimer.ui.toast import Toast
from wheeltimer.ui.wheel import DigitWheel

log = logging.getLogger(__name__)

__all__ = ["TimerApp", "primary_label"]


def primary_label(state: CountdownState) -> str:
    if state.is_paused:
        return "Resume"
    if not state.is_running:
        return "Start"
    return "Pause"


class TimerApp(tk.Tk):
    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        bus: Optional[EventBus] = None,
        initial: Optional[tuple[int, int, int]] = None,
        autostart: bool = False,
    ) -> None:
        super().__init__()
        self.settings = settings or Settings()
        ui = self.settings.ui
        self.title(ui.title.capitalize())
        self.geometry(f"{ui.width}x{ui.height}")
        self.palette = theme.apply_theme(self, ui.theme)

        self.bus = bus or EventBus()
        self.controller = CountdownController(
            self,
            tick_ms=self.settings.timer.tick_ms,
            edit_while_running=self.settings.timer.edit_while_running,
        )
        self._status = self.controller.status
        self._primary_text = tk.StringVar(value="Start")

        self._build_ui()
        self.toast = Toast(self, self.palette)

        self.controller.set_on_finish(self._on_finished)
        self.controller.add_listener(self._on_countdown_event)
        if initial:
            self.controller.set_clock(*initial)
        if autostart:
            self.after_idle(self.controller.start)

        self.protocol("WM_DELETE_WINDOW", self.close)

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        ui = self.settings.ui
        bar = ttk.Frame(self, style="Bar.TFrame", padding=(16, 12))
        bar.pack(fill="x")
        ttk.Label(bar, text=ui.title, style="Bar.TLabel").pack(side="left")

        body = ttk.Frame(self)
        body.pack(fill="both", expand=True)

        wheels = ttk.Frame(body)
        wheels.pack(fill="x", expand=True)
        self.wheels: dict[str, DigitWheel] = {}
        for field, label, setter in (
            ("hours", "hours", self.controller.set_hours),
            ("minutes", "min", self.controller.set_minutes),
            ("seconds", "sec", self.controller.set_seconds),
        ):
            wheel = DigitWheel(
                wheels,
                label,
                on_change=setter,
                palette=self.palette,
                throttle_ms=ui.wheel_throttle_ms,
                min_delta=ui.wheel_min_delta,
            )
            wheel.pack(side="left", expand=True)
            self.wheels[field] = wheel

        buttons = ttk.Frame(body)
        buttons.pack(fill="x", expand=True)
        self.cancel_button = ttk.Button(
            buttons,
            text="Cancel",
            style="Timer.TButton",
            width=10,
            command=self.controller.stop,
        )
        self.cancel_button.pack(side="left", expand=True)
        self.primary_button = ttk.Button(
            buttons,
            textvariable=self._primary_text,
            style="Timer.TButton",
            width=10,
            command=self.toggle,
        )
        self.primary_button.pack(side="left", expand=True)

    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.controller.is_running:
            self.controller.pause()
        else:
            self.controller.start()

    def close(self) -> None:
        self.controller.stop()
        self.destroy()

    def run(self) -> None:
        log.info("Timer window ready")
        self.mainloop()

    # ------------------------------------------------------------------
    def _on_countdown_event(self, event: CountdownEvent) -> None:
        state = event.state
        for field in ("hours", "minutes", "seconds"):
            if field in event.changed:
                self.wheels[field].set_value(getattr(state, field))

        if "status" in event.changed:
            self._refresh_controls(state)
            topic = status_topic(self._status, state.status)
            self._status = state.status
            if topic:
                self.bus.publish(topic, state)
        if {"hours", "minutes", "seconds"} & set(event.changed):
            self.bus.publish(CLOCK_CHANGED, state)

    def _refresh_controls(self, state: CountdownState) -> None:
        self._primary_text.set(primary_label(state))
        self.cancel_button.state(["!disabled"] if state.is_active else ["disabled"])
        editable = not state.is_running or self.settings.timer.edit_while_running
        for wheel in self.wheels.values():
            wheel.set_enabled(editable)

    def _on_finished(self) -> None:
        notifications = self.settings.notifications
        self.toast.show(notifications.message, notifications.toast_ms)
        if notifications.sound_enabled:
            threading.Thread(target=sound.play_beep, name="TimerBeep", daemon=True).start()
