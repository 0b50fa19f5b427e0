"""
Run the countdown without Tk, printing the clock to a text stream.

The controller is driven by a ``sched.scheduler`` wrapped in the same
``after``/``after_cancel`` interface that a Tk root provides.
"""
from __future__ import annotations

import logging
import sched
import signal
import sys
import threading
import time
from typing import Any, Callable, Optional, TextIO

from wheeltimer.config.settings import Settings
from wheeltimer.core.countdown import CountdownController, CountdownEvent
from wheeltimer.services import sound
from wheeltimer.utils import format_hms

logger = logging.getLogger(__name__)

EXIT_FINISHED = 0
EXIT_NOT_FINISHED = 1
EXIT_ZERO_DURATION = 2
EXIT_INTERRUPTED = 130


class SchedScheduler:
    """Expose ``sched.scheduler`` through Tk's ``after`` API."""

    def __init__(self, scheduler: Optional[sched.scheduler] = None) -> None:
        self._sched = scheduler or sched.scheduler(time.monotonic, time.sleep)

    def after(self, ms: int, func: Callable[[], Any]) -> sched.Event:
        return self._sched.enter(max(0, int(ms)) / 1000.0, 1, func)

    def after_cancel(self, id: sched.Event) -> None:
        try:
            self._sched.cancel(id)
        except ValueError:
            pass

    def empty(self) -> bool:
        return self._sched.empty()

    def run(self) -> None:
        self._sched.run()


class HeadlessCountdown:
    """Console countdown for terminals and service units."""

    def __init__(
        self,
        hours: int,
        minutes: int,
        seconds: int,
        *,
        settings: Optional[Settings] = None,
        stream: Optional[TextIO] = None,
        scheduler: Optional[sched.scheduler] = None,
        beep: Optional[Callable[[], None]] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.stream = stream or sys.stdout
        self.scheduler = SchedScheduler(scheduler)
        self.interrupted = False
        self._beep = beep or sound.play_beep
        self.controller = CountdownController(
            self.scheduler,
            tick_ms=self.settings.timer.tick_ms,
            edit_while_running=self.settings.timer.edit_while_running,
        )
        self.controller.set_clock(hours, minutes, seconds)
        self.controller.add_listener(self._on_event, fire=False)

    # ------------------------------------------------------------------
    def signal_handler(self, signum, frame) -> None:
        logger.info("Received signal %s, cancelling countdown", signum)
        self.interrupted = True
        self.controller.stop()

    def _install_signal_handlers(self) -> dict:
        if threading.current_thread() is not threading.main_thread():
            return {}
        previous = {}
        for signum in (signal.SIGTERM, signal.SIGINT):
            previous[signum] = signal.getsignal(signum)
            signal.signal(signum, self.signal_handler)
        return previous

    # ------------------------------------------------------------------
    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def _on_event(self, event: CountdownEvent) -> None:
        state = event.state
        if state.is_running and {"hours", "minutes", "seconds"} & set(event.changed):
            self._write(format_hms(*state.clock))
        if "status" in event.changed and state.is_finished:
            self._write(self.settings.notifications.message)
            if self.settings.notifications.sound_enabled:
                self._beep()

    # ------------------------------------------------------------------
    def run(self) -> int:
        """Block until the countdown finishes or is interrupted."""

        if self.controller.total_seconds == 0:
            logger.error("Refusing to start a zero-length countdown")
            return EXIT_ZERO_DURATION

        previous = self._install_signal_handlers()
        logger.info("Headless countdown for %s", format_hms(*self.controller.state.clock))
        self._write(format_hms(*self.controller.state.clock))
        try:
            self.controller.start()
            self.scheduler.run()
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            self.interrupted = True
            self.controller.stop()
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)

        if self.interrupted:
            return EXIT_INTERRUPTED
        return EXIT_FINISHED if self.controller.is_finished else EXIT_NOT_FINISHED


__all__ = [
    "EXIT_FINISHED",
    "EXIT_INTERRUPTED",
    "EXIT_NOT_FINISHED",
    "EXIT_ZERO_DURATION",
    "HeadlessCountdown",
    "SchedScheduler",
]
