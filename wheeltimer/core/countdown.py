"""Countdown state machine driven by an ``after``-style scheduler."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Protocol

__all__ = [
    "CountdownController",
    "CountdownEvent",
    "CountdownState",
    "CountdownStatus",
    "HOURS_MAX",
    "MINUTES_MAX",
    "SECONDS_MAX",
    "Scheduler",
    "TICK_MS",
    "wrap_field",
]

log = logging.getLogger(__name__)

HOURS_MAX = 23
MINUTES_MAX = 59
SECONDS_MAX = 59
TICK_MS = 1000

FIELDS = ("hours", "minutes", "seconds", "status")


class Scheduler(Protocol):
    """Anything exposing Tk's ``after``/``after_cancel`` pair."""

    def after(self, ms: int, func: Callable[[], Any]) -> Any: ...

    def after_cancel(self, id: Any) -> None: ...


class CountdownStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


@dataclass(frozen=True)
class CountdownState:
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    status: CountdownStatus = CountdownStatus.IDLE

    @property
    def clock(self) -> tuple[int, int, int]:
        return (self.hours, self.minutes, self.seconds)

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    @property
    def is_running(self) -> bool:
        return self.status == CountdownStatus.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.status == CountdownStatus.PAUSED

    @property
    def is_finished(self) -> bool:
        return self.status == CountdownStatus.FINISHED

    @property
    def is_active(self) -> bool:
        """True while a countdown is in progress, paused or not."""

        return self.status in (CountdownStatus.RUNNING, CountdownStatus.PAUSED)


@dataclass(frozen=True, slots=True)
class CountdownEvent:
    state: CountdownState
    changed: tuple[str, ...]


def wrap_field(value: int, maximum: int) -> int:
    """Normalise a wheel edit: past ``maximum`` goes to 0, below 0 to ``maximum``."""

    value = int(value)
    if value > maximum:
        return 0
    if value < 0:
        return maximum
    return value


class CountdownController:
    """Hours/minutes/seconds countdown with start, pause and cancel.

    The controller owns a single tick handle obtained from ``root.after``.
    Every transition away from ``RUNNING`` cancels it before returning, so a
    stale tick never decrements the clock.
    """

    def __init__(
        self,
        root: Scheduler,
        *,
        tick_ms: int = TICK_MS,
        on_finish: Optional[Callable[[], None]] = None,
        edit_while_running: bool = False,
    ) -> None:
        self._root = root
        self._tick_ms = max(1, int(tick_ms))
        self._on_finish = on_finish
        self._edit_while_running = bool(edit_while_running)
        self._listeners: list[Callable[[CountdownEvent], None]] = []
        self._state = CountdownState()
        self._tick_job: Any = None

    # ------------------------------------------------------------------
    def set_on_finish(self, callback: Optional[Callable[[], None]]) -> None:
        self._on_finish = callback

    def add_listener(self, callback: Callable[[CountdownEvent], None], *, fire: bool = True) -> None:
        if callback in self._listeners:
            return
        self._listeners.append(callback)
        if fire:
            self._deliver(callback, CountdownEvent(self._state, FIELDS))

    def remove_listener(self, callback: Callable[[CountdownEvent], None]) -> None:
        try:
            self._listeners.remove(callback)
        except ValueError:
            pass

    # ------------------------------------------------------------------
    @property
    def state(self) -> CountdownState:
        return self._state

    @property
    def hours(self) -> int:
        return self._state.hours

    @property
    def minutes(self) -> int:
        return self._state.minutes

    @property
    def seconds(self) -> int:
        return self._state.seconds

    @property
    def status(self) -> CountdownStatus:
        return self._state.status

    @property
    def total_seconds(self) -> int:
        return self._state.total_seconds

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def is_paused(self) -> bool:
        return self._state.is_paused

    @property
    def is_finished(self) -> bool:
        return self._state.is_finished

    @property
    def is_active(self) -> bool:
        return self._state.is_active

    # ------------------------------------------------------------------
    def set_hours(self, value: int) -> None:
        self._edit("hours", wrap_field(value, HOURS_MAX))

    def set_minutes(self, value: int) -> None:
        self._edit("minutes", wrap_field(value, MINUTES_MAX))

    def set_seconds(self, value: int) -> None:
        self._edit("seconds", wrap_field(value, SECONDS_MAX))

    def set_clock(self, hours: int, minutes: int, seconds: int) -> None:
        self.set_hours(hours)
        self.set_minutes(minutes)
        self.set_seconds(seconds)

    def _edit(self, field: str, value: int) -> None:
        if self._state.is_running and not self._edit_while_running:
            log.debug("Ignoring %s edit while running", field)
            return
        self._update(**{field: value})

    # ------------------------------------------------------------------
    def start(self) -> None:
        if self._state.is_running:
            return
        if self._state.total_seconds == 0:
            log.debug("Ignoring start with zero duration")
            return
        self._update(status=CountdownStatus.RUNNING)
        if not self._state.is_running:
            return
        log.info("Countdown started at %02d:%02d:%02d", *self._state.clock)
        self._schedule_tick()

    def pause(self) -> None:
        if not self._state.is_running:
            return
        self._cancel_tick()
        self._update(status=CountdownStatus.PAUSED)
        log.info("Countdown paused at %02d:%02d:%02d", *self._state.clock)

    def stop(self) -> None:
        self._cancel_tick()
        previous = self._state.status
        self._update(hours=0, minutes=0, seconds=0, status=CountdownStatus.IDLE)
        if previous != CountdownStatus.IDLE:
            log.info("Countdown cancelled (was %s)", previous.value)

    # ------------------------------------------------------------------
    def _schedule_tick(self) -> None:
        self._cancel_tick()
        self._tick_job = self._root.after(self._tick_ms, self._tick)

    def _cancel_tick(self) -> None:
        if self._tick_job is None:
            return
        job, self._tick_job = self._tick_job, None
        try:
            self._root.after_cancel(job)
        except Exception:
            log.debug("Tick handle %r already gone", job, exc_info=True)

    def _tick(self) -> None:
        self._tick_job = None
        if not self._state.is_running:
            return
        hours, minutes, seconds = self._state.clock
        if seconds > 0:
            seconds -= 1
        elif minutes > 0:
            minutes, seconds = minutes - 1, SECONDS_MAX
        elif hours > 0:
            hours, minutes, seconds = hours - 1, MINUTES_MAX, SECONDS_MAX
        self._update(hours=hours, minutes=minutes, seconds=seconds)
        log.debug("tick %02d:%02d:%02d", hours, minutes, seconds)
        # a listener may have paused or stopped us
        if not self._state.is_running:
            return
        if self._state.total_seconds == 0:
            self._finish()
            return
        self._schedule_tick()

    def _finish(self) -> None:
        self._cancel_tick()
        self._update(hours=0, minutes=0, seconds=0, status=CountdownStatus.FINISHED)
        log.info("Countdown finished")
        if self._on_finish:
            try:
                self._on_finish()
            except Exception:
                log.exception("on_finish callback failed")

    def _update(self, **fields: Any) -> None:
        current = self._state
        changed = tuple(name for name in FIELDS if name in fields and fields[name] != getattr(current, name))
        if not changed:
            return
        self._state = CountdownState(
            hours=fields.get("hours", current.hours),
            minutes=fields.get("minutes", current.minutes),
            seconds=fields.get("seconds", current.seconds),
            status=fields.get("status", current.status),
        )
        self._notify(CountdownEvent(self._state, changed))

    def _notify(self, event: CountdownEvent) -> None:
        for callback in list(self._listeners):
            self._deliver(callback, event)

    @staticmethod
    def _deliver(callback: Callable[[CountdownEvent], None], event: CountdownEvent) -> None:
        try:
            callback(event)
        except Exception:
            log.warning("Countdown listener %r failed", callback, exc_info=True)
