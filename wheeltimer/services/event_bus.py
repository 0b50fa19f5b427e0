import logging

from wheeltimer.core.countdown import CountdownStatus

log = logging.getLogger(__name__)


class EventBus:
    """Simple publish/subscribe event bus."""

    def __init__(self):
        self._subs = {}

    def subscribe(self, topic, fn):
        self._subs.setdefault(topic, []).append(fn)

    def unsubscribe(self, topic, fn):
        try:
            self._subs.get(topic, []).remove(fn)
        except ValueError:
            pass

    def publish(self, topic, payload=None):
        for fn in list(self._subs.get(topic, [])):
            try:
                fn(payload)
            except Exception:
                log.warning("Subscriber %r failed on %s", fn, topic, exc_info=True)


# Known topics
TIMER_STARTED = "TIMER_STARTED"
TIMER_PAUSED = "TIMER_PAUSED"
TIMER_FINISHED = "TIMER_FINISHED"
TIMER_CANCELLED = "TIMER_CANCELLED"
CLOCK_CHANGED = "CLOCK_CHANGED"


def status_topic(previous, current):
    """Topic announcing the move from ``previous`` to ``current`` status, if any."""
    if previous == current:
        return None
    if current == CountdownStatus.RUNNING:
        return TIMER_STARTED
    if current == CountdownStatus.PAUSED:
        return TIMER_PAUSED
    if current == CountdownStatus.FINISHED:
        return TIMER_FINISHED
    if current == CountdownStatus.IDLE and previous in (CountdownStatus.RUNNING, CountdownStatus.PAUSED):
        return TIMER_CANCELLED
    return None
