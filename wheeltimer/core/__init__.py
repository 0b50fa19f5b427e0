"""Countdown core shared by the Tk and headless front ends."""

from .countdown import (
    CountdownController,
    CountdownEvent,
    CountdownState,
    CountdownStatus,
    wrap_field,
)

__all__ = [
    "CountdownController",
    "CountdownEvent",
    "CountdownState",
    "CountdownStatus",
    "wrap_field",
]
