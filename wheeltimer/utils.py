"""Small helpers for turning durations into text and back."""
from __future__ import annotations

from .core.countdown import HOURS_MAX, MINUTES_MAX, SECONDS_MAX

MAX_TOTAL_SECONDS = HOURS_MAX * 3600 + MINUTES_MAX * 60 + SECONDS_MAX


def format_hms(hours: int, minutes: int, seconds: int) -> str:
    return f"{int(hours):02d}:{int(minutes):02d}:{int(seconds):02d}"


def split_seconds(total: int) -> tuple[int, int, int]:
    """Split ``total`` seconds into an h/m/s triple capped at 23:59:59."""

    total = max(0, min(int(total), MAX_TOTAL_SECONDS))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return hours, minutes, seconds


def parse_duration(text: str) -> tuple[int, int, int]:
    """Parse ``HH:MM:SS``, ``MM:SS`` or a plain number of seconds.

    Colon separated parts must already be within the wheel ranges; a plain
    number is normalised with :func:`split_seconds`.
    """

    cleaned = str(text or "").strip()
    if not cleaned:
        raise ValueError("empty duration")
    parts = cleaned.split(":")
    if len(parts) > 3 or not all(part.strip().isdigit() for part in parts):
        raise ValueError(f"invalid duration: {text!r}")
    numbers = [int(part) for part in parts]
    if len(numbers) == 1:
        return split_seconds(numbers[0])

    while len(numbers) < 3:
        numbers.insert(0, 0)
    hours, minutes, seconds = numbers
    if hours > HOURS_MAX or minutes > MINUTES_MAX or seconds > SECONDS_MAX:
        raise ValueError(f"duration out of range: {text!r} (max 23:59:59)")
    return hours, minutes, seconds


__all__ = ["MAX_TOTAL_SECONDS", "format_hms", "parse_duration", "split_seconds"]
