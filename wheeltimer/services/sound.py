"""Finish chime: an in-memory sine tone piped to the first available player."""
from __future__ import annotations

import io
import logging
import math
import subprocess
import sys
import wave
from array import array
from shutil import which
from typing import Optional

log = logging.getLogger(__name__)

SAMPLE_RATE = 22050

# each command reads a WAV stream from stdin
PLAYERS: tuple[tuple[str, ...], ...] = (
    ("aplay", "-q", "-"),
    ("paplay",),
    ("play", "-q", "-t", "wav", "-"),
)


def tone_wav(frequency: int = 880, duration_ms: int = 320, volume: float = 0.6) -> bytes:
    """Mono 16-bit WAV bytes for a sine tone."""

    frames = int(SAMPLE_RATE * max(1, int(duration_ms)) / 1000)
    peak = int(32767 * max(0.0, min(1.0, volume)))
    step = 2.0 * math.pi * frequency / SAMPLE_RATE
    samples = array("h", (int(peak * math.sin(step * n)) for n in range(frames)))

    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav_file:
        wav_file.setnchannels(1)
        wav_file.setsampwidth(2)
        wav_file.setframerate(SAMPLE_RATE)
        wav_file.writeframes(samples.tobytes())
    return buffer.getvalue()


def find_player() -> Optional[list[str]]:
    for command in PLAYERS:
        path = which(command[0])
        if path:
            return [path, *command[1:]]
    return None


def play_beep(frequency: int = 880, duration_ms: int = 320) -> bool:
    """Sound the chime; returns False when only the terminal bell was rung."""

    command = find_player()
    if command:
        try:
            subprocess.run(command, input=tone_wav(frequency, duration_ms), check=True, timeout=5)
            return True
        except (OSError, subprocess.SubprocessError):
            log.debug("Beep through %s failed", command[0], exc_info=True)

    sys.stdout.write("\a")
    sys.stdout.flush()
    return False


__all__ = ["PLAYERS", "find_player", "play_beep", "tone_wav"]
