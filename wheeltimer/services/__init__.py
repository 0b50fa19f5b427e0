"""Support services: logging, event bus, sound and the headless runner."""

__all__ = ["event_bus", "headless_main", "logging", "sound"]
