"""YAML backed configuration for the wheeltimer application."""
from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

log = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"
BACKUP_SUFFIX = ".bak"
THEMES = ("dark", "light")


class ConfigError(RuntimeError):
    """Raised when the configuration cannot be written to disk."""


def config_dir() -> Path:
    return Path(os.environ.get("WHEELTIMER_CONFIG_DIR", Path.home() / ".wheeltimer"))


def default_config_path() -> Path:
    return config_dir() / CONFIG_FILENAME


def _coerce_int(value: Any, default: int, minimum: int) -> int:
    try:
        result = int(value)
    except (TypeError, ValueError):
        return default
    return result if result >= minimum else default


def _coerce_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    if isinstance(value, int):
        return bool(value)
    return default


@dataclass
class TimerSettings:
    """Countdown behaviour."""

    tick_ms: int = 1000
    edit_while_running: bool = False

    def __post_init__(self) -> None:
        self.tick_ms = _coerce_int(self.tick_ms, 1000, 1)
        self.edit_while_running = _coerce_bool(self.edit_while_running, False)


@dataclass
class NotificationSettings:
    """What happens when the countdown reaches zero."""

    message: str = "Time's up!"
    toast_ms: int = 2000
    sound_enabled: bool = True

    def __post_init__(self) -> None:
        self.message = str(self.message or "").strip() or "Time's up!"
        self.toast_ms = _coerce_int(self.toast_ms, 2000, 100)
        self.sound_enabled = _coerce_bool(self.sound_enabled, True)


@dataclass
class UISettings:
    theme: str = "dark"
    title: str = "TIMER"
    width: int = 360
    height: int = 640
    wheel_throttle_ms: int = 50
    wheel_min_delta: int = 10

    def __post_init__(self) -> None:
        theme = str(self.theme or "").strip().lower()
        self.theme = theme if theme in THEMES else "dark"
        self.title = str(self.title or "").strip() or "TIMER"
        self.width = _coerce_int(self.width, 360, 200)
        self.height = _coerce_int(self.height, 640, 200)
        self.wheel_throttle_ms = _coerce_int(self.wheel_throttle_ms, 50, 0)
        self.wheel_min_delta = _coerce_int(self.wheel_min_delta, 10, 0)


@dataclass
class Settings:
    """Top level application settings."""

    timer: TimerSettings = field(default_factory=TimerSettings)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    ui: UISettings = field(default_factory=UISettings)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Settings":
        def load_section(section: type, data: Any) -> Any:
            if not isinstance(data, dict):
                data = {}
            names = {f.name for f in fields(section)}
            return section(**{k: v for k, v in data.items() if k in names})

        payload = payload if isinstance(payload, dict) else {}
        return cls(
            timer=load_section(TimerSettings, payload.get("timer")),
            notifications=load_section(NotificationSettings, payload.get("notifications")),
            ui=load_section(UISettings, payload.get("ui")),
        )

    # ------------------------------------------------------------------
    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Load settings from ``path``, regenerating defaults when unusable."""

        path = Path(path) if path is not None else default_config_path()
        needs_resave = False
        try:
            raw = path.read_text(encoding="utf-8")
            if not raw.strip():
                raise ValueError("empty configuration file")
            payload = yaml.safe_load(raw)
            if not isinstance(payload, dict):
                raise ValueError("configuration must be a mapping")
            log.info("Loaded settings from %s", path)
        except FileNotFoundError:
            log.warning("Settings file %s missing; writing defaults", path)
            payload = {}
            needs_resave = True
        except (yaml.YAMLError, ValueError) as exc:
            log.warning("Settings file %s invalid (%s); regenerating defaults", path, exc)
            _backup_corrupt_file(path)
            payload = {}
            needs_resave = True

        settings = cls.from_dict(payload)
        if needs_resave or settings.to_dict() != payload:
            try:
                settings.save(path)
            except ConfigError:
                log.exception("Could not persist regenerated configuration")
        return settings

    def save(self, path: Optional[Path] = None) -> None:
        """Persist the settings atomically."""

        path = Path(path) if path is not None else default_config_path()
        _write_yaml(path, self.to_dict())
        log.info("Settings saved to %s", path)


# ----------------------------------------------------------------------
def _write_yaml(path: Path, payload: Dict[str, Any]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(payload, handle, sort_keys=False, allow_unicode=True)
        tmp_path.replace(path)
    except OSError as exc:
        raise ConfigError(f"Could not write {path}: {exc}") from exc


def _backup_corrupt_file(path: Path) -> None:
    backup = path.with_name(path.name + BACKUP_SUFFIX)
    try:
        if path.exists():
            backup.write_bytes(path.read_bytes())
            path.unlink()
    except OSError:  # pragma: no cover - best effort
        log.debug("Could not back up corrupt settings %s", path, exc_info=True)


__all__ = [
    "ConfigError",
    "NotificationSettings",
    "Settings",
    "THEMES",
    "TimerSettings",
    "UISettings",
    "config_dir",
    "default_config_path",
]
