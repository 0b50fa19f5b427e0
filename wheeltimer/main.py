"""Command line entry point for the wheeltimer application."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from wheeltimer import __version__
from wheeltimer.config.settings import THEMES, Settings
from wheeltimer.services.logging import setup_logging
from wheeltimer.utils import parse_duration

log = logging.getLogger(__name__)


def _duration(text: str) -> tuple[int, int, int]:
    try:
        return parse_duration(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wheeltimer",
        description="Countdown timer with hour, minute and second wheels.",
    )
    parser.add_argument(
        "-d",
        "--duration",
        type=_duration,
        help="initial duration as HH:MM:SS, MM:SS or seconds",
    )
    parser.add_argument("--start", action="store_true", help="start the countdown immediately")
    parser.add_argument("--headless", action="store_true", help="run in the terminal without a window")
    parser.add_argument("--theme", choices=THEMES, help="override the configured theme")
    parser.add_argument("--config", type=Path, help="path to config.yaml")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level))
    settings = Settings.load(args.config)
    if args.theme:
        settings.ui.theme = args.theme

    if args.headless:
        if args.duration is None:
            parser.error("--headless requires --duration")
        from wheeltimer.services.headless_main import HeadlessCountdown

        return HeadlessCountdown(*args.duration, settings=settings).run()

    from wheeltimer.ui.app import TimerApp

    app = TimerApp(settings, initial=args.duration, autostart=args.start)
    app.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
