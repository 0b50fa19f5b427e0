"""Legacy entry point for running the timer from a source checkout."""

import sys

from wheeltimer.main import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
