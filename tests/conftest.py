import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeRoot:
    """Deterministic stand-in for ``tk.Misc.after``/``after_cancel``."""

    def __init__(self):
        self.now = 0
        self._seq = 0
        self._jobs = {}
        self.cancelled = []

    def after(self, ms, func):
        self._seq += 1
        job = f"after#{self._seq}"
        self._jobs[job] = (self.now + int(ms), self._seq, func)
        return job

    def after_cancel(self, job):
        self.cancelled.append(job)
        self._jobs.pop(job, None)

    @property
    def pending(self):
        return len(self._jobs)

    def job_callbacks(self):
        return [func for _due, _seq, func in self._jobs.values()]

    def advance(self, ms):
        target = self.now + int(ms)
        while True:
            due = sorted(
                (when, seq, job) for job, (when, seq, _func) in self._jobs.items() if when <= target
            )
            if not due:
                break
            when, _seq, job = due[0]
            _when, _seq, func = self._jobs.pop(job)
            self.now = when
            func()
        self.now = target


@pytest.fixture
def fake_root():
    return FakeRoot()


@pytest.fixture(autouse=True)
def _isolated_config_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("WHEELTIMER_CONFIG_DIR", str(tmp_path / "wheeltimer-config"))
