"""Fixed-period timers that gate tick handlers."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable


class IntervalTimer:
    """Repeating timer advanced by explicit time deltas.

    ``tick`` returns True when at least one period finished during that
    delta. Several finished periods still count as one run; only the
    remainder of the last period is carried over.
    """

    def __init__(self, period: float):
        self.period = max(0.0, float(period))
        self.elapsed = 0.0

    def tick(self, delta: float) -> bool:
        if self.period <= 0:
            return True
        self.elapsed += max(0.0, delta)
        if self.elapsed < self.period:
            return False
        self.elapsed %= self.period
        return True

    def reset(self):
        self.elapsed = 0.0


@dataclass
class _Job:
    name: str
    timer: IntervalTimer
    callback: Callable[[], object]
    enabled: bool = True


@dataclass
class Scheduler:
    """Run named callbacks on their own periods, in registration order."""

    clock: Callable[[], float] = time.monotonic
    jobs: list = field(default_factory=list)
    last_update: float | None = None

    def add(self, name: str, period: float, callback: Callable[[], object]) -> IntervalTimer:
        timer = IntervalTimer(period)
        self.jobs.append(_Job(name, timer, callback))
        return timer

    def set_enabled(self, name: str, enabled: bool):
        for job in self.jobs:
            if job.name == name:
                job.enabled = bool(enabled)

    def is_enabled(self, name: str) -> bool:
        return any(job.enabled for job in self.jobs if job.name == name)

    def update(self, now: float | None = None) -> list[str]:
        """Advance every timer to ``now`` and run the due callbacks.

        The first update only records the start time. Returns the names of
        the jobs that ran.
        """
        if now is None:
            now = self.clock()
        if self.last_update is None:
            self.last_update = now
            return []
        delta = now - self.last_update
        self.last_update = now
        ran = []
        for job in self.jobs:
            due = job.timer.tick(delta)
            if due and job.enabled:
                job.callback()
                ran.append(job.name)
        return ran
