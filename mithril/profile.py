"""Named wall-clock timers that report their elapsed time through the logger."""

from __future__ import annotations

import time
from collections.abc import Callable

from mithril import log

__all__ = ["Profiler", "start", "stop"]


class Profiler:
    """Tracks running timers by name.

    ``clock`` returns a monotonic time in nanoseconds.
    """

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self._clock = clock
        self._running: dict[str, int] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._running

    def __len__(self) -> int:
        return len(self._running)

    def start(self, name: str) -> None:
        """Start the timer ``name``; logs an error if it is already running."""
        if name in self._running:
            log.error("profile with name {} is already running", name)
            return
        self._running[name] = self._clock()

    def stop(self, name: str) -> int | None:
        """Stop the timer ``name``, log its duration and return it in microseconds.

        Logs an error and returns ``None`` when no such timer is running.
        """
        if not self._running:
            log.error("no profiling in progress")
            return None
        began = self._running.pop(name, None)
        if began is None:
            log.error("profile {} not found", name)
            return None

        elapsed_ns = self._clock() - began
        micros = elapsed_ns // 1_000
        if micros < 1_000:
            log.info("{} took {} µs", name, micros)
        elif micros < 1_000_000:
            log.info("{} took {} ms", name, elapsed_ns // 1_000_000)
        else:
            log.info("{} took {} sec", name, elapsed_ns // 1_000_000_000)
        return micros


_default = Profiler()


def start(name: str) -> None:
    """Start a timer on the shared profiler."""
    _default.start(name)


def stop(name: str) -> int | None:
    """Stop a timer on the shared profiler and return its duration in microseconds."""
    return _default.stop(name)