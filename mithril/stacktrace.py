"""Stack traces and fatal-signal handlers that print them."""

from __future__ import annotations

import signal
import sys
import traceback
from collections.abc import Callable
from types import FrameType
from typing import Any

from mithril import log

__all__ = [
    "skip_frames",
    "signal_name",
    "stacktrace",
    "signal_handler",
    "setup_signal_handlers",
]

_MAX_FRAMES = 64
_FATAL_SIGNALS = (signal.SIGILL, signal.SIGABRT, signal.SIGFPE, signal.SIGSEGV)
_SIGNAL_NAMES = {
    signal.SIGILL: "illegal instruction",
    signal.SIGABRT: "abnormal termination",
    signal.SIGFPE: "floating point error",
    signal.SIGSEGV: "segmentation fault",
}

_skipped_frames = 0


def skip_frames(frames: int) -> None:
    """Set how many innermost frames ``stacktrace`` leaves out."""
    global _skipped_frames
    _skipped_frames = frames


def signal_name(signum: int) -> str:
    """Describe a fatal signal, or return ``"?"`` for any other."""
    return _SIGNAL_NAMES.get(signum, "?")


def stacktrace() -> list[str]:
    """Return the current call stack, innermost first, as numbered lines.

    Exits the process with status 1 if every frame would be skipped.
    """
    limit = _MAX_FRAMES + _skipped_frames
    summaries = list(reversed(traceback.extract_stack(limit=limit)))
    if _skipped_frames >= len(summaries):
        sys.exit(1)
    kept = summaries[_skipped_frames:]
    return [
        f"#{index} {entry.name} at {entry.filename}:{entry.lineno}"
        for index, entry in enumerate(kept)
    ]


def signal_handler(signum: int, frame: FrameType | None = None) -> None:
    """Log the signal, print the stack trace and exit with status 1."""
    log.info("received signal: {}", signal_name(signum))
    frames = stacktrace()
    log.info("found {} stack frames", len(frames))
    for line in frames:
        sys.stdout.write(line + "\n")
    sys.exit(1)


def setup_signal_handlers(
    handler: Callable[[int, FrameType | None], Any],
) -> dict[int, Any]:
    """Install ``handler`` for the fatal signals; return the previous handlers."""
    return {signum: signal.signal(signum, handler) for signum in _FATAL_SIGNALS}