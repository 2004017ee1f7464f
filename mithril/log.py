"""Levelled console logging with ``{}`` placeholder formatting."""

from __future__ import annotations

import sys
from enum import IntEnum

__all__ = [
    "Level",
    "level_name",
    "set_level",
    "get_level",
    "count_placeholders",
    "format_message",
    "debug",
    "info",
    "warning",
    "error",
]

COLOR_RESET = "\033[0m"
COLOR_YELLOW = "\033[33m"
COLOR_RED = "\033[31m"

_PLACEHOLDER = "{}"


class Level(IntEnum):
    """Log severity, ordered from most to least verbose."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    OFF = 4


_NAMES = {
    Level.DEBUG: "Debug",
    Level.INFO: "Info",
    Level.WARNING: "Warning",
    Level.ERROR: "Error",
}

_current_level = Level.INFO


def level_name(level: Level) -> str:
    """Return the display name of ``level``, or ``"?"`` when it has none."""
    return _NAMES.get(level, "?")


def set_level(level: Level) -> None:
    """Set the minimum level that is written."""
    global _current_level
    _current_level = Level(level)


def get_level() -> Level:
    """Return the minimum level that is written."""
    return _current_level


def count_placeholders(fmt: str) -> int:
    """Count the non-overlapping ``{}`` placeholders in ``fmt``."""
    return fmt.count(_PLACEHOLDER)


def format_message(fmt: str, *args: object) -> str:
    """Replace each ``{}`` in ``fmt`` with the next argument; append a newline.

    Raises ``ValueError`` when the number of placeholders and arguments differ.
    """
    if count_placeholders(fmt) != len(args):
        raise ValueError(
            "Number of '{}' placeholders does not match number of arguments"
        )
    parts = []
    pos = 0
    for value in args:
        found = fmt.find(_PLACEHOLDER, pos)
        parts.append(fmt[pos:found])
        parts.append(str(value))
        pos = found + len(_PLACEHOLDER)
    parts.append(fmt[pos:])
    return "".join(parts) + "\n"


def _emit(level: Level, fmt: str, args: tuple, color: str | None = None) -> None:
    if _current_level > level:
        return
    text = f"[{level_name(level)}] " + format_message(fmt, *args)
    if color is not None:
        text = color + text + COLOR_RESET
    sys.stdout.write(text)


def debug(fmt: str, *args: object) -> None:
    """Write a debug message."""
    _emit(Level.DEBUG, fmt, args)


def info(fmt: str, *args: object) -> None:
    """Write an informational message."""
    _emit(Level.INFO, fmt, args)


def warning(fmt: str, *args: object) -> None:
    """Write a warning in yellow."""
    _emit(Level.WARNING, fmt, args, COLOR_YELLOW)


def error(fmt: str, *args: object) -> None:
    """Write an error in red."""
    _emit(Level.ERROR, fmt, args, COLOR_RED)