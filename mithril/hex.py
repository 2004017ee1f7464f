"""Hexadecimal rendering of integers and byte sequences."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["hex_string", "hex_string_vector"]


def hex_string(value: int) -> str:
    """Render an integer as lower-case hex with a ``0x`` prefix.

    Negative values are rendered with a leading minus sign.
    """
    if not isinstance(value, int):
        raise TypeError("value must be an integer")
    if value < 0:
        return f"-0x{-value:x}"
    return f"0x{value:x}"


def hex_string_vector(data: Iterable[int]) -> str:
    """Render a sequence of bytes as ``[0x.., 0x..]`` without zero padding."""
    items = []
    for byte in data:
        if not isinstance(byte, int):
            raise TypeError("bytes must be integers")
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte out of range: {byte}")
        items.append(f"0x{byte:x}")
    return "[" + ", ".join(items) + "]"