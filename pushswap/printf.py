"""A small formatter for the %d %i %u %c %s %p %x %X and %% conversions."""

from __future__ import annotations

import operator
import re
import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

_CONVERSIONS = frozenset("diucspxX%")
_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)
_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


def _int32(value: Any) -> int:
    number = operator.index(value) & _MASK32
    return number - (1 << 32) if number >= 1 << 31 else number


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected a string for %s, got {type(value).__name__}")
    return value


def _convert(conv: str, args: Iterator[Any]) -> str:
    if conv == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conv}") from None
    if conv in "di":
        return str(_int32(value))
    if conv == "u":
        return str(operator.index(value) & _MASK32)
    if conv == "c":
        return _char(value)
    if conv == "s":
        return _string(value)
    if conv == "p":
        return "0x" + format(operator.index(value) & _MASK64, "x")
    if conv == "x":
        return format(operator.index(value) & _MASK32, "x")
    return format(operator.index(value) & _MASK32, "X")


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args``, in order.

    A ``%`` followed by an unknown character is dropped and the character
    kept; a ``%`` at the very end is dropped. Integers for %d and %i wrap
    to 32-bit signed, for %u, %x and %X to 32-bit unsigned, and for %p to
    64-bit unsigned. Extra arguments are ignored; too few raise TypeError.
    """
    remaining = iter(args)

    def expand(match: re.Match[str]) -> str:
        conv = match.group(1)
        if conv in _CONVERSIONS and conv:
            return _convert(conv, remaining)
        return conv

    return _DIRECTIVE.sub(expand, fmt)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)