"""Character classes and small string helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import TypeVar, Union

Char = Union[int, str]
_C = TypeVar("_C", int, str)

_WHITESPACE = frozenset("\t\n\v\f\r ")
_MASK64 = (1 << 64) - 1


def _code(c: Char) -> int:
    """Code point of a one-character string, or the integer itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: _C) -> _C:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: _C) -> _C:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def atoi(text: str) -> int:
    """Read a leading, optionally signed decimal number as a 32-bit int.

    Leading whitespace is skipped and reading stops at the first non-digit.
    Values too large wrap around as a 64-bit accumulator truncated to a
    32-bit int would.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for char in text[pos:]:
        if not "0" <= char <= "9":
            break
        value = (value * 10 + int(char)) & _MASK64
    return _to_signed(_to_signed(value, 64) * sign, 32)


def itoa(n: int) -> str:
    """Decimal text of an integer."""
    return str(int(n))


def split(s: str, sep: str) -> list[str]:
    """Words of ``s`` separated by the character ``sep``; empty words dropped."""
    if len(sep) != 1:
        raise ValueError(f"separator must be one character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return s[start : start + length]


def strjoin(first: str, second: str) -> str:
    """The two strings one after the other."""
    return first + second


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every item of ``chars`` in place by ``func(index, char)``."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)