"""Reading the integers of the stack from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
_OVERFLOW = 2147483648
_WHITESPACE = frozenset("\t\n\v\f\r ")


class InputError(ValueError):
    """Raised where the arguments do not describe a valid stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def atoll(text: str) -> int:
    """Read a leading, optionally signed decimal number.

    Leading whitespace is skipped and reading stops at the first non-digit.
    Once the value passes INT_MAX with more digits to come, 2147483648 is
    returned whatever the sign, which is out of range either way.
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
        if value > INT_MAX:
            return _OVERFLOW
        value = value * 10 + int(char)
    return value * sign


def _is_bad_other(char: str) -> bool:
    if char in "+- ":
        return False
    code = ord(char)
    return 32 < code < 48 or code > 57


def check_arg_chars(arg: str) -> None:
    """Raise InputError if an argument holds a stray character or sign."""
    for index, char in enumerate(arg):
        following = arg[index + 1] if index + 1 < len(arg) else ""
        if "0" <= char <= "9":
            if following and (58 <= ord(following) <= 126 or 33 <= ord(following) <= 47):
                raise InputError()
            continue
        if char in "+-" and following in ("", " ", "+", "-"):
            raise InputError()
        if _is_bad_other(char):
            raise InputError()


def check_range(value: int) -> int:
    """Return the value if it fits a 32-bit signed int, else raise InputError."""
    if value > INT_MAX or value < INT_MIN:
        raise InputError()
    return value


def parse_args(args: Iterable[str]) -> list[int]:
    """Turn arguments, each holding space-separated numbers, into a stack.

    The first number is the top. Bad characters, out-of-range values and
    duplicates raise InputError.
    """
    numbers: list[int] = []
    seen: set[int] = set()
    for arg in args:
        check_arg_chars(arg)
        for word in arg.split(" "):
            if not word:
                continue
            value = check_range(atoll(word))
            if value in seen:
                raise InputError()
            seen.add(value)
            numbers.append(value)
    return numbers