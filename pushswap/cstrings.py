"""Helpers for NUL-terminated strings and fixed-size byte buffers."""

from __future__ import annotations

from typing import Optional, Union

Text = Union[str, bytes, bytearray, memoryview]


def _nul_index(s: Text) -> int:
    if isinstance(s, str):
        found = s.find("\0")
    else:
        found = bytes(s).find(b"\0")
    return len(s) if found < 0 else found


def _char(c: Union[str, int]) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(s: Text) -> int:
    """Number of characters before the first NUL, or the whole length."""
    return _nul_index(s)


def strchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at ``strlen(s)``.
    """
    text = s[: strlen(s)]
    char = _char(c)
    if char == "\0":
        return len(text)
    found = text.find(char)
    return None if found < 0 else found


def strrchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at ``strlen(s)``.
    """
    text = s[: strlen(s)]
    char = _char(c)
    if char == "\0":
        return len(text)
    found = text.rfind(char)
    return None if found < 0 else found


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at 0; None when there is no match.
    """
    needle = needle[: strlen(needle)]
    if not needle:
        return 0
    window = haystack[: min(strlen(haystack), max(n, 0))]
    found = window.find(needle)
    return None if found < 0 else found


def _code_at(s: Text, index: int) -> int:
    if index >= len(s):
        return 0
    item = s[index]
    return ord(item) if isinstance(item, str) else item


def strncmp(first: Text, second: Text, n: int) -> int:
    """Compare at most ``n`` characters; the difference at the first mismatch.

    The end of a string compares as NUL, and comparison stops where both
    strings end.
    """
    for index in range(max(n, 0)):
        left = _code_at(first, index)
        right = _code_at(second, index)
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def strdup(s: Text) -> Union[str, bytes]:
    """A copy of the string up to its first NUL."""
    end = strlen(s)
    if isinstance(s, str):
        return s[:end]
    return bytes(s[:end])


def strlcpy(dst: bytearray, src: Text, size: int) -> int:
    """Copy ``src`` into ``dst`` within ``size`` bytes, NUL-terminated.

    Returns the length of ``src``. Raises ValueError if the bytes to be
    written do not fit in ``dst``.
    """
    source = bytes(src.encode() if isinstance(src, str) else src)
    length = strlen(source)
    if size <= 0:
        return length
    count = min(length, size - 1)
    if count + 1 > len(dst):
        raise ValueError("destination buffer too small")
    dst[:count] = source[:count]
    dst[count] = 0
    return length


def strlcat(dst: bytearray, src: Text, size: int) -> int:
    """Append ``src`` to the string in ``dst`` within ``size`` bytes in all.

    Returns the length the full result would have. When ``size`` is not
    larger than the current string, nothing is written and the length of
    ``src`` plus ``size`` is returned.
    """
    source = bytes(src.encode() if isinstance(src, str) else src)
    src_len = strlen(source)
    dst_len = strlen(dst)
    if size <= 0:
        return src_len
    if size <= dst_len:
        return src_len + size
    count = min(src_len, size - 1 - dst_len)
    end = dst_len + count
    if end + 1 > len(dst):
        raise ValueError("destination buffer too small")
    dst[dst_len:end] = source[:count]
    dst[end] = 0
    return dst_len + src_len