import pytest

from pushswap.cstrings import (
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_whole_string():
    assert strlen("hello") == len("hello")


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == len("ab")
    assert strlen(b"xyz\0w") == len(b"xyz")


def test_strchr_finds_first():
    s = "hello world"
    idx = strchr(s, "o")
    assert s[idx] == "o"
    assert "o" not in s[:idx]


def test_strchr_missing_and_terminator():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strchr_accepts_code():
    s = "hello"
    idx = strchr(s, ord("l"))
    assert s[idx] == "l"


def test_strrchr_finds_last():
    s = "hello world"
    idx = strrchr(s, "o")
    assert s[idx] == "o"
    assert "o" not in s[idx + 1 :]


def test_strrchr_missing_and_terminator():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strnstr_found_within_limit():
    hay = "lorem ipsum dolor"
    needle = "ipsum"
    idx = strnstr(hay, needle, len(hay))
    assert hay[idx : idx + len(needle)] == needle


def test_strnstr_match_must_fit():
    hay = "lorem ipsum"
    assert strnstr(hay, "ipsum", len(hay) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strncmp_equal_and_prefix_limit():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_sign_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) == -strncmp("abc", "ab", 5)
    assert strncmp("ab", "abc", 5) < 0


def test_strncmp_stops_where_both_end():
    assert strncmp("ab\0x", "ab\0y", 10) == 0


def test_strdup_copies_up_to_nul():
    assert strdup("hello") == "hello"
    assert strdup("ab\0cd") == "ab"
    assert strdup(b"xy\0z") == b"xy"


def test_strlcpy_full_copy():
    dst = bytearray(10)
    result = strlcpy(dst, b"hello", len(dst))
    assert result == len(b"hello")
    assert bytes(dst[: len(b"hello") + 1]) == b"hello\0"


def test_strlcpy_truncates():
    dst = bytearray(4)
    result = strlcpy(dst, b"hello", len(dst))
    assert result == len(b"hello")
    assert bytes(dst) == b"hello"[:3] + b"\0"


def test_strlcpy_zero_size_leaves_dst():
    dst = bytearray(b"keep")
    assert strlcpy(dst, b"hello", 0) == len(b"hello")
    assert dst == bytearray(b"keep")


def test_strlcpy_buffer_too_small():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"hello", 10)


def test_strlcat_appends():
    dst = bytearray(b"foo\0" + bytes(6))
    result = strlcat(dst, b"bar", len(dst))
    assert result == len(b"foo") + len(b"bar")
    assert bytes(dst[:7]) == b"foo" + b"bar" + b"\0"
    assert strlen(dst) == result


def test_strlcat_truncates():
    dst = bytearray(b"foo\0" + bytes(6))
    result = strlcat(dst, b"bar", 5)
    assert result == len(b"foo") + len(b"bar")
    assert bytes(dst[:5]) == b"foo" + b"bar"[:1] + b"\0"


def test_strlcat_size_not_past_dst():
    dst = bytearray(b"foobar\0")
    before = bytes(dst)
    assert strlcat(dst, b"xy", 3) == len(b"xy") + 3
    assert bytes(dst) == before