import io
import os

import pytest

from pushswap.lines import LineReader, LineReaderPool


def _pipe_with(data: bytes) -> int:
    read_end, write_end = os.pipe()
    os.write(write_end, data)
    os.close(write_end)
    return read_end


def test_lines_keep_newlines_and_last_partial_line():
    reader = LineReader(io.StringIO("sa\npb\nra"))
    assert list(reader) == ["sa\n", "pb\n", "ra"]


def test_exhausted_reader_keeps_returning_none():
    reader = LineReader(io.StringIO("x\n"))
    assert reader.next_line() == "x\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_empty_source_has_no_lines():
    assert LineReader(io.StringIO("")).next_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_round_trip_for_any_buffer_size(size):
    text = "first line\n\nthird\n" + "y" * 100 + "\nend"
    lines = list(LineReader(io.StringIO(text), buffer_size=size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])


def test_non_positive_buffer_size_reads_nothing():
    assert LineReader(io.StringIO("abc\n"), buffer_size=0).next_line() is None


def test_reads_from_file_descriptor():
    fd = _pipe_with(b"one\ntwo\n")
    try:
        assert list(LineReader(fd)) == ["one\n", "two\n"]
    finally:
        os.close(fd)


def test_utf8_split_across_chunks_is_decoded():
    text = "héllo\nwörld\n"
    reader = LineReader(io.BytesIO(text.encode("utf-8")), buffer_size=1)
    assert "".join(reader) == text


def test_bad_descriptor_gives_none():
    assert LineReader(-1).next_line() is None


def test_pool_keeps_descriptors_apart():
    fd_one = _pipe_with(b"a1\na2\n")
    fd_two = _pipe_with(b"b1\nb2\n")
    try:
        pool = LineReaderPool(buffer_size=3)
        assert pool.next_line(fd_one) == "a1\n"
        assert pool.next_line(fd_two) == "b1\n"
        assert pool.next_line(fd_one) == "a2\n"
        assert pool.next_line(fd_two) == "b2\n"
        assert pool.next_line(fd_one) is None
    finally:
        os.close(fd_one)
        os.close(fd_two)


def test_pool_rejects_descriptors_out_of_range():
    pool = LineReaderPool(open_max=8)
    assert pool.next_line(-1) is None
    assert pool.next_line(9) is None