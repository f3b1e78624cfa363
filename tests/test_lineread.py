import io

import pytest

from pushswap.lineread import LineReader, MultiLineReader, read_lines


def test_reads_lines_in_order():
    assert list(read_lines(io.StringIO("sa\npb\nrra\n"))) == ["sa", "pb", "rra"]


def test_empty_stream_has_no_lines():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None


def test_empty_lines_are_kept():
    assert list(read_lines(io.StringIO("\n\n"))) == ["", ""]


def test_lines_longer_than_buffer():
    text = "x" * 37
    assert list(LineReader(io.StringIO(text + "\n"), buffer_size=3)) == [text]


def test_missing_final_newline_raises():
    reader = LineReader(io.StringIO("sa\npb"))
    assert reader.read_line() == "sa"
    with pytest.raises(ValueError):
        reader.read_line()


def test_leading_nul_raises():
    with pytest.raises(ValueError):
        list(read_lines(io.StringIO("\0sa\n")))


def test_none_after_end_repeats():
    reader = LineReader(io.StringIO("pa\n"))
    assert reader.read_line() == "pa"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_bad_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO(""), buffer_size=0)


def test_multi_reader_keeps_streams_apart():
    first = io.StringIO("a1\na2\n")
    second = io.StringIO("b1\nb2")
    reader = MultiLineReader(buffer_size=4)
    assert reader.read_line(first) == "a1"
    assert reader.read_line(second) == "b1"
    assert reader.read_line(first) == "a2"
    assert reader.read_line(second) == "b2"
    assert reader.read_line(first) is None
    assert reader.read_line(second) is None


def test_round_trip_many_lines():
    lines = [f"line{n}" for n in range(25)]
    text = "".join(line + "\n" for line in lines)
    assert list(read_lines(io.StringIO(text))) == lines