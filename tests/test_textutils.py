import io

import pytest

from libshelf.textutils import get_int, read_field, read_line, trim, truncate


def test_trim_removes_non_letters_at_both_ends():
    assert trim("  --hello!! ") == "hello"


def test_trim_keeps_inner_characters():
    assert trim("1a b-c2") == "a b-c"


def test_trim_of_no_letters_is_empty():
    assert trim("123 !?") == ""


def test_truncate_limits_length():
    assert truncate("abcdef", 3) == "abc"
    assert truncate("ab", 5) == "ab"


def test_truncate_negative_raises():
    with pytest.raises(ValueError):
        truncate("abc", -1)


def test_read_field_skips_space_and_consumes_delimiter():
    stream = io.StringIO("   abc,def")
    assert read_field(stream, 10, ",") == "abc"
    assert stream.read() == "def"


def test_read_field_stops_at_max_size_without_reading_more():
    stream = io.StringIO("abcdef\n")
    assert read_field(stream, 3) == "abc"
    assert stream.read() == "def\n"


def test_read_field_at_end_of_input_is_empty():
    assert read_field(io.StringIO("   "), 5) == ""


def test_read_line_returns_lines_then_none():
    stream = io.StringIO("hello\nworld")
    assert read_line(stream) == "hello"
    assert read_line(stream) == "world"
    assert read_line(stream) is None


def test_read_line_empty_line_is_none():
    assert read_line(io.StringIO("\nnext\n")) is None


def test_get_int_discards_rest_of_line_and_writes_prompt():
    stream = io.StringIO("42 rest\n7\n")
    out = io.StringIO()
    assert get_int(stream, "Number: ", out) == 42
    assert out.getvalue() == "Number: "
    assert get_int(stream, None, out) == 7


def test_get_int_invalid_raises_value_error():
    with pytest.raises(ValueError):
        get_int(io.StringIO("abc\n"), None, io.StringIO())


def test_get_int_end_of_input_raises_eof():
    with pytest.raises(EOFError):
        get_int(io.StringIO(""), None, io.StringIO())