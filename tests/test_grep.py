import io

import pytest

from xv6tools.grep import grep_lines, main, match


@pytest.mark.parametrize(
    "re, text, expected",
    [
        ("abc", "xxabcxx", True),
        ("abc", "abx", False),
        ("^abc", "abcd", True),
        ("^abc", "xabc", False),
        ("a.c", "abc", True),
        ("a.c", "ac", False),
        ("ab*c", "ac", True),
        ("ab*c", "abbbc", True),
        ("ab*c", "abxc", False),
        ("c$", "abc", True),
        ("c$", "abcd", False),
        ("^$", "", True),
        ("^$", "a", False),
        ("", "anything", True),
        ("a*", "", True),
        (".*z", "abcz", True),
        ("^.*z$", "abczq", False),
    ],
)
def test_match(re, text, expected):
    assert match(re, text) is expected


def test_match_long_line_without_recursion_limit():
    text = "a" * 5000 + "b"
    assert match("a*b$", text) is True
    assert match("^" + "a" * 5000 + "c", text) is False


def test_grep_lines_selects_matching_lines():
    stream = io.StringIO("foo\nbar\nfood\n")
    assert list(grep_lines("foo", stream)) == ["foo\n", "food\n"]


def test_unterminated_last_line_is_dropped():
    stream = io.StringIO("foo\nfoo")
    assert list(grep_lines("foo", stream)) == ["foo\n"]


def test_line_filling_buffer_stops_reading():
    stream = io.StringIO("x" * 1023 + "\nfoo\n")
    assert list(grep_lines("foo", stream)) == []


def test_longest_line_that_fits():
    long_line = "x" * 1022
    stream = io.StringIO(long_line + "\nfoo\n")
    assert list(grep_lines("x", stream)) == [long_line + "\n"]


def test_grep_lines_on_byte_stream():
    stream = io.BytesIO(b"ab\ncd\nce\n")
    assert list(grep_lines("^c", stream)) == ["cd\n", "ce\n"]


def test_every_yielded_line_matches():
    text = "alpha\nbeta\ngamma\ndelta\n"
    found = list(grep_lines("a$", io.StringIO(text)))
    assert found == [line + "\n" for line in text.splitlines() if line.endswith("a")]


def test_main_on_files(tmp_path, capsysbinary):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_bytes(b"hello\nworld\n")
    second.write_bytes(b"help\nno\n")
    assert main(["hel", str(first), str(second)]) == 0
    assert capsysbinary.readouterr().out == b"hello\nhelp\n"


def test_main_missing_file(tmp_path, capsysbinary):
    missing = tmp_path / "nope"
    assert main(["x", str(missing)]) == 1
    assert capsysbinary.readouterr().out == f"grep: cannot open {missing}\n".encode()


def test_main_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "usage: grep pattern [file ...]\n"