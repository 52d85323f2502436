import io
from unittest.mock import patch

import pytest

from xv6tools.fileutils import (
    TICK_SECONDS,
    cat,
    cat_main,
    echo,
    echo_main,
    ln_main,
    mkdir_main,
    rm_main,
    sleep_main,
    wc,
    wc_main,
)


def test_cat_concatenates_streams_in_order():
    out = io.BytesIO()
    cat([io.BytesIO(b"first\n"), io.BytesIO(b"second\n")], out)
    assert out.getvalue() == b"first\nsecond\n"


def test_cat_copies_large_input_whole():
    data = bytes(range(256)) * 10
    out = io.BytesIO()
    cat([io.BytesIO(data)], out)
    assert out.getvalue() == data


def test_echo_joins_with_spaces():
    out = io.StringIO()
    echo(["hello", "world"], out)
    assert out.getvalue() == "hello world\n"


def test_echo_without_arguments_writes_nothing():
    out = io.StringIO()
    echo([], out)
    assert out.getvalue() == ""


def test_wc_empty():
    assert wc(io.BytesIO(b"")) == (0, 0, 0)


def test_wc_counts_chars_and_lines():
    data = b"one two\nthree\n  four  \n"
    lines, words, chars = wc(io.BytesIO(data))
    assert chars == len(data)
    assert lines == data.count(b"\n")
    assert words == len(data.split())


def test_wc_nul_separates_words():
    assert wc(io.BytesIO(b"a\0b"))[1] == 2


def test_wc_text_stream():
    text = "alpha beta\tgamma\n"
    assert wc(io.StringIO(text)) == (1, len(text.split()), len(text))


def test_cat_main_files(tmp_path, capsys):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.write_bytes(b"abc\n")
    b.write_bytes(b"def\n")
    assert cat_main([str(a), str(b)]) == 0
    assert capsys.readouterr().out == "abc\ndef\n"


def test_cat_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope"
    assert cat_main([str(missing)]) == 1
    assert capsys.readouterr().err == f"cat: cannot open {missing}\n"


def test_echo_main(capsys):
    assert echo_main(["x", "y"]) == 0
    assert capsys.readouterr().out == "x y\n"


def test_wc_main_file(tmp_path, capsys):
    path = tmp_path / "f"
    path.write_bytes(b"hi there\nbye\n")
    assert wc_main([str(path)]) == 0
    lines, words, chars = wc(io.BytesIO(path.read_bytes()))
    assert capsys.readouterr().out == f"{lines} {words} {chars} {path}\n"


def test_wc_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "gone"
    assert wc_main([str(missing)]) == 1
    assert capsys.readouterr().out == f"wc: cannot open {missing}\n"


def test_mkdir_main_creates(tmp_path):
    d1 = tmp_path / "d1"
    d2 = tmp_path / "d2"
    assert mkdir_main([str(d1), str(d2)]) == 0
    assert d1.is_dir() and d2.is_dir()


def test_mkdir_main_stops_at_failure(tmp_path, capsys):
    existing = tmp_path / "e"
    existing.mkdir()
    later = tmp_path / "later"
    assert mkdir_main([str(existing), str(later)]) == 0
    assert not later.exists()
    assert capsys.readouterr().err == f"mkdir: {existing} failed to create\n"


def test_mkdir_main_usage(capsys):
    assert mkdir_main([]) == 1
    assert capsys.readouterr().err == "Usage: mkdir files...\n"


def test_rm_main_removes_files_and_empty_dirs(tmp_path):
    f = tmp_path / "f"
    f.write_text("x")
    d = tmp_path / "d"
    d.mkdir()
    assert rm_main([str(f), str(d)]) == 0
    assert not f.exists() and not d.exists()


def test_rm_main_nonempty_dir_fails(tmp_path, capsys):
    d = tmp_path / "d"
    d.mkdir()
    (d / "inner").write_text("x")
    assert rm_main([str(d)]) == 0
    assert d.exists()
    assert capsys.readouterr().err == f"rm: {d} failed to delete\n"


def test_rm_main_usage(capsys):
    assert rm_main([]) == 1
    assert capsys.readouterr().err == "Usage: rm files...\n"


def test_ln_main_links(tmp_path):
    old = tmp_path / "old"
    old.write_text("content")
    new = tmp_path / "new"
    assert ln_main([str(old), str(new)]) == 0
    assert new.read_text() == "content"
    assert new.stat().st_ino == old.stat().st_ino


def test_ln_main_failure_reports(tmp_path, capsys):
    old = tmp_path / "missing"
    new = tmp_path / "new"
    assert ln_main([str(old), str(new)]) == 0
    assert capsys.readouterr().err == f"link {old} {new}: failed\n"


def test_ln_main_usage(capsys):
    assert ln_main(["only"]) == 1
    assert capsys.readouterr().err == "Usage: ln old new\n"


def test_sleep_main_sleeps_ticks():
    with patch("time.sleep") as sleeper:
        assert sleep_main(["5"]) == 0
    assert sleeper.call_args.args[0] == pytest.approx(5 * TICK_SECONDS)


def test_sleep_main_rejects_non_digits(capsys):
    with patch("time.sleep") as sleeper:
        assert sleep_main(["12a"]) == 1
    assert sleeper.call_count == 0
    assert capsys.readouterr().err == "Invalid time interval '12a'"


def test_sleep_main_usage(capsys):
    assert sleep_main([]) == 1
    assert capsys.readouterr().err == "Usage: sleep NUMBER\n"