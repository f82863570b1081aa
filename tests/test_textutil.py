import io
import sys

from xvutils.textutil import (
    WordCount,
    cat,
    cat_main,
    count,
    echo,
    echo_main,
    wc_main,
)


def test_count_simple():
    data = b"hello world\nfoo\n"
    assert count(io.BytesIO(data)) == WordCount(2, 3, len(data))


def test_count_empty():
    assert count(io.BytesIO(b"")) == WordCount()


def test_count_nul_is_whitespace():
    assert count(io.BytesIO(b"a\0b")) == count(io.BytesIO(b"a b"))


def test_count_formfeed_is_not_whitespace():
    assert count(io.BytesIO(b"a\fb")).words == count(io.BytesIO(b"ab")).words


def test_count_text_matches_bytes():
    assert count(io.StringIO("x y\n z\t")) == count(io.BytesIO(b"x y\n z\t"))


def test_count_large_input_chunks():
    data = b"word " * 1000
    result = count(io.BytesIO(data))
    assert result.words == 1000
    assert result.chars == len(data)


def test_echo():
    assert echo(["a", "b"]) == "a b\n"
    assert echo([]) == ""


def test_cat_concatenates():
    out = io.BytesIO()
    cat([io.BytesIO(b"abc"), io.BytesIO(b""), io.BytesIO(b"def")], out)
    assert out.getvalue() == b"abcdef"


def test_cat_write_error():
    class ShortWriter:
        def write(self, data):
            return len(data) - 1

    try:
        cat([io.BytesIO(b"abc")], ShortWriter())
    except OSError as exc:
        assert str(exc) == "write error"
    else:
        raise AssertionError("expected OSError")


def test_wc_main_file(tmp_path, capsys):
    data = b"one two\nthree\n"
    path = tmp_path / "f.txt"
    path.write_bytes(data)
    totals = count(io.BytesIO(data))
    assert wc_main([str(path)]) == 0
    expected = f"{totals.lines} {totals.words} {totals.chars} {path}\n"
    assert capsys.readouterr().out == expected


def test_wc_main_stdin(monkeypatch, capsys):
    data = b"a b\nc\n"
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    totals = count(io.BytesIO(data))
    assert wc_main([]) == 0
    assert capsys.readouterr().out == f"{totals.lines} {totals.words} {totals.chars} \n"


def test_wc_main_missing(tmp_path, capsys):
    missing = str(tmp_path / "nope")
    assert wc_main([missing]) == 1
    assert capsys.readouterr().out == f"wc: cannot open {missing}\n"


def test_cat_main_files(tmp_path, capsys):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"first\n")
    second.write_bytes(b"second\n")
    assert cat_main([str(first), str(second)]) == 0
    assert capsys.readouterr().out == "first\nsecond\n"


def test_cat_main_missing(tmp_path, capsys):
    missing = str(tmp_path / "nope")
    assert cat_main([missing]) == 1
    assert capsys.readouterr().err == f"cat: cannot open {missing}\n"


def test_cat_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"piped\n")))
    assert cat_main([]) == 0
    assert capsys.readouterr().out == "piped\n"


def test_echo_main(capsys):
    assert echo_main(["hi", "there"]) == 0
    assert capsys.readouterr().out == echo(["hi", "there"])