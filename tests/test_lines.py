import io

import pytest

from raycube.lines import iter_lines, read_lines

TEXT = "NO ./north.xpm\n\n111\n1N1\n111"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 50, 1000])
def test_lines_do_not_depend_on_buffer_size(size):
    assert list(iter_lines(io.StringIO(TEXT), size)) == TEXT.splitlines(keepends=True)


def test_lines_keep_newlines_and_join_back():
    lines = list(iter_lines(io.StringIO(TEXT), 4))
    assert "".join(lines) == TEXT
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "111"


def test_empty_stream_yields_nothing():
    assert list(iter_lines(io.StringIO(""))) == []


def test_blank_lines_are_kept():
    assert list(iter_lines(io.StringIO("\n\n"), 1)) == ["\n", "\n"]


def test_trailing_newline_gives_no_empty_line():
    assert list(iter_lines(io.StringIO("a\nb\n"), 3)) == ["a\n", "b\n"]


def test_bytes_stream():
    data = b"11\n1N\n"
    assert list(iter_lines(io.BytesIO(data), 2)) == [b"11\n", b"1N\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        list(iter_lines(io.StringIO("abc"), size))


def test_read_lines_strips_newlines(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text(TEXT, encoding="utf-8")
    assert read_lines(path) == TEXT.split("\n")


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.cub"
    path.write_text("", encoding="utf-8")
    assert read_lines(path) == []


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.cub")