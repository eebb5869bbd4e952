import io
import os
import stat
import time

import pytest

from myls.listing import (
    ListingError,
    format_entry,
    is_file,
    list_all,
    list_long,
    list_plain,
    permissions,
    total_blocks,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "alpha.txt").write_text("hello")
    (tmp_path / "beta").mkdir()
    (tmp_path / ".hidden").write_text("x")
    return tmp_path


def _lines(out):
    return out.getvalue().splitlines()


def test_permissions_known_modes():
    assert permissions(stat.S_IFDIR | 0o755) == "drwxr-xr-x"
    assert permissions(stat.S_IFREG | 0o644) == "-rw-r--r--"


@pytest.mark.parametrize("mode", [0, 0o777, stat.S_IFDIR | 0o700, stat.S_IFREG | 0o421])
def test_permissions_shape(mode):
    text = permissions(mode)
    assert len(text) == 10
    assert set(text[1:]) <= set("rwx-")
    assert (text[0] == "d") == stat.S_ISDIR(mode)


def test_is_file(tree):
    assert is_file(str(tree / "alpha.txt")) is True
    assert is_file(str(tree / "beta")) is False


def test_is_file_missing_reports(tree, capsys):
    assert is_file(str(tree / "missing")) is False
    assert capsys.readouterr().err.strip()


def test_list_plain_skips_hidden(tree):
    out = io.StringIO()
    list_plain(str(tree), out)
    assert sorted(_lines(out)) == ["alpha.txt", "beta"]


def test_list_plain_on_file_writes_path_then_fails(tree):
    out = io.StringIO()
    path = str(tree / "alpha.txt")
    with pytest.raises(ListingError):
        list_plain(path, out)
    assert _lines(out) == [path]


def test_list_plain_missing(tree):
    with pytest.raises(ListingError):
        list_plain(str(tree / "missing"), io.StringIO())


def test_list_all_includes_hidden_and_dots(tree):
    out = io.StringIO()
    list_all(str(tree), out)
    lines = _lines(out)
    assert set(lines) == {".", "..", ".hidden", "alpha.txt", "beta"}
    assert lines[:2] == [".", ".."]


def test_total_blocks_empty_dir(tmp_path):
    assert total_blocks(str(tmp_path)) == 0


def test_total_blocks_ignores_hidden_and_grows_with_visible(tmp_path):
    before = total_blocks(str(tmp_path))
    (tmp_path / ".big").write_bytes(os.urandom(65536))
    assert total_blocks(str(tmp_path)) == before
    (tmp_path / "big").write_bytes(os.urandom(65536))
    assert total_blocks(str(tmp_path)) > before


def test_total_blocks_missing(tmp_path):
    with pytest.raises(ListingError):
        total_blocks(str(tmp_path / "missing"))


def test_format_entry_fields(tree):
    st = os.stat(tree / "alpha.txt")
    line = format_entry(st, "alpha.txt")
    assert line.startswith(f"{permissions(st.st_mode)} {st.st_nlink} ")
    assert line.endswith(" alpha.txt")
    assert f" {st.st_size} " in line
    assert f" {time.ctime(st.st_mtime)[4:16]} " in line
    assert "\n" not in line


def test_list_long(tree):
    out = io.StringIO()
    list_long(str(tree), out)
    lines = _lines(out)
    assert lines[0] == f"total {total_blocks(str(tree))}"
    entries = lines[1:]
    assert {line.rsplit(" ", 1)[1] for line in entries} == {"alpha.txt", "beta"}
    beta_line = next(line for line in entries if line.endswith(" beta"))
    assert beta_line.startswith("d")


def test_list_long_missing(tree):
    out = io.StringIO()
    with pytest.raises(ListingError):
        list_long(str(tree / "missing"), out)
    assert not out.getvalue()