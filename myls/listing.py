"""Directory listings: visible names, all names, and the long format."""

from __future__ import annotations

import os
import stat
import sys
import time
from typing import Iterable, TextIO

from myls.fmt import format_int

try:
    import grp
    import pwd
except ImportError:  # pragma: no cover - platforms without a user database
    grp = None
    pwd = None

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


class ListingError(Exception):
    """A directory could not be opened for listing."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"cannot list {path!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def _entry_names(path: str) -> list[str]:
    """Names of the entries of a directory, in the order the system gives them."""
    try:
        with os.scandir(path) as entries:
            return [entry.name for entry in entries]
    except OSError as exc:
        raise ListingError(path, exc.strerror) from exc


def _visible(names: Iterable[str]) -> Iterable[str]:
    return (name for name in names if not name.startswith("."))


def _child(path: str, name: str) -> str:
    return f"{path}/{name}"


def is_file(path: str) -> bool:
    """True when path names a regular file; a failed lookup is reported on stderr."""
    try:
        stats = os.stat(path)
    except OSError as exc:
        print(exc.strerror or str(exc), file=sys.stderr)
        return False
    return stat.S_ISREG(stats.st_mode)


def list_plain(path: str, out: TextIO | None = None) -> None:
    """Write the visible entries of a directory, one per line.

    A regular file's own path is written first; it then fails as a directory.
    """
    stream = _stream(out)
    if is_file(path):
        stream.write(f"{path}\n")
    for name in _visible(_entry_names(path)):
        stream.write(f"{name}\n")


def list_all(path: str, out: TextIO | None = None) -> None:
    """Write every entry of a directory, hidden ones and . and .. included."""
    stream = _stream(out)
    if is_file(path):
        stream.write(f"{path}\n")
    for name in [".", "..", *_entry_names(path)]:
        stream.write(f"{name}\n")


def permissions(mode: int) -> str:
    """The ten-character type and permission column of a long listing."""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(
        letter if mode & bit else "-" for bit, letter in _PERMISSION_BITS
    )


def _user_name(uid: int) -> str:
    if pwd is None:
        return ""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return ""


def _group_name(gid: int) -> str:
    if grp is None:
        return ""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return ""


def _blocks(filepath: str) -> int:
    try:
        stats = os.stat(filepath)
    except OSError:
        return 0
    return getattr(stats, "st_blocks", 0) // 2


def total_blocks(path: str) -> int:
    """Sum of the 1 KiB block counts of the visible entries of a directory."""
    return sum(_blocks(_child(path, name)) for name in _visible(_entry_names(path)))


def format_entry(stats: os.stat_result, name: str) -> str:
    """One line of a long listing, without its newline."""
    date = time.ctime(stats.st_mtime)[4:16]
    return (
        f"{permissions(stats.st_mode)} "
        f"{format_int(stats.st_nlink)} "
        f"{_user_name(stats.st_uid)} "
        f"{_group_name(stats.st_gid)} "
        f"{format_int(stats.st_size)} "
        f"{date} "
        f"{name}"
    )


def list_long(path: str, out: TextIO | None = None) -> None:
    """Write a block total and a long-format line for each visible entry."""
    stream = _stream(out)
    names = _entry_names(path)
    stream.write(f"total {format_int(total_blocks(path))}\n")
    for name in _visible(names):
        try:
            stats = os.stat(_child(path, name))
        except OSError:
            continue
        stream.write(f"{format_entry(stats, name)}\n")