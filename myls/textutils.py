"""Small string and number helpers."""

from __future__ import annotations

import numbers
import struct
from itertools import zip_longest
from typing import Iterable

from myls.fmt import format_int


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def is_alnum(c: str) -> bool:
    """True when c is an ASCII letter or digit."""
    return ("0" <= c <= "9") or ("A" <= c <= "Z") or ("a" <= c <= "z")


def sign_letter(n: int) -> str:
    """Return 'N' for a negative number and 'P' otherwise."""
    if not isinstance(n, numbers.Real):
        raise TypeError(f"expected a number, got {type(n).__name__}")
    letters = {True: "N", False: "P"}
    return letters[n < 0]


def comb2() -> str:
    """All pairs of two-digit numbers a < b, as 'aa bb' joined by ', '."""
    return ", ".join(
        f"{a:02d} {b:02d}" for a in range(99) for b in range(a + 1, 100)
    )


def format_params(args: Iterable[str]) -> str:
    """Each argument on its own line."""
    return "".join(f"{arg}\n" for arg in args)


def format_float2(nb: float) -> str:
    """Render a single-precision value with two truncated decimals."""
    value = _to_float32(nb)
    post = int(value)
    diff = _to_float32(value - _to_float32(post))
    after = int(_to_float32(diff * 100.0))
    pad = format_int(0) if 0 <= after < 10 else ""
    return f"{format_int(post)}.{pad}{format_int(after)}"


def sort_ints(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order."""
    return sorted(values)


def strings_differ(s1: str, s2: str) -> bool:
    """True when the strings differ within the length of the shorter one."""
    return any(a != b for a, b in zip(s1, s2))


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch."""
    for c1, c2 in zip_longest(s1[:n], s2[:n], fillvalue=""):
        if c1 != c2:
            return (ord(c1) if c1 else 0) - (ord(c2) if c2 else 0)
    return 0