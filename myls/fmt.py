"""Printf-style formatting with a small fixed set of conversions."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, TextIO

_HEX_DIGITS = "0123456789abcdef"
_OCT_DIGITS = "01234567"
_FRACTION_SCALE = 1_000_000


def _to_int32(value: Any) -> int:
    """Wrap an integer to the range of a signed 32-bit int."""
    wrapped = int(value) & 0xFFFFFFFF
    return wrapped - (1 << 32) if wrapped >= 1 << 31 else wrapped


def _truncated_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    rem = abs(a) % abs(b)
    return -rem if a < 0 else rem


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _in_base(nb: int, digits: str) -> str:
    if nb < 0:
        raise ValueError(f"cannot convert negative value {nb}")
    base = len(digits)
    out = []
    while True:
        nb, rest = divmod(nb, base)
        out.append(digits[rest])
        if nb == 0:
            break
    return "".join(reversed(out))


def format_int(nb: int) -> str:
    """Render a 32-bit int in decimal.

    Negative values produce a single character: the digit character
    shifted by the (negative) last digit of the value.
    """
    nb = _to_int32(nb)
    if nb >= 0:
        return str(nb)
    return chr(ord("0") + _truncated_remainder(nb, 10))


def format_unsigned(nb: int) -> str:
    """Render a value as an unsigned 32-bit decimal number."""
    return str(int(nb) & 0xFFFFFFFF)


def format_hex(nb: int) -> str:
    """Render a non-negative 32-bit int in lower-case hexadecimal."""
    return _in_base(_to_int32(nb), _HEX_DIGITS)


def format_oct(nb: int) -> str:
    """Render a non-negative 32-bit int in octal."""
    return _in_base(_to_int32(nb), _OCT_DIGITS)


def format_pointer(address: int) -> str:
    """Render an address as 0x followed by lower-case hexadecimal."""
    return "0x" + _in_base(int(address), _HEX_DIGITS)


def _fraction(nb: float, post: int) -> str:
    after = _to_float32((nb - post) * _FRACTION_SCALE)
    return format_int(int(after + 0.5))


def format_float(nb: float) -> str:
    """Render the integer part, a dot and the rounded millionths, unpadded."""
    nb = float(nb)
    post = _to_int32(int(nb))
    return f"{format_int(post)}.{_fraction(nb, post)}"


def format_exp(nb: float) -> str:
    """Render a value in a simple scientific notation such as 5.0e+03."""
    nb = float(nb)
    exponent = 0
    while int(nb) > 9:
        nb /= 10
        exponent += 1
    post = _to_int32(int(nb))
    return (
        f"{format_int(post)}.{_fraction(nb, post)}"
        f"e+{format_int(0)}{format_int(exponent)}"
    )


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_to_int32(value) & 0xFF)


def _format_str(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class _Conversion:
    render: Callable[[Any], str]
    takes_argument: bool = True
    counted: bool = False


_CONVERSIONS = {
    "c": _Conversion(_format_char, counted=True),
    "s": _Conversion(_format_str),
    "d": _Conversion(format_int),
    "i": _Conversion(format_int),
    "%": _Conversion(lambda _: "%", takes_argument=False, counted=True),
    "x": _Conversion(format_hex),
    "X": _Conversion(format_hex),
    "o": _Conversion(format_oct),
    "p": _Conversion(format_pointer),
    "f": _Conversion(format_float),
    "e": _Conversion(format_exp),
    "u": _Conversion(format_unsigned),
}


def _render(fmt: str, args: Iterable[Any]) -> Iterator[tuple[str, int]]:
    """Yield each output piece with the amount it adds to the printed count."""
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch, 1
            continue
        spec = next(chars, None)
        if spec is None:
            return
        conversion = _CONVERSIONS.get(spec)
        if conversion is None:
            continue
        argument = None
        if conversion.takes_argument:
            try:
                argument = next(remaining)
            except StopIteration:
                raise ValueError(f"missing argument for %{spec}") from None
        yield conversion.render(argument), int(conversion.counted)


def format_string(fmt: str, *args: Any) -> str:
    """Return the text the format produces with the given arguments."""
    return "".join(text for text, _ in _render(fmt, args))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text and return the printed count.

    The count includes literal characters and the %c and %% conversions
    only; other conversions add nothing to it.
    """
    pieces = list(_render(fmt, args))
    out = sys.stdout if file is None else file
    out.write("".join(text for text, _ in pieces))
    return sum(count for _, count in pieces)