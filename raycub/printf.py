"""A small printf-style formatter supporting c, s, p, d, i, u, x, X, % and the space, + and # flags."""

from __future__ import annotations

import sys
from typing import Iterator

_DECIMAL = "0123456789"
_HEX_LOW = "0123456789abcdef"
_HEX_UP = "0123456789ABCDEF"
_LOW_HASH = "0x"
_UP_HASH = "0X"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = (1 << 64) - 1

# A flag character only counts as a flag when one of these specifiers follows it.
_FLAG_TARGETS = {" ": "di", "+": "di", "#": "xX"}


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _digits(value: int, base: str) -> str:
    size = len(base)
    out = []
    while True:
        value, remainder = divmod(value, size)
        out.append(base[remainder])
        if value == 0:
            break
    return "".join(reversed(out))


def format_number(n: int, space: bool, plus: bool) -> str:
    """Format a signed 32-bit integer, optionally prefixed by '+' or ' ' when not negative."""
    value = _to_int32(int(n))
    if value < 0:
        prefix = "-"
    elif plus:
        prefix = "+"
    elif space:
        prefix = " "
    else:
        prefix = ""
    return prefix + _digits(abs(value), _DECIMAL)


def format_base(value: int, spec: str) -> str:
    """Format value in hexadecimal for 'x' or 'X', in decimal for anything else."""
    if spec == "X":
        base = _HEX_UP
    elif spec == "x":
        base = _HEX_LOW
    else:
        base = _DECIMAL
    value = int(value)
    sign = "-" if value < 0 else ""
    return sign + _digits(abs(value), base)


def format_pointer(value: int | None) -> str:
    """Format an address as 0x followed by lower-case hex; a null address gives (nil)."""
    if not value:
        return "(nil)"
    return _LOW_HASH + _digits(int(value) & _POINTER_MASK, _HEX_LOW)


def _next_arg(values: Iterator[object]) -> object:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _format_char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, following: str, values: Iterator[object]) -> str:
    flag_applies = bool(following) and following in _FLAG_TARGETS.get(spec, "")
    if spec == "c":
        return _format_char(_next_arg(values))
    if spec == "s":
        text = _next_arg(values)
        return "(null)" if text is None else str(text)
    if spec == "p":
        return format_pointer(_next_arg(values))
    if spec == " " and flag_applies:
        return format_number(_next_arg(values), True, False)
    if spec == "+" and flag_applies:
        return format_number(_next_arg(values), False, True)
    if spec in "di":
        return format_number(_next_arg(values), False, False)
    if spec == "u":
        return format_base(int(_next_arg(values)) & _UINT_MASK, "u")
    if spec == "%":
        return "%"
    if spec in "xX":
        return format_base(int(_next_arg(values)) & _UINT_MASK, spec)
    if spec == "#" and flag_applies:
        number = int(_next_arg(values)) & _UINT_MASK
        prefix = "" if number == 0 else (_LOW_HASH if following == "x" else _UP_HASH)
        return prefix + format_base(number, following)
    return ""


def sprintf(fmt: str, *args: object) -> str:
    """Return fmt with its conversions replaced by the formatted arguments.

    An unknown conversion consumes its character and produces nothing; a
    lone '%' at the end of fmt is kept as is.
    """
    values = iter(args)
    out: list[str] = []
    pos = 0
    length = len(fmt)
    while pos < length:
        char = fmt[pos]
        if char == "%" and pos + 1 < length:
            spec = fmt[pos + 1]
            following = fmt[pos + 2] if pos + 2 < length else ""
            out.append(_convert(spec, following, values))
            pos += 2
            if following and following in _FLAG_TARGETS.get(spec, ""):
                pos += 1
        else:
            out.append(char)
            pos += 1
    return "".join(out)


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)