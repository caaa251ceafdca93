"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACE_CODES = frozenset(b"\t\n\v\f\r ")
_INT_BITS = 32


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_space(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return (_code(c) & 0xFF) in _SPACE_CODES


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def _wrap_int(value: int) -> int:
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def atoi(text: str | None) -> int:
    """Parse a leading decimal integer the way the classic C routine does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits gives 0, as does None.
    The result wraps to a 32-bit signed integer.
    """
    if text is None:
        return 0
    pos = 0
    length = len(text)
    while pos < length and (text[pos] == " " or 9 <= ord(text[pos]) <= 13):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    if not digits:
        return 0
    return _wrap_int(int(digits) * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)