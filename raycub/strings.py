"""String helpers: splitting, searching, bounded copies, trimming and mapping."""

from __future__ import annotations

from typing import Callable

_NUL = "\0"


def _single_char(c: str, what: str = "character") -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single {what}, got {c!r}")
    return c


def split(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping empty pieces.

    A NUL separator never occurs inside a string, so the whole text is one
    word (or none when the text is empty).
    """
    _single_char(sep, "separator")
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def count_words(text: str, sep: str) -> int:
    """Count the runs of characters other than sep."""
    return len(split(text, sep))


def strchr(text: str, c: str) -> int | None:
    """Index of the first occurrence of c, or None.

    Searching for NUL finds the terminator position, the length of the text.
    """
    _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last occurrence of c, or None.

    Searching for NUL finds the terminator position, the length of the text.
    """
    _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of little within the first length characters of big, or None.

    An empty needle is found at index 0.
    """
    if not little:
        return 0
    if length <= 0:
        return None
    index = big[:length].find(little)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first unequal pair.

    The end of a string compares as a NUL character, so a proper prefix is
    smaller than the longer string.
    """
    if n <= 0:
        return 0
    for a, b in zip(first[:n] + _NUL, second[:n] + _NUL):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the full length of src, so a result length
    at or above size means the copy was truncated.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting text and the length the concatenation tried to
    create: len(src) + size when size is smaller than dst, otherwise
    len(dst) + len(src).
    """
    room = size - 1 - len(dst) if size > 0 else 0
    result = dst + src[: max(room, 0)]
    if size < len(dst):
        return result, len(src) + size
    return result, len(dst) + len(src)


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in chars from both ends of text."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start beyond the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text) or not text:
        return ""
    return text[start : start + length]


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def iter_indexed(text: str, func: Callable[[int, str], object]) -> None:
    """Call func(index, char) for each character of text, in order."""
    for index, char in enumerate(text):
        func(index, char)