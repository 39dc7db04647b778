"""String helpers used by the map parser: splitting, trimming, bounded search and copy."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_WHITESPACE = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Read an optionally signed decimal integer after leading whitespace.

    Parsing stops at the first character that is not a digit; text with no
    digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start beyond the end of the text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def find_bounded(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly inside the first ``limit`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    if limit <= 0:
        return None
    index = haystack.find(needle, 0, limit)
    return None if index == -1 else index


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters, the end of a string counting as code 0.

    Returns the difference of the first pair of differing character codes,
    or 0 when the compared parts are equal.
    """
    pairs = zip_longest(first, second, fillvalue="\0")
    for a, b in islice(pairs, max(count, 0)):
        if a != b:
            return ord(a) - ord(b)
    return 0


def find_char(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``; the terminator ``"\\0"`` maps to ``len(text)``."""
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index == -1 else index


def rfind_char(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``; the terminator ``"\\0"`` maps to ``len(text)``."""
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index == -1 else index


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def copy_bounded(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    if size <= 0:
        return "", len(src)
    return src[:size - 1], len(src)


def concat_bounded(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had,
    counting ``dst`` as at most ``size`` characters.
    """
    held = min(len(dst), max(size, 0))
    if held < size:
        room = size - held - 1
        return dst + src[:room], held + len(src)
    return dst, held + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def for_each_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` for each element, storing any non-None result in place."""
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement