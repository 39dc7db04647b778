"""Character classification and case mapping on integer character codes."""

from __future__ import annotations


def is_alpha(code: int) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(code: int) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= code <= ord("9")


def is_alnum(code: int) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(code) or is_alpha(code)


def is_ascii(code: int) -> bool:
    """True for codes 0 through 127."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= code <= 126


def to_lower(code: int) -> int:
    """Map an ASCII upper-case letter to lower case; other codes are unchanged."""
    if ord("A") <= code <= ord("Z"):
        return code + 32
    return code


def to_upper(code: int) -> int:
    """Map an ASCII lower-case letter to upper case; other codes are unchanged."""
    if ord("a") <= code <= ord("z"):
        return code - 32
    return code