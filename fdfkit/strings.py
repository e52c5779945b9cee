"""String helpers with the exact semantics the map parser relies on."""

from __future__ import annotations

from itertools import zip_longest

__all__ = ["atoi", "itoa", "split", "strtrim", "substr", "strnstr", "strncmp"]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Reduce an integer to the signed 32-bit range, wrapping on overflow."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read until the first non-digit. Text without digits gives 0.
    The result wraps like a 32-bit signed integer.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    result = int("".join(digits)) if digits else 0
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or beyond the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``n`` characters.

    Returns the index of the first match, or ``None`` when there is none.
    An empty needle matches at index 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, the end
    of a string counting as code 0; equal prefixes give 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for ca, cb in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if ca != cb:
            return ord(ca) - ord(cb)
    return 0