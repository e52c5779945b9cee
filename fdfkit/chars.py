"""ASCII character classification and case conversion."""

from __future__ import annotations

__all__ = [
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "to_lower",
    "to_upper",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: str | int) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _same_kind(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return _same_kind(c, code)


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return _same_kind(c, code)