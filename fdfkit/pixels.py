"""Pixel colour helpers: hashing, greyscale conversion and byte packing."""

from __future__ import annotations

import struct

__all__ = ["fnv_hash", "rgba_to_mono", "pack_rgba"]

_FNV_PRIME = 0x100000001B3
_FNV_OFFSET = 0xCBF29CE484222325
_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


_RED_WEIGHT = _f32(0.299)
_GREEN_WEIGHT = _f32(0.587)
_BLUE_WEIGHT = _f32(0.114)


def fnv_hash(data: bytes | str) -> int:
    """Return the 64-bit FNV-1a hash of ``data``.

    Bytes of 128 and above are mixed in sign-extended, as signed characters are.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    value = _FNV_OFFSET
    for byte in data:
        if byte >= 0x80:
            byte = (byte - 0x100) & _MASK64
        value ^= byte
        value = (value * _FNV_PRIME) & _MASK64
    return value


def _check_color(color: int) -> int:
    if not 0 <= color <= _MASK32:
        raise ValueError(f"colour out of the 32-bit range: {color!r}")
    return color


def rgba_to_mono(color: int) -> int:
    """Convert a 0xRRGGBBAA colour to grey, keeping its alpha."""
    _check_color(color)
    red = int(_f32(_RED_WEIGHT * ((color >> 24) & 0xFF)))
    green = int(_f32(_GREEN_WEIGHT * ((color >> 16) & 0xFF)))
    blue = int(_f32(_BLUE_WEIGHT * ((color >> 8) & 0xFF)))
    grey = (red + green + blue) & 0xFF
    return grey << 24 | grey << 16 | grey << 8 | (color & 0xFF)


def pack_rgba(color: int) -> bytes:
    """Return the four bytes R, G, B, A of a 0xRRGGBBAA colour."""
    return _check_color(color).to_bytes(4, "big")