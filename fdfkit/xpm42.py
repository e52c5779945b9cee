"""Reading of XPM42 images: a small XPM2-like text format with RGBA colours."""

from __future__ import annotations

import io
import os
import re
from dataclasses import dataclass
from typing import IO, AnyStr

from fdfkit.errors import ErrorCode, MLXError
from fdfkit.image import BPP, MAX_DIMENSION
from fdfkit.pixels import fnv_hash, pack_rgba, rgba_to_mono
from fdfkit.texture import Texture

__all__ = ["Xpm42", "parse_xpm42", "load_xpm42", "MAGIC", "MAX_CPP"]

MAGIC = b"!XPM42\n"
MAX_CPP = 10
_HEADER_LIMIT = 63
_TABLE_SIZE = 65535
_MODES = (b"c", b"m")
_WHITESPACE = " \t\n\v\f\r"
_INT_FIELD = re.compile(r"[ \t\n\v\f\r]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


@dataclass
class Xpm42:
    """A decoded XPM42 image and the header values it was read with."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str


def _invalid(detail: str) -> MLXError:
    return MLXError(ErrorCode.INVXPM, detail)


def _parse_int(digits: str) -> int:
    """Read an integer the way a ``%i`` conversion does: hex, octal or decimal."""
    if digits[:2] in ("0x", "0X"):
        return int(digits[2:], 16)
    if digits.startswith("0") and len(digits) > 1:
        return int(digits[1:], 8)
    return int(digits, 10)


def _scan_header(line: bytes) -> tuple[list[int], str | None]:
    """Scan up to four integers and a mode character from the header line."""
    text = line.decode("latin-1")
    values: list[int] = []
    pos = 0
    while len(values) < 4:
        match = _INT_FIELD.match(text, pos)
        if match is None:
            return values, None
        value = _parse_int(match.group(2))
        values.append(-value if match.group(1) == "-" else value)
        pos = match.end()
    rest = text[pos:].lstrip(_WHITESPACE)
    return values, (rest[0] if rest else None)


def _parse_channel(pair: bytes) -> int:
    """Parse a two-character hexadecimal colour channel."""
    text = pair.split(b"\0", 1)[0].decode("latin-1").lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = _HEX_DIGITS.match(text).group()
    value = int(digits, 16) if digits else 0
    return (sign * value) & 0xFF


def _parse_entry(line: bytes, cpp: int, monochrome: bool) -> tuple[int, int]:
    """Return the table slot and colour of a colour-table line such as ``.X #00FF00FF``."""
    if line.rfind(b" ") != cpp:
        raise _invalid("colour key has the wrong length")
    if line[cpp + 1:cpp + 2] != b"#" or not line[cpp + 2:cpp + 3].isalnum():
        raise _invalid("malformed colour entry")
    padded = line + b"\0" * 10
    start = cpp + 2
    color = 0
    for shift, offset in zip((24, 16, 8, 0), range(start, start + 8, 2)):
        color |= _parse_channel(padded[offset:offset + 2]) << shift
    if monochrome:
        color = rgba_to_mono(color)
    return fnv_hash(line[:cpp]) % _TABLE_SIZE, color


def _read_line(buffer: io.BytesIO) -> bytes:
    line = buffer.readline()
    if not line:
        raise _invalid("unexpected end of file")
    return line


def parse_xpm42(stream: IO[AnyStr]) -> Xpm42:
    """Decode an XPM42 image from a text or binary stream.

    Raises ``MLXError`` with code ``INVXPM`` when the content is malformed.
    """
    data = stream.read()
    if isinstance(data, str):
        data = data.encode("utf-8")
    buffer = io.BytesIO(data)

    if buffer.readline(_HEADER_LIMIT) != MAGIC:
        raise _invalid("missing !XPM42 header")
    header = buffer.readline(_HEADER_LIMIT)
    if not header:
        raise _invalid("missing image information")
    values, mode = _scan_header(header)
    if len(values) < 4:
        raise _invalid("incomplete image information")
    width, height, color_count, cpp = values
    if not (0 <= width <= MAX_DIMENSION and 0 <= height <= MAX_DIMENSION):
        raise _invalid(f"dimensions out of range: {width}x{height}")
    if mode is None or mode.encode("latin-1") not in _MODES:
        raise _invalid(f"unknown colour mode: {mode!r}")
    if not 0 <= cpp <= MAX_CPP:
        raise _invalid(f"characters per pixel out of range: {cpp}")

    table: dict[int, int] = {}
    for _ in range(color_count):
        slot, color = _parse_entry(_read_line(buffer), cpp, mode == "m")
        table[slot] = color

    pixels = bytearray(width * height * BPP)
    for y in range(height):
        line = _read_line(buffer)
        if line.endswith(b"\n"):
            line = line[:-1]
        if len(line) != width * cpp:
            raise _invalid(f"pixel row {y} has the wrong length")
        for x in range(width):
            key = line[x * cpp:(x + 1) * cpp]
            color = table.get(fnv_hash(key) % _TABLE_SIZE, 0)
            offset = (y * width + x) * BPP
            pixels[offset:offset + BPP] = pack_rgba(color)

    texture = Texture(width=width, height=height, pixels=pixels, bytes_per_pixel=BPP)
    return Xpm42(texture=texture, color_count=color_count, cpp=cpp, mode=mode)


def load_xpm42(path: str | os.PathLike[str]) -> Xpm42:
    """Load the XPM42 image at ``path``; the name must contain ``.xpm42``."""
    name = os.fspath(path)
    if ".xpm42" not in name:
        raise MLXError(ErrorCode.INVEXT, name)
    try:
        stream = open(name, "rb")
    except OSError as exc:
        raise MLXError(ErrorCode.INVFILE, name) from exc
    with stream:
        return parse_xpm42(stream)