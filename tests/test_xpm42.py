import io

import pytest

from fdfkit.errors import ErrorCode, MLXError
from fdfkit.pixels import pack_rgba, rgba_to_mono
from fdfkit.xpm42 import load_xpm42, parse_xpm42

SAMPLE = "!XPM42\n2 2 2 1 c\na #FF0000FF\nb #00FF00FF\nab\nba\n"


def _pixel(xpm, x, y):
    tex = xpm.texture
    offset = (y * tex.width + x) * 4
    return bytes(tex.pixels[offset:offset + 4])


def test_parse_colour_image():
    xpm = parse_xpm42(io.StringIO(SAMPLE))
    assert (xpm.texture.width, xpm.texture.height) == (2, 2)
    assert xpm.cpp == 1
    assert xpm.color_count == 2
    assert xpm.mode == "c"
    assert _pixel(xpm, 0, 0) == pack_rgba(0xFF0000FF)
    assert _pixel(xpm, 1, 0) == pack_rgba(0x00FF00FF)
    assert _pixel(xpm, 0, 1) == pack_rgba(0x00FF00FF)
    assert _pixel(xpm, 1, 1) == pack_rgba(0xFF0000FF)


def test_binary_stream_gives_same_pixels():
    text = parse_xpm42(io.StringIO(SAMPLE))
    binary = parse_xpm42(io.BytesIO(SAMPLE.encode()))
    assert text.texture.pixels == binary.texture.pixels


def test_multi_character_keys():
    source = "!XPM42\n2 1 2 2 c\n.X #11223344\nXX #AABBCCDD\nXX.X\n"
    xpm = parse_xpm42(io.StringIO(source))
    assert _pixel(xpm, 0, 0) == pack_rgba(0xAABBCCDD)
    assert _pixel(xpm, 1, 0) == pack_rgba(0x11223344)


def test_monochrome_mode_converts_colours():
    source = "!XPM42\n1 1 1 1 m\nw #FF8040C0\nw\n"
    xpm = parse_xpm42(io.StringIO(source))
    assert _pixel(xpm, 0, 0) == pack_rgba(rgba_to_mono(0xFF8040C0))
    r, g, b, a = _pixel(xpm, 0, 0)
    assert r == g == b
    assert a == 0xC0


def test_header_accepts_hex_values():
    source = "!XPM42\n0x2 1 1 1 c\na #01020304\naa\n"
    xpm = parse_xpm42(io.StringIO(source))
    assert xpm.texture.width == 2
    assert _pixel(xpm, 1, 0) == bytes([1, 2, 3, 4])


def test_unknown_key_is_transparent_black():
    source = "!XPM42\n2 1 1 1 c\na #FFFFFFFF\naz\n"
    xpm = parse_xpm42(io.StringIO(source))
    assert _pixel(xpm, 1, 0) == bytes(4)


def test_last_row_without_newline():
    xpm = parse_xpm42(io.StringIO(SAMPLE.rstrip("\n")))
    assert _pixel(xpm, 1, 1) == pack_rgba(0xFF0000FF)


@pytest.mark.parametrize(
    "source",
    [
        "XPM42\n1 1 1 1 c\na #FFFFFFFF\na\n",
        "!XPM42\n1 1 1 c\na #FFFFFFFF\na\n",
        "!XPM42\n1 1 1 1\na #FFFFFFFF\na\n",
        "!XPM42\n1 1 1 1 x\na #FFFFFFFF\na\n",
        "!XPM42\n1 1 1 11 c\n",
        "!XPM42\n40000 1 1 1 c\n",
        "!XPM42\n1 1 1 1 c\nab #FFFFFFFF\na\n",
        "!XPM42\n1 1 1 1 c\na FFFFFFFF\na\n",
        "!XPM42\n2 1 1 1 c\na #FFFFFFFF\na\n",
        "!XPM42\n1 2 1 1 c\na #FFFFFFFF\na\n",
        "!XPM42\n1 1 2 1 c\na #FFFFFFFF\n",
        "",
    ],
)
def test_malformed_input_is_rejected(source):
    with pytest.raises(MLXError) as info:
        parse_xpm42(io.StringIO(source))
    assert info.value.code is ErrorCode.INVXPM


def test_load_from_file(tmp_path):
    path = tmp_path / "picture.xpm42"
    path.write_text(SAMPLE)
    xpm = load_xpm42(path)
    assert _pixel(xpm, 0, 0) == pack_rgba(0xFF0000FF)


def test_load_rejects_wrong_extension(tmp_path):
    path = tmp_path / "picture.png"
    path.write_text(SAMPLE)
    with pytest.raises(MLXError) as info:
        load_xpm42(path)
    assert info.value.code is ErrorCode.INVEXT


def test_load_missing_file(tmp_path):
    with pytest.raises(MLXError) as info:
        load_xpm42(tmp_path / "absent.xpm42")
    assert info.value.code is ErrorCode.INVFILE


def test_load_corrupt_file(tmp_path):
    path = tmp_path / "broken.xpm42"
    path.write_text("!XPM42\nnonsense\n")
    with pytest.raises(MLXError) as info:
        load_xpm42(path)
    assert info.value.code is ErrorCode.INVXPM