# fdfkit

fdfkit is a small toolkit for the data side of drawing wireframe height maps:

- reading `.fdf` height maps, a grid of space-separated integers, one row per line;
- rasterising straight segments between grid points;
- keeping RGBA images in memory, with their placements and depth ordering;
- loading images in the XPM42 text format.

It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Height maps

```python
from fdfkit.heightmap import load_map, parse_map

grid = parse_map(["0 0 0", "0 10 0", "0 0 0"])
grid.width, grid.height      # (3, 3)
grid.points[1][1]            # Point(x=1, y=1, z=10)
for point in grid:           # every point, row by row
    ...
```

`load_map(path)` reads and parses a file. The result is a `HeightMap` with `width`, `height` and `points`, a list of rows of `Point(x, y, z)` values. The number of values on the first line sets the width. Later rows may hold more values, which are ignored. A row that holds fewer raises `ValueError`.

Each height is read with `fdfkit.strings.atoi`. Leading whitespace and one sign are accepted, digits are read up to the first non-digit, text without digits counts as 0, and the result wraps to the signed 32-bit range.

## Lines

```python
from fdfkit.line import line_points

line_points(0, 0, 4, 2)
# [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)]
```

`line_points(x, y, x_end, y_end)` steps one unit at a time along the longer axis and keeps an integer error term for the shorter one. It returns `max(|dx|, |dy|) + 1` points, and both ends are included.

## Images and scenes

```python
from fdfkit.image import Scene

scene = Scene()
img = scene.new_image(200, 200)
img.put_pixel(10, 10, 0xFF0000FF)
img.get_pixel(10, 10)                  # 0xFF0000FF
index = scene.image_to_window(img, 100, 100)
for image, instance in scene.render_order():
    ...
scene.delete_image(img)
```

Colours are `0xRRGGBBAA` integers. An `Image` stores them as R, G, B, A bytes in `pixels`.

- `Image.resize(width, height)` rescales with nearest-neighbour sampling.
- `Scene.image_to_window` adds an `Instance(x, y, z, enabled)` to the image. Each new instance gets the scene's next depth value.
- `Scene.set_instance_depth` changes the depth of an instance.
- `Scene.render_order()` returns `(image, instance)` pairs from back to front. It leaves out disabled images and disabled instances.

Sizes must be between 1 and 32767 in each dimension. A pixel outside the image is also refused. Both cases raise `fdfkit.errors.MLXError`. Its `code` is an `ErrorCode`, and `strerror(code)` gives the description of a code.

`fdfkit.pixels` has the colour helpers:

- `pack_rgba(color)` returns the four bytes of a colour.
- `rgba_to_mono(color)` converts a colour to grey and keeps its alpha.
- `fnv_hash(data)` is a 64-bit FNV-1a hash.

## XPM42 images and textures

```python
from fdfkit.xpm42 import load_xpm42
from fdfkit.texture import texture_to_image

xpm = load_xpm42("sprite.xpm42")
image = texture_to_image(scene, xpm.texture)
```

An XPM42 file has four parts, in this order:

1. The line `!XPM42`.
2. A header line: `width height colours chars-per-pixel mode`. The mode is `c` for colour or `m` for monochrome, and chars-per-pixel is at most 10.
3. One colour-table line per colour, for example `.X #00FF00FF`.
4. `height` pixel rows, each `width * chars-per-pixel` characters long.

`parse_xpm42(stream)` decodes from a text or binary stream. `load_xpm42(path)` requires `.xpm42` in the file name. Malformed content raises `MLXError` with code `INVXPM`. A wrong name raises `INVEXT`, and a file that cannot be opened raises `INVFILE`.

A `Texture` holds raw pixels outside any scene. `texture_to_image` copies a 4-bytes-per-pixel texture into a new image of the scene. `glyph_offset(char)` gives the x offset of a printable ASCII character in a font atlas laid out in 12-pixel cells, or -1 for any other character.

## String and character helpers

- `fdfkit.strings`: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`.
- `fdfkit.chars`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_lower`, `to_upper`. Each accepts a one-character string or an integer code.

## What it does not do

fdfkit keeps everything in memory:

- It opens no window and draws nothing to a display. `render_order()` only gives the order in which instances would be drawn.
- It does not decode PNG files.
- It has no command-line program.