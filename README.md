# wireframe

Building blocks for a height-map wireframe viewer. The package reads height-map
files, colours each vertex by its height, and keeps pixel images in memory. It
can also load XPM pixmaps into those images.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Map files

A map is a plain text file. Each line is one row of the grid, and the
space-separated integers on it are the heights of that row:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

The number of columns comes from the first line. Every other line must have
the same number of values, or `ValueError` is raised.

## Modules

### `wireframe.mapfile`

- `read_map(path)` reads a file and returns a `HeightMap`.
  `parse_map(lines)` builds one from an iterable of lines.
- `HeightMap` has `width`, `rows` and `height`. `at(x, y)` returns the height
  at column `x`, row `y`, and raises `IndexError` outside the grid.
- `read_lines(stream)` yields the lines of a text stream without their
  newlines.
- `parse_int(text)` is a lenient integer parser. It skips leading blanks,
  accepts one optional sign, and reads digits up to the first other
  character. It returns 0 when there are no digits, and the result wraps to a
  signed 32-bit value.
- `split_words(text, sep)` and `count_words(text, sep)` give the non-empty
  pieces of `text` between `sep` characters.

### `wireframe.color`

`get_color(z)` returns the 0xRRGGBB colour of a vertex at height `z`. Height 0
is yellow (`0xFFFF00`). Any other height starts from green, and the red channel
is offset by `-z * 20`, capped at 255. For positive heights that offset is
negative, so the value returned can be negative.

### `wireframe.mlx.image`

- `new_image(width, height, bpp=32, endian=0)` makes a zero-filled `Image`.
  Each line is padded to 32 bits. Bits per pixel may be 8, 16, 24 or 32, and
  endian is 0 for little and 1 for big.
- `Image.put_pixel(x, y, color)`, `Image.get_pixel(x, y)` and
  `Image.pixel_offset(x, y)` give access to the packed `data` buffer.
- `images_match(first, second)` tells whether two images share size and
  layout.
- `rgb_shifts(red_mask, green_mask, blue_mask)` and
  `get_good_color(color, depth, shifts)` turn 0xRRGGBB into a pixel value for
  displays shallower than 24 bits. At 24 bits or more the colour is returned
  unchanged.

### `wireframe.mlx.xpm`

- `xpm_file_to_image(path)` reads an XPM file. `xpm_to_image(data)` takes its
  strings directly. `parse_xpm(lines)` does the work for both.
- Colours may be given as `#rrggbb` or by name. Unknown names give black. A
  colour of `none` is stored as `TRANSPARENT` (`0xFF000000`).
- The helpers `strip_comments`, `quoted_lines`, `text_to_rgb` and `color_key`
  are available as well.

### `wireframe.mlx.colornames`

`lookup(name)` returns the value of a named X11 colour. Matching ignores ASCII
case. `"none"` gives -1, and an unknown name raises `KeyError`.

### `wireframe.mlx.words`

- `str_to_wordtab(text)` splits on spaces and tabs.
- `find(text, needle, limit)` and `find_outside_quotes(text, needle, limit)`
  search for substrings. They return -1 when the substring is not found.

## What it does not do

The package has no command to run and opens no window. It does not project,
rotate or draw the wireframe, and it has no keyboard controls or event loop.
It provides the map reading, the height colouring and the image and XPM
support on which such a viewer would be built.