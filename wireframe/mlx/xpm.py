"""Reading XPM pixmaps into images."""

import re

from wireframe.mapfile import parse_int
from wireframe.mlx.colornames import lookup
from wireframe.mlx.image import new_image
from wireframe.mlx.words import find, find_outside_quotes, str_to_wordtab

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]*)")


def _blank(text, start, stop):
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text):
    """Replace C style comments outside quotes with spaces.

    The text keeps its length. A line comment takes its newline with it;
    an unterminated comment runs to the end of the text.
    """
    while (start := find_outside_quotes(text, "/*", len(text))) != -1:
        end = find(text[start + 2:], "*/", len(text) - start - 2)
        stop = len(text) if end == -1 else start + end + 4
        text = _blank(text, start, stop)
    while (start := find_outside_quotes(text, "//", len(text))) != -1:
        end = find(text[start + 2:], "\n", len(text) - start - 2)
        stop = len(text) if end == -1 else start + end + 3
        text = _blank(text, start, stop)
    return text


def quoted_lines(text):
    """Yield each string found between successive pairs of double quotes."""
    pos = 0
    while (opening := text.find('"', pos)) != -1:
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _signed32(value):
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def text_to_rgb(name, extra):
    """Return the colour for an XPM colour spec.

    ``#`` introduces hexadecimal digits; anything else is a colour name,
    joined with ``extra`` by a space when given. Unknown names give 0 and
    "none" gives -1.
    """
    if name.startswith("#"):
        sign, digits = _HEX_PREFIX.match(name, 1).groups()
        value = int(digits, 16) if digits else 0
        return _signed32(-value if sign == "-" else value)
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    try:
        return lookup(name)
    except KeyError:
        return 0


def color_key(text, cpp):
    """Return the numeric key of the first ``cpp`` characters of ``text``."""
    if len(text) < cpp:
        raise ValueError(f"expected {cpp} characters per pixel, got {text!r}")
    key = 0
    for char in text[:cpp]:
        key = (key << 8) + ord(char)
    return key


def _next_line(rows, what):
    line = next(rows, None)
    if line is None:
        raise ValueError(f"XPM data ends before the {what}")
    return line


def _read_header(rows):
    fields = str_to_wordtab(_next_line(rows, "header"))
    if len(fields) < 4:
        raise ValueError("XPM header needs width, height, colours and chars per pixel")
    values = [parse_int(field) for field in fields[:4]]
    if any(value <= 0 for value in values):
        raise ValueError(f"invalid XPM header values: {values}")
    return values


def _read_palette(rows, ncolors, cpp):
    palette = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definition")
        words = str_to_wordtab(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise ValueError(f"colour definition without 'c': {line!r}") from None
        if index + 1 >= len(words):
            raise ValueError(f"colour definition without a colour: {line!r}")
        extra = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], extra)
        key = color_key(line, cpp)
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)
    return palette


def parse_xpm(lines):
    """Build an image from the strings of an XPM: header, colours, pixel rows.

    Pixels whose key has no colour are black; transparent ones are stored
    as 0xFF000000.
    """
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(rows)
    palette = _read_palette(rows, ncolors, cpp)
    image = new_image(width, height)
    for y in range(height):
        line = _next_line(rows, "pixel rows")
        for x in range(width):
            color = palette.get(color_key(line[cpp * x:], cpp), 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(data):
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(data)


def xpm_file_to_image(path):
    """Read an XPM file and build an image from it."""
    with open(path, encoding="latin-1", newline="") as stream:
        text = stream.read()
    return parse_xpm(quoted_lines(strip_comments(text)))