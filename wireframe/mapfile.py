"""Reading height maps: rows of space separated integers."""

import re
from dataclasses import dataclass

_CHUNK_SIZE = 4096
_INT_PATTERN = re.compile(r"[\t-\x13 ]*([+-]?)([0-9]*)")


def parse_int(text):
    """Parse a leading integer the way a lenient ``atoi`` does.

    Leading blanks (space and characters 9 to 19) are skipped, one optional
    sign is read, then decimal digits up to the first other character.
    Text without digits gives 0. The result wraps to a signed 32-bit value.
    """
    match = _INT_PATTERN.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def split_words(text, sep):
    """Return the non-empty pieces of ``text`` between ``sep`` characters."""
    return [word for word in text.split(sep) if word]


def count_words(text, sep):
    """Return how many non-empty pieces ``text`` has between ``sep`` characters."""
    return len(split_words(text, sep))


def read_lines(stream):
    """Yield the lines of a text stream without their newlines.

    A final piece after the last newline is yielded only when it is not
    empty. Carriage returns are kept.
    """
    pending = ""
    while chunk := stream.read(_CHUNK_SIZE):
        pending += chunk
        *complete, pending = pending.split("\n")
        yield from complete
    if pending:
        yield pending


@dataclass(frozen=True)
class HeightMap:
    """A grid of heights; ``rows[y][x]`` is the height at column x, row y."""

    width: int
    rows: tuple

    @property
    def height(self):
        return len(self.rows)

    def at(self, x, y):
        """Return the height at column ``x``, row ``y``."""
        col, row = int(x), int(y)
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"({col}, {row}) lies outside a {self.width}x{self.height} map")
        return self.rows[row][col]


def parse_map(lines):
    """Build a HeightMap from lines of space separated integers.

    The width is the number of words on the first line; every other line
    must hold the same number of words.
    """
    rows = []
    width = 0
    for number, line in enumerate(lines, start=1):
        words = split_words(line, " ")
        if number == 1:
            width = len(words)
        elif len(words) != width:
            raise ValueError(f"line {number} has {len(words)} values, expected {width}")
        rows.append(tuple(parse_int(word) for word in words))
    return HeightMap(width=width, rows=tuple(rows))


def read_map(path):
    """Read a height map from the file at ``path``."""
    with open(path, encoding="latin-1", newline="") as stream:
        return parse_map(read_lines(stream))