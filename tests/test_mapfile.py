import io

import pytest

from wireframe.mapfile import (
    HeightMap,
    count_words,
    parse_int,
    parse_map,
    read_lines,
    read_map,
    split_words,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42", -42),
        ("+7abc", 7),
        ("\t\n\v12", 12),
        ("10,0xFF", 10),
        ("5\r", 5),
        ("abc", 0),
        ("", 0),
        ("- 5", 0),
        ("--5", 0),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_parse_int_wraps_to_32_bits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("2147483648") == -2147483648


def test_split_and_count_words_ignore_repeated_separators():
    text = "  1  2 3   "
    assert split_words(text, " ") == ["1", "2", "3"]
    assert count_words(text, " ") == len(split_words(text, " "))


def test_count_words_of_empty_text():
    assert count_words("", " ") == 0
    assert split_words("   ", " ") == []


def test_split_only_on_given_separator():
    assert split_words("1\t2 3", " ") == ["1\t2", "3"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a\n\nb", ["a", "", "b"]),
        ("a\n", ["a"]),
        ("a\n\n", ["a", ""]),
        ("", []),
        ("a\r\nb", ["a\r", "b"]),
    ],
)
def test_read_lines(text, expected):
    assert list(read_lines(io.StringIO(text))) == expected


def test_read_lines_long_content_round_trips():
    lines = [" ".join(str(n) for n in range(row, row + 900)) for row in range(12)]
    text = "\n".join(lines) + "\n"
    assert list(read_lines(io.StringIO(text))) == lines


def test_parse_map_values_and_size():
    heights = parse_map(["0 1 2", "3 4 5"])
    assert heights.width == 3
    assert heights.height == 2
    assert heights.at(2, 1) == 5
    assert heights.at(0, 0) == 0
    assert heights.rows == ((0, 1, 2), (3, 4, 5))


def test_parse_map_truncates_float_coordinates():
    heights = parse_map(["0 1", "2 3"])
    assert heights.at(1.7, 0.2) == heights.at(1, 0)


def test_parse_map_empty():
    heights = parse_map([])
    assert heights == HeightMap(width=0, rows=())


def test_parse_map_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_map(["1 2 3", "4 5"])


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_at_out_of_range(x, y):
    heights = parse_map(["0 1 2", "3 4 5"])
    with pytest.raises(IndexError):
        heights.at(x, y)


def test_read_map_from_file(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("0 0 0\n0 10 0\n0 0 -3\n", encoding="latin-1")
    heights = read_map(path)
    assert heights.width == 3
    assert heights.height == 3
    assert heights.at(1, 1) == 10
    assert heights.at(2, 2) == -3


def test_read_map_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_map(tmp_path / "absent.fdf")