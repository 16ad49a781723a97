import pytest

from wireframe.mlx.image import images_match, new_image
from wireframe.mlx.xpm import (
    color_key,
    parse_xpm,
    quoted_lines,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = ["3 2 3 1", "r c red", "g c #00FF00", ". c None", "rg.", ".gr"]

SAMPLE_FILE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"r c red", // the red one
"g c #00FF00",
". c None",
"rg.",
".gr"
};
"""


def _check_sample(image):
    assert image.width == 3 and image.height == 2
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0x00FF00
    assert image.get_pixel(2, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(2, 1) == 0xFF0000


def test_strip_comments_keeps_length_and_quotes():
    text = '/* a */"x // y"// tail\n"z"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result and "tail" not in result
    assert list(quoted_lines(result)) == ["x // y", "z"]


def test_strip_comments_without_comments():
    text = '"a b" "c"'
    assert strip_comments(text) == text


def test_strip_unterminated_comment():
    text = '"a" /* open'
    assert strip_comments(text).rstrip() == '"a"'


def test_quoted_lines_ignores_unclosed_quote():
    assert list(quoted_lines('a "one" b "two" "unclosed')) == ["one", "two"]


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff8000", None) == 0xFF8000


def test_text_to_rgb_names():
    assert text_to_rgb("Light", "Blue") == 0xADD8E6
    assert text_to_rgb("RED", None) == 0xFF0000
    assert text_to_rgb("none", None) == -1


def test_text_to_rgb_unknown_name():
    assert text_to_rgb("red", "s") == 0
    assert text_to_rgb("nosuchcolour", None) == 0


def test_color_key_uses_prefix_only():
    assert color_key("abX", 2) == color_key("ab", 2)
    assert color_key("ab", 2) != color_key("ba", 2)


def test_color_key_too_short():
    with pytest.raises(ValueError):
        color_key("a", 2)


def test_parse_sample():
    _check_sample(parse_xpm(SAMPLE))


def test_xpm_to_image_layout():
    image = xpm_to_image(SAMPLE)
    assert images_match(image, new_image(3, 2))
    _check_sample(image)


def test_xpm_file_to_image(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_FILE, encoding="latin-1")
    _check_sample(xpm_file_to_image(path))


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.get_pixel(0, 0) == 0xFF


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert image.get_pixel(0, 0) == 0xFF0000


def test_undefined_key_is_black():
    image = parse_xpm(["2 1 1 1", "a c red", "ab"])
    assert image.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c"],
        ["2 2 1 1", "a c red", "aa"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_invalid_xpm(lines):
    with pytest.raises(ValueError):
        parse_xpm(lines)


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "absent.xpm")