import pytest

from wireframe.mlx.colornames import lookup


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup(name) == expected


def test_none_is_transparent_marker():
    assert lookup("none") == -1


@pytest.mark.parametrize("name", ["SNOW", "Snow", "GhostWhite", "Dark Red", "NONE"])
def test_case_insensitive(name):
    assert lookup(name) == lookup(name.lower())


def test_duplicate_name_takes_first_entry():
    assert lookup("dark slate") == 0x2F4F4F
    assert lookup("light slate") == 0x778899
    assert lookup("light goldenrod") == 0xFAFAD2


def test_spaced_and_joined_names_agree():
    for spaced in ["ghost white", "misty rose", "deep pink", "dodger blue", "dark orange"]:
        assert lookup(spaced) == lookup(spaced.replace(" ", ""))


def test_gray_and_grey_agree():
    for level in range(101):
        assert lookup(f"gray{level}") == lookup(f"grey{level}")


def test_gray_levels_increase():
    values = [lookup(f"gray{level}") for level in range(101)]
    assert values[0] == lookup("black")
    assert values[-1] == lookup("white")
    assert values == sorted(values)


def test_numbered_variant_one_matches_base():
    for base in ["snow", "red", "green", "yellow", "magenta", "orange"]:
        assert lookup(f"{base}1") == lookup(base)


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup("not a colour")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        lookup("")


def test_non_ascii_case_is_not_folded():
    with pytest.raises(KeyError):
        lookup("\u212aHAKI")