import pytest

from fildefer.colors import color_by_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("light green", 0x90EE90),
    ],
)
def test_known_colours(name, expected):
    assert color_by_name(name) == expected


def test_none_is_transparent():
    assert color_by_name("none") == -1


@pytest.mark.parametrize("name", ["SNOW", "Snow", "sNoW", "Light Green"])
def test_lookup_ignores_case(name):
    assert color_by_name(name) == color_by_name(name.lower())


def test_first_duplicate_wins():
    # "dark slate" appears several times; the first entry is used.
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(0, 101))
def test_gray_and_grey_agree(level):
    assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


def test_gray_ramp_is_monotonic():
    values = [color_by_name(f"gray{level}") for level in range(0, 101)]
    assert values == sorted(values)
    assert values[0] == color_by_name("black")
    assert values[-1] == color_by_name("white")


@pytest.mark.parametrize(
    ("spaced", "joined"),
    [
        ("ghost white", "ghostwhite"),
        ("midnight blue", "midnightblue"),
        ("dark red", "darkred"),
        ("hot pink", "hotpink"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert color_by_name(spaced) == color_by_name(joined)


@pytest.mark.parametrize("name", ["", "not a colour", "gray101", "whitee"])
def test_unknown_name_raises(name):
    with pytest.raises(KeyError):
        color_by_name(name)


@pytest.mark.parametrize(
    "name", ["snow", "thistle4", "gray100", "darkcyan", "seashell1"]
)
def test_values_fit_in_24_bits(name):
    assert 0 <= color_by_name(name) <= 0xFFFFFF