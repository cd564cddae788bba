import pytest

from solong.colors import lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("navy", 0x80),
        ("purple", 0xA020F0),
        ("gray50", 0x7F7F7F),
    ],
)
def test_values_from_table(name, value):
    assert lookup_color(name) == value


def test_none_is_transparent():
    assert lookup_color("none") == -1


@pytest.mark.parametrize("name", ["RED", "Red", "rEd"])
def test_lookup_ignores_case(name):
    assert lookup_color(name) == lookup_color("red")


def test_ghost_white_with_space_matches_compact_form():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")


def test_duplicate_names_resolve_to_first_entry():
    assert lookup_color("dark slate") == lookup_color("darkslategray")
    assert lookup_color("light slate") == lookup_color("lightslategray")
    assert lookup_color("light goldenrod") == lookup_color("lightgoldenrodyellow")


@pytest.mark.parametrize("level", [0, 1, 25, 50, 99, 100])
def test_gray_and_grey_spellings_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_scale_is_monotonic():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


def test_numbered_variant_one_matches_base_for_red():
    assert lookup_color("red1") == lookup_color("red")


@pytest.mark.parametrize("name", ["", "not-a-colour", "#ff0000", "reddish"])
def test_unknown_names_raise(name):
    with pytest.raises(KeyError):
        lookup_color(name)