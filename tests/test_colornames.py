import pytest

from raycube.colornames import lookup_color, text_to_rgb


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("navy", 0x80),
        ("deepskyblue4", 0x688B),
        ("gray50", 0x7F7F7F),
        ("grey100", 0xFFFFFF),
        ("lightgreen", 0x90EE90),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_is_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_first_entry_wins_for_duplicate_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1
    assert text_to_rgb("None", None) == -1


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    assert gray == lookup_color(f"grey{level}")
    red, green, blue = gray >> 16, (gray >> 8) & 0xFF, gray & 0xFF
    assert red == green == blue


def test_gray_levels_increase():
    levels = [lookup_color(f"gray{n}") for n in range(101)]
    assert levels == sorted(levels)
    assert levels[0] == lookup_color("black")
    assert levels[-1] == lookup_color("white")


@pytest.mark.parametrize("base", ["snow", "red", "azure", "cyan", "magenta"])
def test_first_shade_matches_plain_name(base):
    assert lookup_color(f"{base}1") == lookup_color(base)


def test_hex_spec():
    assert text_to_rgb("#FF0000", None) == 0xFF0000
    assert text_to_rgb("#00ff00", "ignored") == 0xFF00


def test_hex_spec_stops_at_non_hex():
    assert text_to_rgb("#12zz", None) == 0x12
    assert text_to_rgb("#zz", None) == 0


def test_hex_spec_accepts_prefix_and_sign():
    assert text_to_rgb("#0x1f", None) == 0x1F
    assert text_to_rgb("#-1", None) == -1


def test_name_with_suffix_is_joined_by_space():
    assert text_to_rgb("light", "blue") == lookup_color("light blue")
    assert text_to_rgb("ghost", "WHITE") == 0xF8F8FF


def test_name_without_suffix():
    assert text_to_rgb("tomato", None) == lookup_color("tomato")
    assert text_to_rgb("Tomato") == lookup_color("tomato")


def test_unknown_name_gives_zero():
    assert text_to_rgb("unknown", None) == 0
    assert text_to_rgb("light", "unknown") == 0


def test_overlong_spec_is_truncated():
    assert text_to_rgb("x" * 40, "y" * 40) == 0
    assert text_to_rgb("red", "  " + "z" * 80) == 0