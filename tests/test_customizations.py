import pytest

from xpd.customizations import Color, Customizations, InvalidLengthError


def test_color_str_is_uppercase_hex():
    assert str(Color(255, 255, 255)) == "#FFFFFF"
    assert str(Color(0, 0, 0)) == "#000000"


def test_from_hex_parses_channels():
    color = Color.from_hex("#8fca5c")
    assert color == Color(143, 202, 92)


def test_from_hex_without_hash():
    assert Color.from_hex("854F2B") == Color(133, 79, 43)


def test_from_hex_strips_repeated_hashes():
    assert Color.from_hex("##000000") == Color(0, 0, 0)


@pytest.mark.parametrize(
    "color", [Color(0, 0, 0), Color(255, 255, 255), Color(97, 55, 31), Color(251, 72, 196)]
)
def test_color_round_trip(color):
    assert Color.from_hex(str(color)) == color


@pytest.mark.parametrize("value", ["#fff", "", "#1234567", "12345"])
def test_from_hex_wrong_length(value):
    with pytest.raises(InvalidLengthError):
        Color.from_hex(value)


def test_from_hex_invalid_digits():
    with pytest.raises(ValueError):
        Color.from_hex("#zz0000")


def test_from_hex_accepts_non_string():
    assert Color.from_hex(123456) == Color.from_hex("123456")


def test_color_channel_range_checked():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_default_card_and_font():
    default = Customizations()
    assert default.card == "classic.svg"
    assert default.font == "Mojang"
    assert default.toy is None
    assert default.level == Color(143, 202, 92)


def test_vertical_default_values():
    vertical = Customizations.vertical_default()
    assert vertical.card == "vertical.svg"
    assert vertical.font == "Roboto"
    assert vertical.progress_background == Color(199, 58, 157)


def test_default_for_card():
    assert Customizations.default_for_card("vertical.svg") == Customizations.vertical_default()
    assert Customizations.default_for_card("classic.svg") == Customizations()
    assert Customizations.default_for_card("anything-else.svg") == Customizations()


def test_default_customizations_follow_card():
    custom = Customizations(card="vertical.svg", font="Mojang")
    assert custom.default_customizations() == Customizations.vertical_default()


def test_to_dict_serializes_colors_as_strings():
    data = Customizations().to_dict()
    assert data["username"] == "#FFFFFF"
    assert data["card"] == "classic.svg"
    assert data["toy"] is None
    assert Color.from_hex(data["border"]) == Customizations().border


def test_str_all_default():
    text = str(Customizations())
    lines = text.splitlines()
    assert text.endswith("\n")
    assert lines[0] == "Important text: `#FFFFFF` (default)"
    assert "Toy: `None`" in lines
    assert lines[-1] == "Card: `classic.svg` (default)"
    assert sum(line.endswith("(default)") for line in lines) == len(lines) - 1


def test_str_marks_changed_values():
    custom = Customizations(border=Color(1, 2, 3), toy="bee.png", font="Roboto")
    lines = str(custom).splitlines()
    assert f"Border: `{Color(1, 2, 3)}`" in lines
    assert "Font: `Roboto`" in lines
    assert "Toy: `bee.png`" in lines


def test_str_vertical_compares_with_vertical_defaults():
    lines = str(Customizations.vertical_default()).splitlines()
    assert "Font: `Roboto` (default)" in lines
    assert "Card: `vertical.svg` (default)" in lines