import pytest

from kgx.rgba import Rgba, parse_hex_rgba


def test_white():
    assert parse_hex_rgba("FFFFFF") == Rgba(1.0, 1.0, 1.0, 1.0)


def test_black():
    assert parse_hex_rgba("000000") == Rgba(0.0, 0.0, 0.0, 1.0)


def test_primary_colours():
    assert parse_hex_rgba("FF0000") == Rgba(1.0, 0.0, 0.0, 1.0)
    assert parse_hex_rgba("0000FF") == Rgba(0.0, 0.0, 1.0, 1.0)


@pytest.mark.parametrize("value", ["613583", "a51d2d", "26a269", "deddda", "3d3846"])
def test_six_digit_round_trip(value):
    colour = parse_hex_rgba(value)
    channels = [round(c * 255) for c in (colour.red, colour.green, colour.blue)]
    assert channels == [int(value[i:i + 2], 16) for i in (0, 2, 4)]
    assert colour.alpha == 1.0


def test_eight_digit_alpha():
    colour = parse_hex_rgba("12345680")
    assert round(colour.alpha * 255) == 0x80
    assert round(colour.red * 255) == 0x12


def test_short_forms_double_each_digit():
    assert parse_hex_rgba("abc") == parse_hex_rgba("aabbcc")
    assert parse_hex_rgba("abcd") == parse_hex_rgba("aabbccdd")


def test_case_insensitive():
    assert parse_hex_rgba("ABCDEF") == parse_hex_rgba("abcdef")


@pytest.mark.parametrize("value", ["", "F", "FF", "FFFFF", "FFFFFFF", "FFFFFFFFF"])
def test_other_lengths_are_transparent(value):
    assert parse_hex_rgba(value) == Rgba(0.0, 0.0, 0.0, 0.0)


@pytest.mark.parametrize("value", ["GG0000", "xyz", "12 456"])
def test_invalid_digits(value):
    with pytest.raises(ValueError):
        parse_hex_rgba(value)


def test_channels_within_range():
    colour = parse_hex_rgba("7f80ff00")
    for channel in (colour.red, colour.green, colour.blue, colour.alpha):
        assert 0.0 <= channel <= 1.0