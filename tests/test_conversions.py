import pytest

from osmsieve.conversions import cost_to_int, parse_hex_color


@pytest.mark.parametrize("text", ["#FF0000", "#ff0000", "red", "RED", "#f00"])
def test_red_variants(text):
    assert parse_hex_color(text) == 0x00FF0000


def test_named_black_is_zero():
    assert parse_hex_color("black") == 0x00000000


def test_short_form_matches_long_form():
    assert parse_hex_color("#0a9") == parse_hex_color("#00AA99")


def test_long_form_round_trip():
    for value in (0x00C0C0C0, 0x00800080, 0x0000FFFF, 0x00123456):
        assert parse_hex_color(f"#{value:06x}") == value


@pytest.mark.parametrize("text", ["#GG0000", "#12345Z", "#XYZ", "#1 2"])
def test_invalid_hex_gives_no_color(text):
    assert parse_hex_color(text) is None


@pytest.mark.parametrize("text", ["nonsense", "#12345", ""])
def test_unrecognised_gives_zero(text):
    assert parse_hex_color(text) == 0


def test_named_colors_match_hex():
    assert parse_hex_color("teal") == parse_hex_color("#008080")
    assert parse_hex_color("fuchsia") == parse_hex_color("#FF00FF")


@pytest.mark.parametrize("c", [0.0, 0.05, 1.0, 3.14159, 12.34, 1000.01])
def test_cost_rounds_upwards(c):
    result = cost_to_int(c)
    assert result >= c * 10
    assert result < c * 10 + 1


def test_cost_whole_tenths():
    assert cost_to_int(2.5) == 25


def test_cost_capped_at_uint32_max():
    assert cost_to_int(1e12) == 0xFFFFFFFF
    assert cost_to_int(float("inf")) == 0xFFFFFFFF


def test_cost_nan_raises():
    with pytest.raises(ValueError):
        cost_to_int(float("nan"))