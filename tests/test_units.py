import pytest

from palletizr_core.units import fit_count, format_float, parse_float, parse_int


def test_parse_float_accepts_comma():
    assert parse_float("12,5") == 12.5


def test_parse_float_strips_whitespace():
    assert parse_float("  10.0 ") == 10.0


def test_parse_float_accepts_numbers():
    assert parse_float(7) == 7.0
    assert parse_float(14.5) == 14.5


def test_parse_float_rejects_empty():
    with pytest.raises(ValueError):
        parse_float("")


@pytest.mark.parametrize("value", ["abc", "nan", "inf", True])
def test_parse_float_rejects_non_numbers(value):
    with pytest.raises(ValueError):
        parse_float(value)


def test_parse_int_accepts_integral_floats():
    assert parse_int("200") == 200
    assert parse_int("12.0") == 12


def test_parse_int_rejects_fractions():
    with pytest.raises(ValueError):
        parse_int("12.5")


def test_fit_count_tolerates_float_noise():
    assert fit_count(0.6, 0.2) == 3
    assert fit_count(80, 30) == 2


def test_fit_count_zero_sizes():
    assert fit_count(100, 0) == 0
    assert fit_count(0, 10) == 0
    assert fit_count(-5, 10) == 0


def test_format_float():
    assert format_float(62.5) == "62.50"
    assert format_float(1 / 3, 3) == "0.333"
