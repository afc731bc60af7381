import pytest

from bitmuldiv.formatting import get_decimal, get_fraction


def test_zero_is_rendered_as_zero():
    assert get_decimal(0.0) == "0"


def test_whole_number_has_no_fraction():
    assert get_decimal(5.0) == "5"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.5, "0.5"), (0.25, "0.25"), (3.125, "3.125")],
)
def test_exact_binary_fractions(value, expected):
    assert get_decimal(value) == expected


def test_value_below_precision_truncates_to_zero():
    assert get_decimal(1e-16) == "0"


@pytest.mark.parametrize("value", [0.5, 1.75, 12.0, 0.1, 1 / 3, 1 / 7, 123.456])
def test_negative_values_are_prefixed(value):
    assert get_decimal(-value) == "-" + get_decimal(value)


@pytest.mark.parametrize("value", [0.1, 1 / 3, 2 / 3, 1 / 7, 1 / 9, 42.375, 1e-10, 9.99])
def test_rendering_round_trips_within_precision(value):
    assert float(get_decimal(value)) == pytest.approx(value, abs=1e-14)


@pytest.mark.parametrize("value", [0.1, 0.5, 1 / 3, 2.5, 100.0625, 1e-10])
def test_no_trailing_zeros_after_point(value):
    text = get_decimal(value)
    assert "." in text
    assert not text.endswith("0")


def test_fractional_part_never_exceeds_precision():
    text = get_decimal(1 / 3)
    assert len(text.split(".")[1]) <= 15


@pytest.mark.parametrize(("value", "expected"), [(0.0, "0"), (1.0, "1"), (-1.0, "-1")])
def test_fraction_special_values(value, expected):
    assert get_fraction(value) == expected


@pytest.mark.parametrize("value", [4.0, 3.0, 0.5, 10.25])
def test_fraction_is_reciprocal_notation(value):
    assert get_fraction(value) == "1/" + get_decimal(value)


@pytest.mark.parametrize("value", [4.0, 3.0, 0.5])
def test_negative_fraction_keeps_sign(value):
    assert get_fraction(-value) == "-1/" + get_decimal(value)