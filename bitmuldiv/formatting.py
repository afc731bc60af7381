"""Decimal and fractional text rendering for floating-point values."""

import math

_PRECISION = 15


def get_decimal(value: float) -> str:
    """Render ``value`` in plain decimal notation with up to 15 fractional digits.

    Digits beyond the fifteenth are truncated and trailing zeros dropped.
    """
    negative = value < 0
    value = abs(value)

    whole = math.floor(value)
    fraction = int((value - whole) * 10.0**_PRECISION)

    text = str(whole)
    if fraction:
        padding = _PRECISION - int(math.log10(fraction) + 1)
        text = f"{text}.{'0' * padding}{fraction}".rstrip("0")

    return ("-" if negative else "") + text


def get_fraction(value: float) -> str:
    """Render ``value`` as a unit fraction, ``1/value``, keeping its sign."""
    if value == 0:
        return "0"
    if value == 1:
        return "1"
    if value == -1:
        return "-1"
    return ("-" if value < 0 else "") + "1/" + get_decimal(abs(value))