"""Decompose multiplication and division by constants into shifts."""

import math
from dataclasses import dataclass

from bitmuldiv.formatting import get_decimal, get_fraction


@dataclass(frozen=True)
class DivisionResult:
    """Right-shift amounts approximating a reciprocal, and the value they sum to."""

    steps: tuple[int, ...]
    reciprocal: float

    @property
    def divisor(self) -> float:
        """The divisor that the summed shifts actually divide by."""
        return 1.0 / self.reciprocal


def _set_bits(value: int) -> list[int]:
    return [bit for bit in range(value.bit_length()) if value >> bit & 1]


def _format_expression(steps, joiner: str, shift: str, negative: bool) -> str:
    grouped = len(steps) > 1
    terms = []
    for step in steps:
        if step == 0:
            terms.append("n")
        elif grouped:
            terms.append(f"(n {shift} {step})")
        else:
            terms.append(f"n {shift} {step}")
    expression = joiner.join(terms)
    if negative and steps:
        expression = f"-({expression})"
    return expression


def multiplication_steps(multiplier: int) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Return the left-shift amounts for the magnitude of ``multiplier``.

    The first tuple holds the shifts summed by additions, in ascending order;
    the second holds the shifts of the subtraction form, in descending order.
    """
    magnitude = abs(multiplier)
    if magnitude == 0:
        raise ValueError("Cannot decompose a multiplier of 0.")

    additions = tuple(_set_bits(magnitude))

    log = math.log2(float(magnitude))
    base = 2 ** math.floor(log + 1)
    subtractions = tuple(sorted([int(log), *_set_bits(base - magnitude)], reverse=True))

    return additions, subtractions


def format_multiplication(multiplier: int) -> str:
    """Describe multiplication by ``multiplier`` as shift expressions."""
    special = {0: "0", 1: "n", -1: "-n"}
    if multiplier in special:
        return special[multiplier] + "\n"

    additions, subtractions = multiplication_steps(multiplier)
    negative = multiplier < 0

    lines = []
    for label, joiner, steps in (
        ("additions", " + ", additions),
        ("subtractions", " - ", subtractions),
    ):
        lines.append(f"Multiplication ({label}):")
        lines.append("    " + _format_expression(steps, joiner, "<<", negative))
    return "\n".join(lines) + "\n"


def division_steps(divisor: int, step_count: int) -> DivisionResult:
    """Approximate ``1 / abs(divisor)`` with at most ``step_count`` right shifts."""
    if divisor == 0:
        raise ValueError("Cannot divide by 0.")
    if step_count < 1:
        raise ValueError("Step count must be positive.")

    remainder = 1.0 / abs(divisor)
    reciprocal = 0.0
    bit = 0
    steps: list[int] = []

    while remainder != 0 and len(steps) < step_count:
        remainder *= 2.0
        bit += 1
        if remainder >= 1.0:
            steps.append(bit)
            remainder -= 1.0
            reciprocal += math.ldexp(1.0, -bit)

    return DivisionResult(tuple(steps), reciprocal)


def format_division_error(original: float, actual: float) -> str:
    """Describe how far dividing by ``actual`` strays from dividing by ``original``."""
    original_reciprocal = 1.0 / original
    actual_reciprocal = 1.0 / actual
    error = actual_reciprocal - original_reciprocal

    error_fraction = "0" if error == 0 else get_fraction(1.0 / error)
    return (
        "Division margin of error: \n"
        f"    {get_decimal(error)} ({error_fraction})\n"
        f"    {get_decimal(original_reciprocal)} ({get_fraction(original)}) -> "
        f"{get_decimal(actual_reciprocal)} ({get_fraction(actual)})\n"
    )


def format_division(divisor: int, step_count: int) -> str:
    """Describe division by ``divisor`` as right-shift expressions and its error."""
    if divisor == 0:
        raise ValueError("Cannot divide by 0.")

    header = "Division:\n    "
    if divisor in (1, -1):
        term = "n" if divisor == 1 else "-n"
        return header + term + format_division_error(float(divisor), float(divisor))

    result = division_steps(divisor, step_count)
    negative = divisor < 0
    sign = -1.0 if negative else 1.0
    expression = _format_expression(result.steps, " + ", ">>", negative)

    return (
        header
        + expression
        + "\n"
        + format_division_error(float(divisor), (1.0 / result.reciprocal) * sign)
    )