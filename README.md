# bitmuldiv

`bitmuldiv` shows how multiplying or dividing an integer `n` by a constant
can be written with bit shifts combined with additions or subtractions.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command

```
bitmuldiv [-s STEPS] VALUE
```

- `VALUE`: the multiplier/divisor, an integer that fits in 64 bits.
- `-s STEPS`: the maximum number of right-shift terms used for division
  (default 3; must be a positive 32-bit integer).

Numbers are read like C's `strtol`: leading whitespace and a sign are
accepted, and anything after the leading digits is ignored.

Running the command with no arguments prints the usage text and exits
with a non-zero status. Bad input (a missing, repeated or invalid value
or step count, a missing parameter after `-s`, or a divisor of 0) is
reported as `Error: <message>`, also with a non-zero status.

Example (the error lines are abridged):

```
$ bitmuldiv 10
Multiplication (additions):
    (n << 1) + (n << 3)
Multiplication (subtractions):
    (n << 3) - (n << 2) - (n << 1)
Division:
    (n >> 4) + (n >> 5) + (n >> 8)
Division margin of error: 
    ...
```

What is printed:

- **Multiplication (additions)**: one shift for each set bit of the
  magnitude, in ascending order.
- **Multiplication (subtractions)**: a leading shift equal to the integer
  part of `log2` of the magnitude, followed by subtracted shifts for the
  set bits of (the next power of two above the magnitude minus the
  magnitude), all in descending order.
- **Division**: the reciprocal of the magnitude is approximated bit by bit
  as a sum of at most `STEPS` right shifts.
- **Division margin of error**: the difference between the approximated
  and the exact reciprocal, as a decimal and as a fraction, followed by
  the exact and approximated reciprocals.

A shift of 0 is written as plain `n`; terms are parenthesised when there
is more than one. Negative values wrap the expression in `-( ... )`. The
values 0, 1 and -1 print `0`, `n` and `-n` for multiplication; 0 then
fails for division with `Error: Cannot divide by 0.`

## Library use

```python
from bitmuldiv.calculate import (
    DivisionResult,
    division_steps,
    format_division,
    format_division_error,
    format_multiplication,
    multiplication_steps,
)
from bitmuldiv.formatting import get_decimal, get_fraction

additions, subtractions = multiplication_steps(10)   # (1, 3), (3, 2, 1)
result = division_steps(10, 3)                        # DivisionResult
result.steps                                          # (4, 5, 8)
result.reciprocal                                     # sum of 2**-shift
result.divisor                                        # 1 / reciprocal

print(format_multiplication(10), end="")
print(format_division(10, 3), end="")
```

- `multiplication_steps(multiplier)` raises `ValueError` for 0.
- `division_steps(divisor, step_count)` raises `ValueError` for a divisor
  of 0 or a step count below 1; `format_division` raises `ValueError` for
  a divisor of 0.
- `format_division_error(original, actual)` renders the margin of error
  between dividing by `original` and by `actual`.
- `get_decimal(value)` renders a float in plain decimal notation with at
  most 15 fractional digits (truncated, trailing zeros dropped);
  `get_fraction(value)` renders it as `1/value`, keeping its sign.
- `bitmuldiv.cli.parse_arguments(argv)` returns `(value, steps)` and
  raises `UsageError` on bad input; `bitmuldiv.cli.main(argv=None)` runs
  the command and returns its exit status.