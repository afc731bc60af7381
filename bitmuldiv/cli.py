"""Command-line entry point: show shift decompositions for a constant."""

import re
import sys

from bitmuldiv.calculate import format_division, format_multiplication

DEFAULT_DIVISION_STEPS = 3

USAGE = (
    "Usage: bitmuldiv <-s [steps]> [value]\n"
    "\n"
    "           <-s [steps]> - Max division step count (default = 3)\n"
    "           [value]      - Multiplier/divisor (integers only)\n"
    "\n"
)

_INTEGER_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class UsageError(Exception):
    """Raised when the command-line arguments are malformed."""


def _parse_integer(text: str, bits: int) -> int:
    match = _INTEGER_PREFIX.match(text)
    if match is None:
        raise ValueError(text)
    value = int(match.group(1))
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(text)
    return value


def parse_arguments(argv) -> tuple[int, int]:
    """Return ``(value, division_steps)`` parsed from the argument list."""
    value = None
    steps = DEFAULT_DIVISION_STEPS
    got_steps = False

    arguments = iter(argv)
    for argument in arguments:
        if argument == "-s":
            parameter = next(arguments, None)
            if parameter is None:
                raise UsageError('Missing parameter for "-s"')
            if got_steps:
                raise UsageError("Max division step count already defined.")
            try:
                steps = _parse_integer(parameter, 32)
            except ValueError:
                raise UsageError(f'Invalid max division step count "{parameter}".') from None
            got_steps = True
            if steps <= 0:
                raise UsageError(f'Invalid max division step count "{parameter}".')
            continue

        if value is not None:
            raise UsageError("Multiplier/divisor already defined.")
        try:
            value = _parse_integer(argument, 64)
        except ValueError:
            raise UsageError(f'Invalid multiplier/divisor "{argument}".') from None

    if value is None:
        raise UsageError("Multiplier/divisor not defined.")
    return value, steps


def main(argv=None) -> int:
    """Run the command; returns the process exit status."""
    arguments = sys.argv[1:] if argv is None else list(argv)
    if not arguments:
        print(USAGE, end="")
        return -1

    try:
        value, steps = parse_arguments(arguments)
        print(format_multiplication(value), end="")
        print(format_division(value, steps), end="")
    except (UsageError, ValueError) as error:
        print(f"Error: {error}")
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())