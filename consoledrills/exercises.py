"""Small console exercises: matrices, arrays, names, maths and weekdays."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterable, Optional, Sequence

MATRIX = ((1, 2, 3), (4, 5, 6), (7, 8, 9))
NUMBERS = (1, 2, 3, 4, 5, 6, 7)
NUMBER_COUNT = 5
NAME_COUNT = 3
NAME_LIMIT = 24

_DAYS = {
    1: "It's Monday",
    2: "It's Tuesday",
    3: "It's Wednesday my dudes",
    4: "It's Thursday",
    5: "It's Friday",
    6: "It's Saturday",
    7: "It's Sunday",
}


def format_matrix(matrix: Iterable[Sequence[int]]) -> str:
    """Render each row as space-terminated values on its own line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)


def day_of_week(day: int) -> Optional[str]:
    """Return the message for a day number 1-7, or None for any other."""
    return _DAYS.get(day)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def math_demo() -> str:
    """Return the results of a square root, power, rounding and absolute value."""
    x = int(math.sqrt(9))
    y = int(math.pow(2, 2))
    z = _round_half_away(3.6)
    a = abs(-5)
    return f"{x}\n{y}\n{z:f}\n{a}"


def arithmetic(x: int = 5, y: int = 3) -> int:
    """Integer division that truncates toward zero."""
    if y == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(x) // abs(y)
    return -quotient if (x < 0) != (y < 0) else quotient


def read_numbers(lines: Iterable[str], count: int = NUMBER_COUNT) -> list[int]:
    """Read ``count`` whitespace-separated integers; missing ones are 0.

    Raises ValueError on a token that is not an integer.
    """
    tokens = (token for line in lines for token in line.split())
    numbers = [0] * count
    for index, token in zip(range(count), tokens):
        try:
            numbers[index] = int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None
    return numbers


def read_names(lines: Iterable[str], count: int = NAME_COUNT) -> list[str]:
    """Read ``count`` names, one per line; missing ones are empty."""
    names = [""] * count
    for index, line in zip(range(count), lines):
        names[index] = line.rstrip("\n")[:NAME_LIMIT]
    return names


def _show_matrix() -> None:
    sys.stdout.write(format_matrix(MATRIX))


def _show_arrays() -> None:
    sys.stdout.write("".join(f"{n}\n" for n in NUMBERS))
    sys.stdout.write(f"The number of elements in this array is {len(NUMBERS)}\n")


def _show_day() -> None:
    sys.stdout.write((day_of_week(3) or "") + "\n")


def _show_math() -> None:
    sys.stdout.write(math_demo() + "\n")


def _show_arithmetic() -> None:
    sys.stdout.write(f"{arithmetic()}\n")


def _ask_numbers() -> None:
    sys.stdout.write(f"Please enter {NUMBER_COUNT} integers: ")
    sys.stdout.flush()
    numbers = read_numbers(sys.stdin)
    sys.stdout.write("".join(f"{n} " for n in numbers) + "\n")


def _ask_names() -> None:
    sys.stdout.write(f"Enter {NAME_COUNT} names, one per line:\n")
    sys.stdout.flush()
    sys.stdout.write("".join(f"{name}\n" for name in read_names(sys.stdin)))


_DEMOS = {
    "matrix": _show_matrix,
    "arrays": _show_arrays,
    "day": _show_day,
    "math": _show_math,
    "arithmetic": _show_arithmetic,
    "numbers": _ask_numbers,
    "names": _ask_names,
}
_DEFAULT_DEMOS = ("matrix", "arrays", "day", "math", "arithmetic")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run small console exercises.")
    parser.add_argument("demo", nargs="?", choices=sorted(_DEMOS), help="exercise to run")
    args = parser.parse_args(argv)
    names = (args.demo,) if args.demo else _DEFAULT_DEMOS
    try:
        for name in names:
            _DEMOS[name]()
    except ValueError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    return 0