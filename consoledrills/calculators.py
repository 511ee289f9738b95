"""Circle, compound-interest and weight calculators."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

PI = 3.14159
TIMES_COMPOUNDED = 4
POUNDS_PER_KILOGRAM = 2.205

T = TypeVar("T")


@dataclass(frozen=True)
class CircleMetrics:
    """Measurements of a circle and the sphere of the same radius."""

    radius: float
    area: float
    circumference: float
    surface_area: float
    volume: float


def circle_metrics(radius: float) -> CircleMetrics:
    """Compute circle and sphere measurements for ``radius``."""
    return CircleMetrics(
        radius=radius,
        area=radius**2 * PI,
        circumference=radius * 2 * PI,
        surface_area=4 * PI * radius**2,
        volume=(4.0 / 3.0) * PI * radius**3,
    )


def compound_interest(
    initial: float,
    rate_percent: float,
    years: int,
    times_compounded: int = TIMES_COMPOUNDED,
) -> float:
    """Return the amount after compounding ``times_compounded`` times a year."""
    if times_compounded <= 0:
        raise ValueError("times_compounded must be positive")
    rate = rate_percent / 100
    return initial * (1 + rate / times_compounded) ** (times_compounded * years)


def kg_to_lbs(kg: float) -> float:
    return kg * POUNDS_PER_KILOGRAM


def lbs_to_kg(lbs: float) -> float:
    return lbs / POUNDS_PER_KILOGRAM


def _ask(prompt: str, cast: Callable[[str], T]) -> T:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError("input ended")
    return cast(line.strip())


def circle_main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Circle and sphere calculator.").parse_args(argv)
    try:
        radius = _ask("Enter in the radius of your circle: ", float)
    except (ValueError, EOFError):
        sys.stdout.write("Invalid input\n")
        return 1
    m = circle_metrics(radius)
    sys.stdout.write(
        f"Circle with a radius of {radius:.1f} has an area of: {m.area:.1f}\n"
        f"Circle with a radius of {radius:.1f} has a circumference of: {m.circumference:.1f}\n"
        f"Sphere with a radius of {radius:.1f} has a surface area of: {m.surface_area:.1f}\n"
        f"Sphere with a radius of {radius:.1f} has a volume of: {m.volume:.1f}\n"
    )
    return 0


def interest_main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Compound interest calculator.").parse_args(argv)
    try:
        initial = _ask("Enter your deposite amount: ", float)
        rate = _ask("Enter the interest rate: ", float)
        years = _ask("Enter the number of years you want to invest: ", int)
    except (ValueError, EOFError):
        sys.stdout.write("Invalid input\n")
        return 1
    total = compound_interest(initial, rate, years)
    sys.stdout.write(
        f"The amount of money you will have after investing for {years} is: {total:.2f}\n"
    )
    return 0


def weight_main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Weight conversion calculator.").parse_args(argv)
    sys.stdout.write(
        "Weight Conversion Calculator\n"
        "1. Kilograms to Pounds\n"
        "2. Pounds to Kilograms\n"
    )
    try:
        choice = _ask("Make a selection (1 or 2): ", int)
        if choice == 1:
            kg = _ask("Enter your weight in kilograms (kg): ", float)
            sys.stdout.write(f"Your weight in pounds is: {kg_to_lbs(kg):.2f}\n")
            return 0
        if choice == 2:
            lbs = _ask("Enter your weight in pounds(lbs): ", float)
            sys.stdout.write(f"Your weight in kilograms is: {lbs_to_kg(lbs):.2f}\n")
            return 0
    except (ValueError, EOFError):
        pass
    sys.stdout.write("Invalid input\n")
    return 1