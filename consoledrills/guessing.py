"""Random numbers and a number guessing game."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, Optional, TextIO

LOW = 0
HIGH = 100

FIRST_PROMPT = "Guess the number (0-100): "
RETRY_PROMPT = "Wrong Answer! Guess again: "
WIN_MESSAGE = "You win!\n"


def random_number(
    rng: Optional[random.Random] = None, low: int = LOW, high: int = HIGH
) -> int:
    """Return a random integer in the half-open range [low, high)."""
    if high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    if rng is None:
        rng = random.Random()
    return rng.randrange(low, high)


def _parse_guess(raw) -> Optional[int]:
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def guessing_game(
    secret: int, guesses: Iterable, out: Optional[TextIO] = None
) -> Optional[int]:
    """Play until a guess matches ``secret``.

    Returns the number of guesses it took, or None if the guesses ran out.
    Guesses that are not integers count as wrong.
    """
    if out is None:
        out = sys.stdout
    out.write(FIRST_PROMPT)
    for tries, raw in enumerate(guesses, start=1):
        if _parse_guess(raw) == secret:
            out.write(WIN_MESSAGE)
            return tries
        out.write(RETRY_PROMPT)
    return None


def rng_main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Print a random number from 0 to 99.").parse_args(argv)
    sys.stdout.write(f"{random_number(random.Random())}\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Guess the secret number.").parse_args(argv)
    secret = random_number(random.Random())
    return 0 if guessing_game(secret, sys.stdin, sys.stdout) is not None else 1