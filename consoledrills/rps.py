"""Rock, paper, scissors against the computer."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum, IntEnum
from typing import Iterable, Optional, TextIO

MENU = (
    "Choose an option\n"
    "1. Rock\n"
    "2. Paper\n"
    "3. Scissors\n"
    "Enter your choice: "
)


class Choice(IntEnum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3


class Outcome(Enum):
    WIN = "You win!"
    DRAW = "Draw!"
    LOSE = "You lose!"


_BEATS = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSORS: Choice.PAPER,
}


def computer_choice(rng: Optional[random.Random] = None) -> Choice:
    """Pick the computer's move.

    The draw is taken from the half-open range [ROCK, SCISSORS).
    """
    if rng is None:
        rng = random.Random()
    return Choice(rng.randrange(Choice.ROCK, Choice.SCISSORS))


def decide(user: Choice, computer: Choice) -> Outcome:
    """Return the outcome from the user's point of view."""
    if _BEATS[Choice(user)] == computer:
        return Outcome.WIN
    if user == computer:
        return Outcome.DRAW
    return Outcome.LOSE


def prompt_choice(lines: Iterable[str], out: Optional[TextIO] = None) -> Choice:
    """Show the menu until a line holds a valid choice.

    Raises EOFError if the input runs out first.
    """
    if out is None:
        out = sys.stdout
    it = iter(lines)
    while True:
        out.write(MENU)
        line = next(it, None)
        if line is None:
            raise EOFError("no choice was entered")
        try:
            return Choice(int(line.strip()))
        except ValueError:
            continue


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play rock, paper, scissors.")
    parser.parse_args(argv)
    computer = computer_choice(random.Random())
    try:
        user = prompt_choice(sys.stdin, sys.stdout)
    except EOFError:
        return 1
    sys.stdout.write(decide(user, computer).value + "\n")
    return 0