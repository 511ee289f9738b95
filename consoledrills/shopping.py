"""A shopping-cart receipt and a word collector for a mad-libs story."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, TextIO

CURRENCY = "$"
FIELD_LIMIT = 49

_MAD_LIBS_PROMPTS = (
    ("adjective1", "Enter an adjective (descriptive word): "),
    ("noun", "Enter a noun (person or animal): "),
    ("adjective2", "Enter an adjective (descriptive word): "),
    ("verb", "Enter a verb (action ending in -ing): "),
    ("adjective3", "Enter an adjective (descriptive word): "),
)


def cart_total(price: float, quantity: int) -> float:
    """Return the cost of ``quantity`` items at ``price`` each."""
    return price * quantity


def receipt(item: str, price: float, quantity: int) -> str:
    """Return the purchase summary text."""
    total = cart_total(price, quantity)
    return (
        f"You have bought: {quantity} {item.rstrip(chr(10))}\n"
        f"Your total price is: {CURRENCY}{total:.2f}\n"
    )


def collect_words(lines: Iterable[str], out: Optional[TextIO] = None) -> dict[str, str]:
    """Prompt for the story words and return them by name.

    Each word is cut to the field limit. Raises EOFError if input runs out.
    """
    if out is None:
        out = sys.stdout
    it = iter(lines)
    words: dict[str, str] = {}
    for name, prompt in _MAD_LIBS_PROMPTS:
        out.write(prompt)
        line = next(it, None)
        if line is None:
            raise EOFError(f"no {name} was entered")
        words[name] = line.rstrip("\n")[:FIELD_LIMIT]
    return words


def _read_line(prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError("input ended")
    return line.rstrip("\n")


def main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Buy an item and print the total.").parse_args(argv)
    try:
        item = _read_line("What items would you like to buy?: ")[:FIELD_LIMIT]
        price = float(_read_line("What is the price of this item?: "))
        quantity = int(_read_line("How many would you like?: "))
    except (ValueError, EOFError):
        sys.stdout.write("Invalid input\n")
        return 1
    sys.stdout.write(receipt(item, price, quantity))
    return 0