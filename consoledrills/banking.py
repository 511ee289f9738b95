"""A small menu-driven bank account."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TextIO

STARTING_BALANCE = 1000.0

CHECK_BALANCE = 1
DEPOSIT = 2
WITHDRAW = 3
EXIT = 4

MENU = (
    "***Banking App***\n"
    "1. Check Balance\n"
    "2. Deposit Money\n"
    "3. Withdraw Money\n"
    "4. Exit\n"
    "Please make your choice: "
)


class InvalidAmount(ValueError):
    """Raised when a withdrawal amount is negative."""


class InsufficientFunds(ValueError):
    """Raised when a withdrawal exceeds the balance."""


@dataclass
class Account:
    """A bank account holding a balance."""

    balance: float = STARTING_BALANCE

    def deposit(self, amount: float) -> float:
        """Add ``amount`` to the balance and return the new balance."""
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take ``amount`` from the balance and return it."""
        if amount < 0:
            raise InvalidAmount(f"invalid amount: {amount}")
        if amount > self.balance:
            raise InsufficientFunds(
                f"cannot withdraw {amount} from a balance of {self.balance}"
            )
        self.balance -= amount
        return amount


def _parse_choice(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return 0


def _next_line(lines: Iterator[str]) -> Optional[str]:
    line = next(lines, None)
    return None if line is None else line.strip()


def run(lines: Iterable[str], out: Optional[TextIO] = None) -> Account:
    """Drive the banking menu from ``lines`` and return the account.

    The session ends on the exit choice or when the input runs out.
    """
    if out is None:
        out = sys.stdout
    account = Account()
    it = iter(lines)
    while True:
        out.write(MENU)
        raw = _next_line(it)
        if raw is None:
            break
        choice = _parse_choice(raw)
        if choice == EXIT:
            break
        if choice == CHECK_BALANCE:
            out.write(f"Your balance is currently: {account.balance:f}\n")
        elif choice in (DEPOSIT, WITHDRAW):
            verb = "deposit" if choice == DEPOSIT else "withdraw"
            out.write(f"Please enter the amount you want to {verb}: ")
            raw_amount = _next_line(it)
            if raw_amount is None:
                break
            try:
                amount = float(raw_amount)
            except ValueError:
                out.write("Invalid amount\n")
                continue
            if choice == DEPOSIT:
                account.deposit(amount)
                continue
            try:
                account.withdraw(amount)
            except InvalidAmount:
                out.write("Invalid amount\n")
            except InsufficientFunds:
                out.write("You do not have enough money in your balance\n")
            else:
                out.write(f"You have withdrawn {amount:f}\n")
        else:
            out.write("\nInvalid choice!, select 1-4\n")
    return account


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="A small banking menu.")
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0