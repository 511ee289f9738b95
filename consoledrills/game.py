"""Terminal driver for the 2048 game and a key-echo check."""

from __future__ import annotations

import argparse
import os
import random
import sys
from typing import Iterable, Iterator, Optional, TextIO

from .board import (
    Board,
    add_random_tile,
    can_move,
    draw_board,
    make_board,
    move_down,
    move_left,
    move_right,
    move_up,
)

try:
    import termios
except ImportError:  # not a POSIX terminal
    termios = None

QUIT_KEY = "q"
GAME_OVER = "Game Over!\n"

_MOVES = {
    "w": move_up,
    "a": move_left,
    "s": move_down,
    "d": move_right,
}


def read_key(stream: Optional[TextIO] = None) -> str:
    """Read a single character without waiting for Enter.

    When the stream is a terminal, line buffering and echo are switched off
    for the read and restored afterwards. Returns "" at end of input.
    """
    if stream is None:
        stream = sys.stdin
    try:
        fd = stream.fileno()
        interactive = os.isatty(fd)
    except (AttributeError, OSError, ValueError):
        interactive = False
    if not interactive or termios is None:
        return stream.read(1)
    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        return stream.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def _keys_from(stream: Optional[TextIO]) -> Iterator[str]:
    while True:
        key = read_key(stream)
        if not key:
            return
        yield key


def apply_key(board: Board, key: str) -> bool:
    """Apply the move bound to ``key``; other keys do nothing.

    Returns True if the board changed.
    """
    move = _MOVES.get(key)
    return move(board) if move else False


def play(
    keys: Iterable[str],
    rng: Optional[random.Random] = None,
    out: Optional[TextIO] = None,
) -> Board:
    """Play a game driven by ``keys`` and return the final board.

    The game ends on the quit key, when the keys run out, or when no move is
    left after a tile is added.
    """
    if rng is None:
        rng = random.Random()
    if out is None:
        out = sys.stdout
    board = make_board()
    add_random_tile(board, rng)
    add_random_tile(board, rng)
    key_iter = iter(keys)
    while True:
        out.write(draw_board(board))
        key = next(key_iter, None)
        if key is None or key == QUIT_KEY:
            break
        if apply_key(board, key):
            add_random_tile(board, rng)
            if not can_move(board):
                out.write(draw_board(board))
                out.write(GAME_OVER)
                break
    return board


def echo_keys(keys: Iterable[str], out: Optional[TextIO] = None) -> None:
    """Echo each movement key on its own line until the quit key."""
    if out is None:
        out = sys.stdout
    for key in keys:
        if key in _MOVES:
            out.write(f"{key}\n")
        elif key == QUIT_KEY:
            out.write(GAME_OVER)
            break


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play 2048 with w/a/s/d, q to quit.")
    parser.add_argument(
        "--echo",
        action="store_true",
        help="only echo the movement keys that are pressed",
    )
    args = parser.parse_args(argv)
    keys = _keys_from(sys.stdin)
    if args.echo:
        echo_keys(keys, sys.stdout)
    else:
        play(keys, random.Random(), sys.stdout)
    return 0