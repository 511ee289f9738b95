"""The 2048 board: creation, tile placement, rendering and sliding moves."""

from __future__ import annotations

import random
from typing import Optional

SIZE = 4
NEW_TILE = 2
RARE_TILE = 4
RARE_TILE_CHANCE = 0.1

Board = list[list[int]]


def make_board(size: int = SIZE) -> Board:
    """Return an empty ``size`` x ``size`` board."""
    if size < 1:
        raise ValueError(f"board size must be positive, got {size}")
    return [[0] * size for _ in range(size)]


def add_random_tile(
    board: Board, rng: Optional[random.Random] = None
) -> Optional[tuple[int, int]]:
    """Place a new tile on a random empty cell.

    Returns the (row, column) of the new tile, or None if the board is full.
    """
    if rng is None:
        rng = random.Random()
    empty = [
        (r, c)
        for r, row in enumerate(board)
        for c, value in enumerate(row)
        if value == 0
    ]
    if not empty:
        return None
    r, c = rng.choice(empty)
    board[r][c] = RARE_TILE if rng.random() < RARE_TILE_CHANCE else NEW_TILE
    return r, c


def draw_board(board: Board) -> str:
    """Render the board as text, one line per row, empty cells as dots."""
    width = max([4] + [len(str(value)) for row in board for value in row])
    lines = (
        " ".join((str(value) if value else ".").rjust(width) for value in row)
        for row in board
    )
    return "\n".join(lines) + "\n"


def _collapse(line: list[int]) -> list[int]:
    """Slide a line towards its start, merging equal neighbours once."""
    merged: list[int] = []
    pending: Optional[int] = None
    for value in (v for v in line if v):
        if pending is None:
            pending = value
        elif pending == value:
            merged.append(pending * 2)
            pending = None
        else:
            merged.append(pending)
            pending = value
    if pending is not None:
        merged.append(pending)
    return merged + [0] * (len(line) - len(merged))


def _shift_rows(board: Board, towards_end: bool) -> bool:
    moved = False
    for row in board:
        line = row[::-1] if towards_end else list(row)
        new = _collapse(line)
        if towards_end:
            new.reverse()
        if new != row:
            row[:] = new
            moved = True
    return moved


def _shift_columns(board: Board, towards_end: bool) -> bool:
    moved = False
    for j, column in enumerate(zip(*board)):
        line = list(column[::-1]) if towards_end else list(column)
        new = _collapse(line)
        if towards_end:
            new.reverse()
        if new != list(column):
            moved = True
            for row, value in zip(board, new):
                row[j] = value
    return moved


def move_left(board: Board) -> bool:
    """Slide every row to the left. Returns True if the board changed."""
    return _shift_rows(board, towards_end=False)


def move_right(board: Board) -> bool:
    """Slide every row to the right. Returns True if the board changed."""
    return _shift_rows(board, towards_end=True)


def move_up(board: Board) -> bool:
    """Slide every column upwards. Returns True if the board changed."""
    return _shift_columns(board, towards_end=False)


def move_down(board: Board) -> bool:
    """Slide every column downwards. Returns True if the board changed."""
    return _shift_columns(board, towards_end=True)


def is_full(board: Board) -> bool:
    """True when no cell is empty."""
    return all(value != 0 for row in board for value in row)


def _has_equal_neighbours(line) -> bool:
    return any(a == b for a, b in zip(line, line[1:]))


def can_move(board: Board) -> bool:
    """True when at least one move would change the board."""
    if not is_full(board):
        return True
    if any(_has_equal_neighbours(row) for row in board):
        return True
    return any(_has_equal_neighbours(column) for column in zip(*board))