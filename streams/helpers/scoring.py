from __future__ import annotations
from typing import Callable, List

from .board import Board
from .cards import EMPTY, WILDCARD

# index == run length, value == points
SCORE_TABLE = (
    0, 0, 1, 3, 5, 7, 9, 10, 15, 20, 25,
    30, 20, 40, 50, 60, 70, 50, 100, 150, 300,
)

# Any deterministic, side-effect free Board -> number works as an oracle.
Scorer = Callable[[Board], float]


def run_lengths(board: Board) -> List[int]:
    """
    Lengths of maximal non-decreasing runs, reading cells in board order.

    - an empty cell ends the current run
    - a wildcard continues the current run and keeps the previous value, so
      the next card is compared against the card before it
    - a wildcard with no previous value (first cell, or right after an empty
      cell) scores like an empty cell
    """
    runs: List[int] = []
    length = 0
    last = None
    for cell in board.cells:
        if cell == EMPTY or (cell == WILDCARD and last is None):
            if length:
                runs.append(length)
            length = 0
            last = None
            continue
        if cell == WILDCARD:
            length += 1
            continue
        if length == 0:
            length = 1
        elif cell >= last:
            length += 1
        else:
            runs.append(length)
            length = 1
        last = cell
    if length:
        runs.append(length)
    return runs


def run_score(board: Board) -> int:
    """Default oracle: sum of SCORE_TABLE over the board's runs. Total over partial boards too."""
    return sum(SCORE_TABLE[n] for n in run_lengths(board))
