from __future__ import annotations

import random

from ..helpers.board import Board
from ..helpers.deck import Deck
from ..helpers.scoring import Scorer


def random_completion(board: Board, deck: Deck, rng: random.Random) -> Board:
    """
    Fill every empty cell from the deck.

    The k drawn cards go to the k empty cells through a uniformly random
    bijection, shuffled independently of the draw order.
    """
    empties = board.empty_positions()
    if not empties:
        return board
    drawn, _ = deck.draw(len(empties), rng)
    rng.shuffle(empties)
    return board.fill(empties, drawn)


def rollout(board: Board, deck: Deck, scorer: Scorer, rng: random.Random) -> float:
    """One random completion of board, scored once. Inputs are never mutated."""
    if board.is_complete:
        # no sampling at all: complete boards have zero variance
        return float(scorer(board))
    return float(scorer(random_completion(board, deck, rng)))
