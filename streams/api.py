"""
Boundary adapter: the two entry points a UI calls.

Both take the 20-character transport string
  '_' empty, '1'..'9', 'A'..'U' for 10..30, '★' wildcard
and a simulation count. Nothing is kept between calls; pass `seed` only when
a reproducible result is needed (tests, analysis scripts).

Errors (all subclasses of ValueError):
  InputError  - bad board string / bad card
  StateError  - card exhausted, board inconsistent with the 40-card deck
  ConfigError - sims <= 0 (rejected, never clamped)
"""
from __future__ import annotations

import logging
from typing import List, Optional, Union

from .ai.montecarlo import SolverConfig, check_sims, counterfactual_values, estimate_expected_value
from .ai.rng import SeedLike
from .helpers.board import Board
from .helpers.cards import parse_card
from .helpers.deck import Deck
from .helpers.scoring import Scorer, run_score

logger = logging.getLogger(__name__)


def decode_board(board_string: str) -> Board:
    return Board.from_str(board_string)


def expected_value_current_board(
    board_string: str,
    sims: int,
    *,
    scorer: Scorer = run_score,
    seed: SeedLike = None,
    config: Optional[SolverConfig] = None,
) -> float:
    check_sims(sims)
    board = decode_board(board_string)
    deck = Deck.from_board(board)
    ev = estimate_expected_value(board, deck, sims, scorer=scorer, config=config, seed=seed)
    logger.debug("ev_current %s sims=%d -> %.4f", board_string, sims, ev)
    return ev


def expected_values_after_card(
    board_string: str,
    card: Union[int, str],
    sims: int,
    *,
    scorer: Scorer = run_score,
    seed: SeedLike = None,
    config: Optional[SolverConfig] = None,
) -> List[float]:
    """
    20 entries; occupied cells hold NaN and must be ignored by the caller.
    """
    check_sims(sims)
    board = decode_board(board_string)
    c = parse_card(card)
    deck = Deck.from_board(board)
    return counterfactual_values(board, deck, c, sims, scorer=scorer, config=config, seed=seed)
