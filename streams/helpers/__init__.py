# cards
from .cards import (
    EMPTY, WILDCARD, WILDCARD_GLYPH, EMPTY_GLYPH, ALL_CARDS, FULL_DECK_SIZE,
    parse_card, card_to_char, card_name,
)

# board + deck
from .board import Board, BOARD_SIZE, BOARD_ROWS, BOARD_COLS
from .deck import Deck, check_conservation

# scoring oracle
from .scoring import Scorer, SCORE_TABLE, run_lengths, run_score

# running statistics
from .stats import RolloutStats

# errors
from .errors import SolverError, InputError, StateError, ConfigError

__all__ = [
    # cards
    "EMPTY", "WILDCARD", "WILDCARD_GLYPH", "EMPTY_GLYPH", "ALL_CARDS", "FULL_DECK_SIZE",
    "parse_card", "card_to_char", "card_name",

    # board + deck
    "Board", "BOARD_SIZE", "BOARD_ROWS", "BOARD_COLS", "Deck", "check_conservation",

    # scoring
    "Scorer", "SCORE_TABLE", "run_lengths", "run_score",

    # stats
    "RolloutStats",

    # errors
    "SolverError", "InputError", "StateError", "ConfigError",
]
