from __future__ import annotations
from typing import Dict, Tuple, Union

from .errors import InputError

# ------------------------------------------------------------
# Card encoding: 0 = empty cell, 1..30 = numbered, 31 = wildcard
# ------------------------------------------------------------

EMPTY = 0
MIN_CARD = 1
MAX_CARD = 30
WILDCARD = 31
NUM_CARD_IDS = WILDCARD + 1  # index space for count arrays

DUPLICATE_VALUES = range(11, 20)
DUPLICATE_COUNT = 2

EMPTY_GLYPH = "_"
WILDCARD_GLYPH = "★"


def copies_in_full_deck(card: int) -> int:
    if card == WILDCARD:
        return 1
    if not (MIN_CARD <= card <= MAX_CARD):
        return 0
    return DUPLICATE_COUNT if card in DUPLICATE_VALUES else 1


ALL_CARDS: Tuple[int, ...] = tuple(range(MIN_CARD, MAX_CARD + 1)) + (WILDCARD,)
FULL_DECK_COUNTS: Tuple[int, ...] = tuple(copies_in_full_deck(c) for c in range(NUM_CARD_IDS))
FULL_DECK_SIZE = sum(FULL_DECK_COUNTS)  # 40


def _char_for(card: int) -> str:
    if card == EMPTY:
        return EMPTY_GLYPH
    if card == WILDCARD:
        return WILDCARD_GLYPH
    if card < 10:
        return str(card)
    return chr(55 + card)  # 10 -> 'A', 30 -> 'U'


CARD_TO_CHAR: Dict[int, str] = {c: _char_for(c) for c in (EMPTY,) + ALL_CARDS}
CHAR_TO_CARD: Dict[str, int] = {ch: c for c, ch in CARD_TO_CHAR.items()}


def is_card(x: int) -> bool:
    return x == WILDCARD or MIN_CARD <= x <= MAX_CARD


def card_to_char(card: int) -> str:
    try:
        return CARD_TO_CHAR[card]
    except KeyError:
        raise InputError(f"Not a card id: {card!r}") from None


def char_to_cell(ch: str) -> int:
    """Decode one transport character into a cell value (EMPTY allowed)."""
    try:
        return CHAR_TO_CARD[ch]
    except KeyError:
        raise InputError(f"Bad board character: {ch!r}") from None


def parse_card(x: Union[int, str]) -> int:
    """
    Accepts a card id (1..30, WILDCARD) or a single transport character.
    Empty is not a card.
    """
    if isinstance(x, bool):
        raise InputError(f"Bad card: {x!r}")
    if isinstance(x, int):
        if not is_card(x):
            raise InputError(f"Card out of range: {x}")
        return x
    if isinstance(x, str):
        s = x.strip()
        if len(s) != 1 or s == EMPTY_GLYPH:
            raise InputError(f"Bad card string: {x!r}")
        return char_to_cell(s)
    raise InputError(f"Bad card: {x!r}")


def card_name(card: int) -> str:
    if card == EMPTY:
        return "--"
    if card == WILDCARD:
        return "W"
    return str(card)
