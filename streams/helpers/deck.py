from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

from .board import Board
from .cards import ALL_CARDS, FULL_DECK_COUNTS, NUM_CARD_IDS, card_name, is_card
from .errors import ConfigError, InputError, StateError


@dataclass(frozen=True, slots=True)
class Deck:
    """
    Multiset of cards not yet placed: counts[card_id] = remaining copies.

    Immutable. Every operation that consumes cards hands back a new Deck,
    so one Deck value can feed any number of independent rollouts.
    """
    counts: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.counts) != NUM_CARD_IDS:
            raise InputError(f"Deck counts must have {NUM_CARD_IDS} slots")
        for c, n in enumerate(self.counts):
            if n < 0:
                raise StateError(f"Negative count for card {card_name(c)}")
            if n > FULL_DECK_COUNTS[c]:
                raise StateError(f"Too many copies of card {card_name(c)}: {n}")

    # ---------- constructors ----------
    @staticmethod
    def full() -> "Deck":
        return Deck(FULL_DECK_COUNTS)

    @staticmethod
    def from_board(board: Board) -> "Deck":
        """FullDeck minus the cards on the board."""
        counts = list(FULL_DECK_COUNTS)
        for c in board.placed_cards():
            counts[c] -= 1
            if counts[c] < 0:
                raise StateError(
                    f"Board holds more copies of {card_name(c)} than the deck has ({FULL_DECK_COUNTS[c]})"
                )
        return Deck(tuple(counts))

    # ---------- queries ----------
    @property
    def total(self) -> int:
        return sum(self.counts)

    def count(self, card: int) -> int:
        if not is_card(card):
            raise InputError(f"Not a card id: {card!r}")
        return self.counts[card]

    def instances(self) -> List[int]:
        """Flat list of every remaining physical card (duplicates repeated)."""
        out: List[int] = []
        for c in ALL_CARDS:
            out.extend([c] * self.counts[c])
        return out

    # ---------- updates ----------
    def remove(self, card: int) -> "Deck":
        if self.count(card) <= 0:
            raise StateError(f"Card {card_name(card)} is exhausted")
        counts = list(self.counts)
        counts[card] -= 1
        return Deck(tuple(counts))

    def remove_many(self, cards: List[int]) -> "Deck":
        counts = list(self.counts)
        for c in cards:
            counts[c] -= 1
            if counts[c] < 0:
                raise StateError(f"Card {card_name(c)} is exhausted")
        return Deck(tuple(counts))

    def draw(self, k: int, rng: random.Random) -> Tuple[List[int], "Deck"]:
        """
        Uniform draw of k cards without replacement.

        Two copies of the same value are indistinguishable but each can be
        drawn on its own: sampling a k-subset of the flat instance list does
        exactly that. Returns (drawn cards in draw order, residual deck).
        """
        if k < 0:
            raise ConfigError(f"Cannot draw a negative number of cards: {k}")
        pool = self.instances()
        if k > len(pool):
            raise StateError(f"Insufficient cards: need {k}, deck has {len(pool)}")
        drawn = rng.sample(pool, k)
        return drawn, self.remove_many(drawn)


def check_conservation(board: Board, deck: Deck) -> None:
    """Board cards + deck must rebuild the full 40-card deck exactly."""
    on_board = [0] * NUM_CARD_IDS
    for c in board.placed_cards():
        on_board[c] += 1
    for c in ALL_CARDS:
        if on_board[c] + deck.counts[c] != FULL_DECK_COUNTS[c]:
            raise StateError(
                f"Deck inconsistent with board for card {card_name(c)}: "
                f"{on_board[c]} placed + {deck.counts[c]} in deck != {FULL_DECK_COUNTS[c]}"
            )
