from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .cards import EMPTY, CARD_TO_CHAR, char_to_cell, is_card, card_name
from .errors import InputError, StateError

BOARD_ROWS = 4
BOARD_COLS = 5
BOARD_SIZE = BOARD_ROWS * BOARD_COLS  # 20


@dataclass(frozen=True, slots=True)
class Board:
    """
    Fixed 20-cell board, row-major over a 4x5 grid.

    cells[i] is EMPTY (0) or a card id. Frozen + tuple-backed so it can be
    hashed, shared between rollouts and shipped to worker processes as-is.
    """
    cells: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SIZE:
            raise InputError(f"Board must have {BOARD_SIZE} cells, got {len(self.cells)}")
        for c in self.cells:
            if c != EMPTY and not is_card(c):
                raise InputError(f"Bad cell value: {c!r}")

    # ---------- constructors ----------
    @staticmethod
    def empty() -> "Board":
        return Board((EMPTY,) * BOARD_SIZE)

    @staticmethod
    def from_str(s: str) -> "Board":
        if not isinstance(s, str):
            raise InputError(f"Board string expected, got {type(s).__name__}")
        if len(s) != BOARD_SIZE:
            raise InputError(f"Board string must be {BOARD_SIZE} chars, got {len(s)}")
        return Board(tuple(char_to_cell(ch) for ch in s))

    def to_str(self) -> str:
        return "".join(CARD_TO_CHAR[c] for c in self.cells)

    def __str__(self) -> str:
        return self.to_str()

    # ---------- queries ----------
    def empty_positions(self) -> List[int]:
        return [i for i, c in enumerate(self.cells) if c == EMPTY]

    def placed_cards(self) -> List[int]:
        return [c for c in self.cells if c != EMPTY]

    @property
    def num_empty(self) -> int:
        return sum(1 for c in self.cells if c == EMPTY)

    @property
    def is_complete(self) -> bool:
        return EMPTY not in self.cells

    def rows(self) -> List[Tuple[int, ...]]:
        return [self.cells[r * BOARD_COLS:(r + 1) * BOARD_COLS] for r in range(BOARD_ROWS)]

    # ---------- updates (return new boards) ----------
    def place(self, pos: int, card: int) -> "Board":
        _check_pos(pos)
        if not is_card(card):
            raise InputError(f"Not a card id: {card!r}")
        if self.cells[pos] != EMPTY:
            raise StateError(f"Cell {pos} already holds {card_name(self.cells[pos])}")
        cells = list(self.cells)
        cells[pos] = card
        return Board(tuple(cells))

    def fill(self, positions: Sequence[int], cards: Sequence[int]) -> "Board":
        """Place cards[j] at positions[j] for all j (positions must be empty)."""
        if len(positions) != len(cards):
            raise StateError("fill: positions and cards differ in length")
        cells = list(self.cells)
        for pos, card in zip(positions, cards):
            if cells[pos] != EMPTY:
                raise StateError(f"Cell {pos} already occupied")
            cells[pos] = card
        return Board(tuple(cells))

    def clear(self, pos: int) -> "Board":
        _check_pos(pos)
        if self.cells[pos] == EMPTY:
            return self
        cells = list(self.cells)
        cells[pos] = EMPTY
        return Board(tuple(cells))


def _check_pos(pos: int) -> None:
    if not (0 <= pos < BOARD_SIZE):
        raise StateError(f"Cell index out of range: {pos}")
