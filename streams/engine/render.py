from __future__ import annotations

import math
from typing import Optional, Sequence

from ..helpers.board import BOARD_COLS, BOARD_ROWS
from ..helpers.cards import ALL_CARDS, EMPTY, card_name, card_to_char
from .board_state import BoardState


def _fmt_cell(card: int) -> str:
    return " ." if card == EMPTY else f"{card_name(card):>2}"


def render_board(state: BoardState) -> str:
    """4x5 grid; each row prefixed with the index of its first cell."""
    lines = []
    for r, row in enumerate(state.board.rows()):
        lines.append(f"{r * BOARD_COLS:>2} | " + " ".join(_fmt_cell(c) for c in row))
    return "\n".join(lines)


def render_palette(state: BoardState) -> str:
    """Remaining cards with their counts; the selected card is bracketed."""
    deck = state.deck
    parts = []
    for c in ALL_CARDS:
        n = deck.count(c)
        if n == 0:
            continue
        label = f"{card_to_char(c)}x{n}" if n > 1 else card_to_char(c)
        parts.append(f"[{label}]" if c == state.selected else label)
    return " ".join(parts)


def render_values(values: Sequence[float], best: Optional[int] = None) -> str:
    """Per-cell EV grid; NaN (occupied) cells print as dots, best cell gets a '*'."""
    lines = []
    for r in range(BOARD_ROWS):
        cells = []
        for i in range(r * BOARD_COLS, (r + 1) * BOARD_COLS):
            v = values[i]
            if math.isnan(v):
                cells.append(f"{'.':>7}")
            else:
                cells.append(f"{v:>6.1f}" + ("*" if i == best else " "))
        lines.append(" ".join(cells))
    return "\n".join(lines)


def best_cell(values: Sequence[float]) -> Optional[int]:
    best = None
    for i, v in enumerate(values):
        if math.isnan(v):
            continue
        if best is None or v > values[best]:
            best = i
    return best
