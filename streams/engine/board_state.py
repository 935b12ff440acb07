from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import List, Optional

from ..helpers.board import Board, BOARD_SIZE
from ..helpers.cards import ALL_CARDS, EMPTY, card_name
from ..helpers.deck import Deck
from ..helpers.errors import StateError


class Act(IntEnum):
    SELECT = 0   # pick a card from the palette
    PLACE = 1    # put the selected card on an empty cell
    CLEAR = 2    # take a card back off the board
    RESET = 3    # empty board, nothing selected


@dataclass(frozen=True, slots=True)
class Action:
    act: int          # Act enum value
    card: int = 0     # SELECT only
    pos: int = -1     # PLACE / CLEAR only


@dataclass(frozen=True, slots=True)
class BoardState:
    """
    What the UI owns between interactions.

    The deck is always derived from the board, never stored, so the two can
    not drift apart. The solver only ever sees `board` snapshots.
    """
    board: Board
    selected: Optional[int] = None

    @staticmethod
    def initial() -> "BoardState":
        return BoardState(board=Board.empty())

    @staticmethod
    def from_str(board_string: str) -> "BoardState":
        board = Board.from_str(board_string)
        Deck.from_board(board)  # reject impossible boards up front
        return BoardState(board=board)

    @property
    def deck(self) -> Deck:
        return Deck.from_board(self.board)


def is_terminal(state: BoardState) -> bool:
    return state.board.is_complete


def legal_actions(state: BoardState) -> List[Action]:
    acts: List[Action] = [Action(Act.RESET)]
    acts.extend(Action(Act.CLEAR, pos=i) for i, c in enumerate(state.board.cells) if c != EMPTY)
    if is_terminal(state):
        return acts
    deck = state.deck
    acts.extend(Action(Act.SELECT, card=c) for c in ALL_CARDS if deck.count(c) > 0)
    if state.selected is not None:
        acts.extend(Action(Act.PLACE, pos=i) for i in state.board.empty_positions())
    return acts


def apply_action(state: BoardState, action: Action) -> BoardState:
    """Pure reducer: returns a new state, never touches the old one."""
    if action.act == Act.RESET:
        return BoardState.initial()

    if action.act == Act.SELECT:
        if state.deck.count(action.card) <= 0:
            raise StateError(f"Card {card_name(action.card)} is not available")
        return replace(state, selected=action.card)

    if action.act == Act.PLACE:
        if state.selected is None:
            raise StateError("No card selected")
        # selection is re-checked: the board may have changed since SELECT
        if state.deck.count(state.selected) <= 0:
            raise StateError(f"Card {card_name(state.selected)} is not available")
        return BoardState(board=state.board.place(action.pos, state.selected), selected=None)

    if action.act == Act.CLEAR:
        if not (0 <= action.pos < BOARD_SIZE):
            raise StateError(f"Cell index out of range: {action.pos}")
        return replace(state, board=state.board.clear(action.pos))

    raise StateError(f"Unknown action {action.act}")
