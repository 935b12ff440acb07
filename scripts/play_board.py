# scripts/play_board.py
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional

from streams.api import expected_value_current_board, expected_values_after_card
from streams.engine.board_state import Act, Action, BoardState, apply_action, is_terminal
from streams.engine.render import best_cell, render_board, render_palette, render_values
from streams.helpers.cards import parse_card
from streams.helpers.errors import SolverError
from streams.helpers.scoring import run_score

HELP = """commands:
  s <card>   select a card (1..30, A..U, or ★)
  p <cell>   place the selected card on cell 0..19
  c <cell>   clear a cell
  d          draw a random card from the deck and select it
  r          reset the board
  q          quit"""


def _show(state: BoardState, sims: int) -> None:
    print(render_board(state))
    print("deck:", render_palette(state))
    b = state.board.to_str()
    if is_terminal(state):
        print(f"final score = {run_score(state.board)}")
        return
    print(f"EV now = {expected_value_current_board(b, sims):.2f}")
    if state.selected is not None:
        vals = expected_values_after_card(b, state.selected, sims)
        print("EV by cell for the selected card:")
        print(render_values(vals, best=best_cell(vals)))


def _parse(line: str, state: BoardState, rng: random.Random) -> Optional[Action]:
    parts = line.split()
    if not parts:
        return None
    cmd, arg = parts[0], (parts[1] if len(parts) > 1 else "")
    if cmd == "s":
        return Action(Act.SELECT, card=parse_card(int(arg) if arg.isdigit() else arg))
    if cmd == "p":
        return Action(Act.PLACE, pos=int(arg))
    if cmd == "c":
        return Action(Act.CLEAR, pos=int(arg))
    if cmd == "d":
        return Action(Act.SELECT, card=rng.choice(state.deck.instances()))
    if cmd == "r":
        return Action(Act.RESET)
    raise ValueError(f"unknown command {cmd!r}")


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--board", type=str, default=None, help="starting board string")
    ap.add_argument("--sims", type=int, default=500)
    ap.add_argument("--seed", type=int, default=None)
    args = ap.parse_args()
    logging.basicConfig(level=logging.WARNING)

    rng = random.Random(args.seed)
    state = BoardState.from_str(args.board) if args.board else BoardState.initial()
    print(HELP)
    _show(state, args.sims)

    for line in sys.stdin:
        line = line.strip()
        if line == "q":
            break
        try:
            action = _parse(line, state, rng)
            if action is None:
                continue
            state = apply_action(state, action)
        except (SolverError, ValueError) as e:
            print(f"error: {e}")
            continue
        _show(state, args.sims)


if __name__ == "__main__":
    main()
