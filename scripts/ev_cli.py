# scripts/ev_cli.py
from __future__ import annotations

import argparse
import logging
import sys

from streams.api import expected_value_current_board, expected_values_after_card
from streams.ai.montecarlo import SolverConfig
from streams.engine.board_state import BoardState
from streams.engine.render import best_cell, render_board, render_values
from streams.helpers.errors import SolverError


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Monte Carlo EV of a 20-cell board.")
    ap.add_argument("board", help="20 chars: '_' empty, 1-9, A-U (10..30), ★ wildcard")
    ap.add_argument("--sims", type=int, default=2000)
    ap.add_argument("--card", type=str, default=None, help="also print per-cell EV after placing this card")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--workers", type=int, default=1)
    ap.add_argument("--chunk_size", type=int, default=256)
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        cfg = SolverConfig(workers=args.workers, chunk_size=args.chunk_size)
        state = BoardState.from_str(args.board)
        ev = expected_value_current_board(args.board, args.sims, seed=args.seed, config=cfg)
        vals = None
        if args.card is not None:
            card = int(args.card) if args.card.isdigit() else args.card
            vals = expected_values_after_card(args.board, card, args.sims, seed=args.seed, config=cfg)
    except SolverError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 2

    print(render_board(state))
    print(f"EV = {ev:.3f}")
    if vals is not None:
        print(f"EV after placing {args.card}:")
        print(render_values(vals, best=best_cell(vals)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
