# scripts/solver_worker.py
#
# JSON-lines bridge for an out-of-process UI. One request per line on stdin,
# one response per line on stdout:
#   {"type": "ev_current", "board": "...", "sims": 1000, "seed": 1}
#   {"type": "ev_after_card", "board": "...", "card": "7", "sims": 1000}
from __future__ import annotations

import json
import logging
import math
import sys
from typing import Any, Dict, List, Optional

from streams.api import expected_value_current_board, expected_values_after_card
from streams.ai.montecarlo import SolverConfig
from streams.helpers.errors import SolverError

logger = logging.getLogger(__name__)

DEFAULT_SIMS = 1000


def _jwrite(obj: Dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(obj) + "\n")
    sys.stdout.flush()


def _nan_to_none(vals: List[float]) -> List[Optional[float]]:
    # JSON has no NaN; occupied cells go out as null
    return [None if math.isnan(v) else v for v in vals]


def handle(msg: Dict[str, Any], config: SolverConfig) -> Dict[str, Any]:
    t = msg.get("type")
    board = msg.get("board")
    sims = msg.get("sims", DEFAULT_SIMS)
    seed = msg.get("seed")

    try:
        if t == "ev_current":
            ev = expected_value_current_board(board, sims, seed=seed, config=config)
            return {"type": "ev_current", "board": board, "ev": ev}

        if t == "ev_after_card":
            card = msg.get("card")
            vals = expected_values_after_card(board, card, sims, seed=seed, config=config)
            return {"type": "ev_after_card", "board": board, "card": card, "values": _nan_to_none(vals)}
    except SolverError as e:
        return {"type": "error", "kind": type(e).__name__, "message": str(e)}

    return {"type": "error", "kind": "UnknownType", "message": f"Unknown message type: {t}"}


def main() -> None:
    config = SolverConfig()
    for line in sys.stdin:
        line = line.strip()
        if not line:
            continue
        try:
            msg = json.loads(line)
        except json.JSONDecodeError as e:
            _jwrite({"type": "error", "kind": "BadJSON", "message": str(e)})
            continue
        if not isinstance(msg, dict):
            _jwrite({"type": "error", "kind": "BadJSON", "message": "Request must be a JSON object"})
            continue
        try:
            _jwrite(handle(msg, config))
        except Exception as e:
            logger.exception("request failed: %s", line)
            _jwrite({"type": "error", "kind": type(e).__name__, "message": f"Worker exception: {e}"})


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)
    main()
