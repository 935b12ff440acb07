from __future__ import annotations

import logging
import math
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..helpers.board import Board, BOARD_SIZE
from ..helpers.cards import card_name, is_card
from ..helpers.deck import Deck, check_conservation
from ..helpers.errors import ConfigError, InputError, StateError
from ..helpers.scoring import Scorer, run_score
from ..helpers.stats import RolloutStats
from .rng import SeedLike, seed_sequence, spawn_seeds
from .rollout import rollout

logger = logging.getLogger(__name__)

# Entry for occupied cells in a counterfactual vector. Callers ignore it.
SENTINEL = math.nan

# (board cells, deck counts, number of rollouts, seed, scorer)
ChunkTask = Tuple[Tuple[int, ...], Tuple[int, ...], int, int, Scorer]


@dataclass(frozen=True, slots=True)
class SolverConfig:
    """
    Execution knobs. None of them change what is estimated, only how fast.

    workers:    <= 1 runs every chunk in-process; > 1 spreads chunks over a
                process pool (scorer must then be a picklable module-level function)
    chunk_size: rollouts per independent random stream. The chunk layout and
                its seeds depend only on sims and chunk_size, so a seeded call
                gives the same answer for any worker count.
    """
    workers: int = 1
    chunk_size: int = 256

    def __post_init__(self) -> None:
        if self.workers < 0:
            raise ConfigError(f"workers must be >= 0, got {self.workers}")
        if self.chunk_size < 1:
            raise ConfigError(f"chunk_size must be >= 1, got {self.chunk_size}")


DEFAULT_CONFIG = SolverConfig()


def check_sims(sims: int) -> int:
    """Non-positive simulation counts are rejected, never clamped."""
    if isinstance(sims, bool) or not isinstance(sims, int):
        raise ConfigError(f"Simulation count must be an int, got {sims!r}")
    if sims <= 0:
        raise ConfigError(f"Simulation count must be >= 1, got {sims}")
    return sims


def _chunk_sizes(sims: int, chunk_size: int) -> List[int]:
    full, rest = divmod(sims, chunk_size)
    return [chunk_size] * full + ([rest] if rest else [])


# ---------------------------
# Chunk execution
# ---------------------------

def _run_chunk(cells: Tuple[int, ...], counts: Tuple[int, ...], n: int, seed: int, scorer: Scorer) -> RolloutStats:
    # Raw tuples cross the process boundary; rebuild the typed values here.
    board = Board(cells)
    deck = Deck(counts)
    rng = random.Random(seed)
    stats = RolloutStats()
    for _ in range(n):
        stats.update(rollout(board, deck, scorer, rng))
    return stats


def _run_tasks(tasks: Sequence[ChunkTask], config: SolverConfig) -> List[RolloutStats]:
    """Results come back in task order so the final reduction is deterministic."""
    if config.workers <= 1 or len(tasks) <= 1:
        return [_run_chunk(*t) for t in tasks]
    logger.debug("running %d chunks on %d worker processes", len(tasks), config.workers)
    with ProcessPoolExecutor(max_workers=config.workers) as ex:
        futures = [ex.submit(_run_chunk, *t) for t in tasks]
        return [f.result() for f in futures]


def _chunk_tasks(board: Board, deck: Deck, sims: int, scorer: Scorer, ss, chunk_size: int) -> List[ChunkTask]:
    sizes = _chunk_sizes(sims, chunk_size)
    seeds = spawn_seeds(ss, len(sizes))
    return [(board.cells, deck.counts, n, s, scorer) for n, s in zip(sizes, seeds)]


def _reduce(parts: Sequence[RolloutStats]) -> RolloutStats:
    total = RolloutStats()
    for p in parts:
        total.merge(p)
    return total


def _exact(board: Board, sims: int, scorer: Scorer) -> RolloutStats:
    return RolloutStats(n=sims, mean=float(scorer(board)), m2=0.0)


# ---------------------------
# Monte Carlo estimator
# ---------------------------

def estimate_stats(
    board: Board,
    deck: Deck,
    sims: int,
    scorer: Scorer = run_score,
    config: Optional[SolverConfig] = None,
    seed: SeedLike = None,
) -> RolloutStats:
    """
    Mean/variance of `sims` independent random completions of board.

    A complete board is scored directly (no sampling), so its estimate is
    exact for every sims.
    """
    check_sims(sims)
    check_conservation(board, deck)
    cfg = config or DEFAULT_CONFIG

    if board.is_complete:
        return _exact(board, sims, scorer)

    logger.debug("estimate board=%s sims=%d empty=%d", board, sims, board.num_empty)
    tasks = _chunk_tasks(board, deck, sims, scorer, seed_sequence(seed), cfg.chunk_size)
    return _reduce(_run_tasks(tasks, cfg))


def estimate_expected_value(
    board: Board,
    deck: Deck,
    sims: int,
    scorer: Scorer = run_score,
    config: Optional[SolverConfig] = None,
    seed: SeedLike = None,
) -> float:
    return estimate_stats(board, deck, sims, scorer=scorer, config=config, seed=seed).mean


# ---------------------------
# Counterfactual cell sweep
# ---------------------------

def counterfactual_values(
    board: Board,
    deck: Deck,
    card: int,
    sims: int,
    scorer: Scorer = run_score,
    config: Optional[SolverConfig] = None,
    seed: SeedLike = None,
) -> List[float]:
    """
    For each empty cell i: estimated EV of the board with `card` placed at i
    (and removed from the deck). Occupied cells hold SENTINEL.

    Every cell gets its own child seed sequence, so per-cell noise is
    independent. All (cell, chunk) tasks share one pool.
    """
    check_sims(sims)
    if not is_card(card):
        raise InputError(f"Not a card id: {card!r}")
    check_conservation(board, deck)
    cfg = config or DEFAULT_CONFIG

    if deck.count(card) <= 0:
        raise StateError(f"Card {card_name(card)} is exhausted")
    deck_after = deck.remove(card)

    empties = board.empty_positions()
    out = [SENTINEL] * BOARD_SIZE
    if not empties:
        return out

    cell_seqs = seed_sequence(seed).spawn(len(empties))
    logger.debug("counterfactual board=%s card=%s sims=%d cells=%d", board, card_name(card), sims, len(empties))

    tasks: List[ChunkTask] = []
    spans: List[Tuple[int, int, int]] = []  # (cell, first task, task count)
    for pos, ss in zip(empties, cell_seqs):
        placed = board.place(pos, card)
        if placed.is_complete:
            out[pos] = _exact(placed, sims, scorer).mean
            continue
        cell_tasks = _chunk_tasks(placed, deck_after, sims, scorer, ss, cfg.chunk_size)
        spans.append((pos, len(tasks), len(cell_tasks)))
        tasks.extend(cell_tasks)

    results = _run_tasks(tasks, cfg)
    for pos, start, count in spans:
        out[pos] = _reduce(results[start:start + count]).mean
    return out
