from __future__ import annotations

from typing import List, Union

import numpy as np

SeedLike = Union[None, int, np.random.SeedSequence]


def seed_sequence(seed: SeedLike = None) -> np.random.SeedSequence:
    """None -> fresh OS entropy (production); int -> reproducible (tests, analysis)."""
    if isinstance(seed, np.random.SeedSequence):
        return seed
    return np.random.SeedSequence(seed)


def spawn_seeds(ss: np.random.SeedSequence, n: int) -> List[int]:
    """
    n statistically independent integer seeds derived from ss.
    Each one seeds its own random.Random, so workers never share a generator.
    """
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in ss.spawn(n)]
