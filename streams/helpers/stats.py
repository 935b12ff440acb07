from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(slots=True)
class RolloutStats:
    """
    Running mean / variance of rollout scores (Welford).

    Chunks of rollouts each fill their own RolloutStats; merge() folds them
    together afterwards, so no accumulator is ever shared between workers.
    """
    n: int = 0
    mean: float = 0.0
    m2: float = 0.0  # sum of squared deviations from the mean

    def update(self, x: float) -> None:
        self.n += 1
        delta = x - self.mean
        # incremental mean
        self.mean += delta / self.n
        self.m2 += delta * (x - self.mean)

    def merge(self, other: "RolloutStats") -> "RolloutStats":
        if other.n == 0:
            return self
        if self.n == 0:
            self.n, self.mean, self.m2 = other.n, other.mean, other.m2
            return self
        n = self.n + other.n
        delta = other.mean - self.mean
        self.mean += delta * other.n / n
        self.m2 += other.m2 + delta * delta * self.n * other.n / n
        self.n = n
        return self

    @property
    def variance(self) -> float:
        """Unbiased sample variance; 0.0 with fewer than two samples."""
        return self.m2 / (self.n - 1) if self.n > 1 else 0.0

    @property
    def stddev(self) -> float:
        return math.sqrt(self.variance)

    @property
    def stderr(self) -> float:
        return self.stddev / math.sqrt(self.n) if self.n > 0 else float("inf")
