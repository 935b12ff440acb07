from .rollout import rollout, random_completion
from .montecarlo import (
    SolverConfig,
    SENTINEL,
    check_sims,
    estimate_stats,
    estimate_expected_value,
    counterfactual_values,
)

__all__ = [
    "rollout",
    "random_completion",
    "SolverConfig",
    "SENTINEL",
    "check_sims",
    "estimate_stats",
    "estimate_expected_value",
    "counterfactual_values",
]
