from .api import expected_value_current_board, expected_values_after_card
from .ai.montecarlo import SolverConfig
from .helpers.errors import SolverError, InputError, StateError, ConfigError

__all__ = [
    "expected_value_current_board",
    "expected_values_after_card",
    "SolverConfig",
    "SolverError",
    "InputError",
    "StateError",
    "ConfigError",
]
