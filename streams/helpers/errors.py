from __future__ import annotations


class SolverError(ValueError):
    """Base class for everything the solver refuses to compute."""


class InputError(SolverError):
    """Malformed board encoding: wrong length or unknown character."""


class StateError(SolverError):
    """Board/deck state cannot support the request (card exhausted, deck depleted, cell occupied)."""


class ConfigError(SolverError):
    """Bad tuning parameter, e.g. a non-positive simulation count."""
