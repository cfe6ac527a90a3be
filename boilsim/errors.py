"""Custom exceptions for the :mod:`boilsim` package.

The thermodynamic core never raises for degenerate physical input; these
exceptions belong to the edges (substance loading, session runner misuse).
"""


class BoilSimError(Exception):
    """Base exception for boiling simulator errors."""


class SubstanceDataError(BoilSimError, ValueError):
    """A substance definition is missing required data or violates its invariants."""


class SubstanceNotFoundError(SubstanceDataError, LookupError):
    """No substance definition exists for the requested id."""


class SimulationError(BoilSimError, RuntimeError):
    """The simulation session was driven in an invalid way."""


__all__ = [
    "BoilSimError",
    "SubstanceDataError",
    "SubstanceNotFoundError",
    "SimulationError",
]
