"""Exception hierarchy for score-based performance measures."""

from __future__ import annotations


class ScoreSweepError(Exception):
    """Base class for all scoresweep errors."""


class InvalidInputError(ScoreSweepError, ValueError):
    """Raised when score samples violate the caller contract (empty, unsorted, non-finite)."""


class ConfigurationError(ScoreSweepError, ValueError):
    """Raised when a measure is configured with an invalid parameter."""


class ComputationError(ScoreSweepError, ArithmeticError):
    """Raised when a measure is undefined at every candidate threshold."""
