"""Exception types raised by the filterscope analysis core.

Every error subclasses :class:`ValueError` so callers that already guard
numeric helpers with ``except ValueError`` keep working.
"""

from __future__ import annotations


class FilterScopeError(ValueError):
    """Base class for all analysis failures (carries a readable message)."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class EmptyInputError(FilterScopeError):
    """A coefficient or sample sequence had zero length."""

    kind = "empty_input"


class ZeroPolynomialError(FilterScopeError):
    """All polynomial coefficients were exactly zero."""

    kind = "zero_polynomial"


class ConvergenceError(FilterScopeError):
    """The eigenvalue iteration did not converge."""

    kind = "convergence"


class InvalidChunkSizeError(FilterScopeError):
    """Candle aggregation was asked for a non-positive chunk size."""

    kind = "invalid_chunk_size"


class ValidationError(FilterScopeError):
    """A parameter was outside its accepted range (e.g. cutoff period)."""

    kind = "validation"


__all__ = [
    "FilterScopeError",
    "EmptyInputError",
    "ZeroPolynomialError",
    "ConvergenceError",
    "InvalidChunkSizeError",
    "ValidationError",
]
