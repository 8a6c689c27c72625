"""Polynomial root finding via companion-matrix eigenvalues."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import numpy as np
from numpy.typing import ArrayLike

from ..errors import (
    ConvergenceError,
    EmptyInputError,
    ValidationError,
    ZeroPolynomialError,
)

logger = logging.getLogger(__name__)


class EigenSolver(Protocol):
    """Return the (possibly complex, possibly repeated) eigenvalues of a square real matrix."""

    def __call__(self, matrix: np.ndarray) -> np.ndarray:  # pragma: no cover - protocol
        ...


def numpy_eigvals(matrix: np.ndarray) -> np.ndarray:
    """
    Default :class:`EigenSolver` backed by LAPACK ``geev``.

    ``numpy.linalg.eigvals`` reduces to Hessenberg form and runs the shifted
    QR iteration; results are accurate to a few ulps times the matrix norm for
    well-conditioned roots.
    """
    try:
        return np.linalg.eigvals(matrix)
    except np.linalg.LinAlgError as exc:
        raise ConvergenceError(f"eigvals failed: {exc}") from exc


def trim_trailing_zeros(coeffs: ArrayLike) -> np.ndarray:
    """
    Drop trailing coefficients that are exactly zero.

    Raises
    ------
    EmptyInputError
        If ``coeffs`` has no entries.
    ZeroPolynomialError
        If every coefficient is zero.
    """
    c = np.asarray(coeffs, dtype=float).reshape(-1)
    if c.size == 0:
        raise EmptyInputError("Empty polynomial")
    if not np.all(np.isfinite(c)):
        raise ValidationError(f"Polynomial coefficients must be finite, got {c.tolist()}")
    nonzero = np.flatnonzero(c != 0.0)
    if nonzero.size == 0:
        raise ZeroPolynomialError("Zero polynomial")
    return c[: nonzero[-1] + 1]


def companion_matrix(monic: np.ndarray) -> np.ndarray:
    """
    Build the lower-Hessenberg companion matrix of a monic polynomial.

    ``monic`` is in ascending order with ``monic[-1] == 1``. Row 0 holds the
    negated sub-leading coefficients in reverse order and the sub-diagonal is
    all ones, so the characteristic polynomial equals ``monic``.
    """
    deg = monic.size - 1
    m = np.zeros((deg, deg), dtype=float)
    m[0, :] = -monic[deg - 1 :: -1]
    if deg > 1:
        m[np.arange(1, deg), np.arange(0, deg - 1)] = 1.0
    return m


def poly_roots_ascending(
    coeffs: ArrayLike,
    *,
    eigen_solver: Optional[EigenSolver] = None,
) -> np.ndarray:
    """
    Compute the complex roots of a real polynomial.

    Parameters
    ----------
    coeffs:
        Coefficients in ascending powers: ``c[0] + c[1] x + ... + c[n] x**n``.
        Trailing zeros are allowed and ignored.
    eigen_solver:
        Optional replacement for :func:`numpy_eigvals`.

    Returns
    -------
    np.ndarray
        ``complex128`` array of length equal to the effective degree. The
        order is whatever the eigen-solver produced and carries no meaning.
    """
    c = trim_trailing_zeros(coeffs)
    deg = c.size - 1
    if deg == 0:
        # non-zero constant
        return np.empty(0, dtype=complex)

    monic = c / c[deg]
    m = companion_matrix(monic)

    solver = eigen_solver or numpy_eigvals
    try:
        eig = solver(m)
    except np.linalg.LinAlgError as exc:
        raise ConvergenceError(f"eigvals failed: {exc}") from exc

    roots = np.asarray(eig, dtype=complex).reshape(-1)
    logger.debug("Solved degree-%d polynomial: %d roots", deg, roots.size)
    return roots


__all__ = [
    "EigenSolver",
    "companion_matrix",
    "numpy_eigvals",
    "poly_roots_ascending",
    "trim_trailing_zeros",
]
