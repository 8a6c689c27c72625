"""Mapping of delay-operator roots onto the z-plane."""

from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike

from .roots import poly_roots_ascending

ROOT_AT_INFINITY = complex(np.inf, np.inf)

PzTuple = Tuple[np.ndarray, np.ndarray]


def to_z_plane(roots_w: ArrayLike) -> np.ndarray:
    """
    Convert roots in ``w = z**-1`` into z-plane locations ``z = 1 / w``.

    A root with ``|w| == 0`` is mapped to ``inf + infj`` instead of dividing
    by zero. The sentinel itself maps to ``nan + nanj``. Element order is
    preserved.
    """
    w = np.asarray(roots_w, dtype=complex).reshape(-1)
    z = np.full(w.shape, ROOT_AT_INFINITY, dtype=complex)
    finite = np.abs(w) != 0.0
    with np.errstate(invalid="ignore"):
        z[finite] = 1.0 / w[finite]
    return z


def iir_zeros_poles_z(b: ArrayLike, a: ArrayLike) -> PzTuple:
    """
    Return ``(zeros, poles)`` of the IIR filter ``b / a`` in the z-plane.

    ``b`` and ``a`` are ascending powers of the delay operator. Root-solver
    errors for either polynomial propagate unchanged.
    """
    zeros_w = poly_roots_ascending(b)
    poles_w = poly_roots_ascending(a)
    return to_z_plane(zeros_w), to_z_plane(poles_w)


__all__ = ["ROOT_AT_INFINITY", "iir_zeros_poles_z", "to_z_plane"]
