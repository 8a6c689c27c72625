"""Digital Bode magnitude on a log-spaced frequency grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np
from numpy.typing import ArrayLike

MIN_BODE_POINTS = 16


@dataclass(frozen=True, eq=False)
class FrequencyResponse:
    """Parallel arrays of strictly increasing frequencies and linear magnitudes."""

    freqs: np.ndarray
    magnitude: np.ndarray

    def __len__(self) -> int:
        return int(self.freqs.size)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for f, mag in zip(self.freqs, self.magnitude):
            yield float(f), float(mag)

    def finite(self) -> "FrequencyResponse":
        """Drop samples whose magnitude is NaN (undefined, not plottable)."""
        mask = np.isfinite(self.magnitude)
        return FrequencyResponse(freqs=self.freqs[mask], magnitude=self.magnitude[mask])


def _eval_delay_poly(coeffs: np.ndarray, c: float, s: float) -> complex:
    # running e^{-j w k}, advanced by (c - js) once per coefficient
    zr, zi = 1.0, 0.0
    acc_r, acc_i = 0.0, 0.0
    for ck in coeffs:
        acc_r += ck * zr
        acc_i += ck * zi
        zr, zi = zr * c + zi * s, zi * c - zr * s
    return complex(acc_r, acc_i)


def bode_mag_logspace(
    b: ArrayLike,
    a: ArrayLike,
    sample_rate: float,
    n_points: int,
) -> FrequencyResponse:
    """
    Evaluate ``|H(e^{jw})|`` for the filter ``b / a`` on a log-spaced grid.

    Parameters
    ----------
    b, a:
        Numerator and denominator coefficients, ascending powers of ``z**-1``.
    sample_rate:
        Samples per unit time. ``sample_rate=1`` puts the x-axis in cycles
        per sample.
    n_points:
        Number of grid points, clamped to at least 16.

    Returns
    -------
    FrequencyResponse
        Frequencies from ``max(fs * 1e-4, 1e-9)`` to ``max(fs / 2, 10 * f_min)``
        inclusive and the *linear* magnitude at each. Samples where the
        denominator vanishes are NaN. A zero sample rate gives an
        undefined rotation and NaN magnitudes rather than an error. Use :func:`magnitude_to_db` to convert.

    Notes
    -----
    The rotation is accumulated incrementally rather than recomputing
    ``cos``/``sin`` per term; for very high orders (well above 20) the running
    unit vector can drift from unit magnitude.
    """
    num = np.asarray(b, dtype=float).reshape(-1)
    den = np.asarray(a, dtype=float).reshape(-1)
    fs = float(sample_rate)
    n_points = max(int(n_points), MIN_BODE_POINTS)

    f_min = max(fs * 1e-4, 1e-9)
    f_max = max(fs * 0.5, f_min * 10.0)
    log_fmin = math.log(f_min)
    log_fmax = math.log(f_max)

    freqs = np.empty(n_points, dtype=float)
    mags = np.empty(n_points, dtype=float)

    for i in range(n_points):
        t = i / (n_points - 1)
        f = math.exp(log_fmin + t * (log_fmax - log_fmin))
        omega = 2.0 * math.pi * f / fs if fs != 0.0 else math.inf
        if math.isfinite(omega):
            c, s = math.cos(omega), math.sin(omega)
        else:
            # undefined rotation, samples come out NaN
            c = s = math.nan

        h_num = _eval_delay_poly(num, c, s)
        h_den = _eval_delay_poly(den, c, s)

        den_mag2 = h_den.real * h_den.real + h_den.imag * h_den.imag
        if den_mag2 > 0.0:
            mag = abs(h_num) / math.sqrt(den_mag2)
        else:
            mag = math.nan

        freqs[i] = f
        mags[i] = mag

    return FrequencyResponse(freqs=freqs, magnitude=mags)


def magnitude_to_db(magnitude: ArrayLike) -> np.ndarray:
    """
    Convert linear magnitude to decibels (``20 * log10(magnitude)``).

    Zero maps to ``-inf`` and NaN stays NaN; no warnings are emitted.
    """
    mag = np.asarray(magnitude, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return 20.0 * np.log10(mag)


__all__ = [
    "FrequencyResponse",
    "MIN_BODE_POINTS",
    "bode_mag_logspace",
    "magnitude_to_db",
]
