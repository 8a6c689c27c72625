"""Low-pass filter design and zero-phase filtering helpers."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike
from scipy import signal

from ..errors import ValidationError

logger = logging.getLogger(__name__)

# Samples per cycle at the Nyquist frequency.
NYQUIST_PERIOD = 2.0

# scipy.signal requires a digital Wn strictly below 1.
_MAX_WN = 1.0 - 1e-9


class FilterType(Enum):
    """Supported low-pass prototypes."""

    BUTTERWORTH = "butterworth"
    CHEBYSHEV1 = "chebyshev1"
    CHEBYSHEV2 = "chebyshev2"

    @property
    def label(self) -> str:
        return _FILTER_LABELS[self]

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, value: "str | FilterType") -> "FilterType":
        """Resolve a user-supplied name (case-insensitive, common aliases)."""
        if isinstance(value, FilterType):
            return value
        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return _FILTER_ALIASES[key]
        except KeyError:
            raise ValidationError(
                f"Unknown filter type {value!r}; expected one of "
                f"{', '.join(t.value for t in cls)}"
            ) from None


_FILTER_LABELS = {
    FilterType.BUTTERWORTH: "Butterworth",
    FilterType.CHEBYSHEV1: "Chebyshev I",
    FilterType.CHEBYSHEV2: "Chebyshev II",
}

_FILTER_ALIASES = {
    "butterworth": FilterType.BUTTERWORTH,
    "butter": FilterType.BUTTERWORTH,
    "chebyshev1": FilterType.CHEBYSHEV1,
    "chebyshev_1": FilterType.CHEBYSHEV1,
    "chebyshev_i": FilterType.CHEBYSHEV1,
    "cheby1": FilterType.CHEBYSHEV1,
    "chebyshev2": FilterType.CHEBYSHEV2,
    "chebyshev_2": FilterType.CHEBYSHEV2,
    "chebyshev_ii": FilterType.CHEBYSHEV2,
    "cheby2": FilterType.CHEBYSHEV2,
}


@dataclass(frozen=True)
class FilterDesign:
    """
    Designed digital low-pass filter.

    ``b`` and ``a`` are ascending powers of ``z**-1`` with the numerator
    rescaled for unity DC gain; ``sos`` holds the same filter as second-order
    sections for numerically stable filtering.
    """

    filter_type: FilterType
    b: np.ndarray
    a: np.ndarray
    sos: np.ndarray

    @property
    def order(self) -> int:
        return int(self.a.size - 1)


def cutoff_period_to_nyquist(period: float) -> float:
    """
    Convert a cutoff period (samples per cycle) into a fraction of Nyquist.

    Raises
    ------
    ValidationError
        If ``period`` is below :data:`NYQUIST_PERIOD` or NaN. An infinite
        period yields 0.0, which :func:`design_lowpass` rejects.
    """
    period = float(period)
    if math.isnan(period) or period < NYQUIST_PERIOD:
        raise ValidationError(
            f"Period of {period} is below the nyquist period of {NYQUIST_PERIOD}"
        )
    return NYQUIST_PERIOD / period


def normalize_lowpass_dc(b: np.ndarray, a: np.ndarray) -> np.ndarray:
    """Return ``b`` scaled so that ``H(1) = sum(b) / sum(a) = 1``."""
    gain = float(np.sum(b)) / float(np.sum(a))
    if gain == 0.0 or not math.isfinite(gain):
        raise ValidationError(f"Cannot normalize filter with DC gain {gain}")
    return b / gain


def _normalize_sos_dc(sos: np.ndarray) -> np.ndarray:
    gain = 1.0
    for section in sos:
        gain *= float(np.sum(section[:3])) / float(np.sum(section[3:]))
    out = np.array(sos, dtype=float, copy=True)
    if gain != 0.0 and math.isfinite(gain):
        out[0, :3] /= gain
    return out


def design_lowpass(
    filter_type: "FilterType | str",
    order: int,
    cutoff: float,
    ripple_db: Optional[float] = None,
    attenuation_db: Optional[float] = None,
) -> FilterDesign:
    """
    Design a digital low-pass filter.

    Parameters
    ----------
    filter_type:
        Butterworth, Chebyshev I or Chebyshev II.
    order:
        Filter order (>= 1).
    cutoff:
        Cutoff as a fraction of the Nyquist rate, in (0, 1]. A value of
        exactly 1 is nudged just below Nyquist.
    ripple_db:
        Passband ripple, required for Chebyshev I.
    attenuation_db:
        Stopband attenuation, required for Chebyshev II.
    """
    ftype = FilterType.parse(filter_type)
    order = int(order)
    if order < 1:
        raise ValidationError(f"order must be >= 1, got {order}")
    cutoff = float(cutoff)
    if not (0.0 < cutoff <= 1.0):
        raise ValidationError(f"cutoff must be within (0, 1], got {cutoff}")
    wn = min(cutoff, _MAX_WN)

    if ftype is FilterType.BUTTERWORTH:
        b, a = signal.butter(order, wn, btype="low", analog=False)
        sos = signal.butter(order, wn, btype="low", analog=False, output="sos")
    elif ftype is FilterType.CHEBYSHEV1:
        if ripple_db is None or ripple_db <= 0:
            raise ValidationError(f"ripple_db must be > 0 for {ftype.label}, got {ripple_db}")
        b, a = signal.cheby1(order, ripple_db, wn, btype="low", analog=False)
        sos = signal.cheby1(order, ripple_db, wn, btype="low", analog=False, output="sos")
    else:
        if attenuation_db is None or attenuation_db <= 0:
            raise ValidationError(
                f"attenuation_db must be > 0 for {ftype.label}, got {attenuation_db}"
            )
        b, a = signal.cheby2(order, attenuation_db, wn, btype="low", analog=False)
        sos = signal.cheby2(order, attenuation_db, wn, btype="low", analog=False, output="sos")

    b = normalize_lowpass_dc(np.asarray(b, dtype=float), np.asarray(a, dtype=float))
    logger.debug("Designed %s order=%d wn=%.6f", ftype.label, order, wn)
    return FilterDesign(
        filter_type=ftype,
        b=b,
        a=np.asarray(a, dtype=float),
        sos=_normalize_sos_dc(np.asarray(sos, dtype=float)),
    )


def min_len_for_sosfiltfilt(sos: np.ndarray) -> int:
    """Smallest input length ``scipy.signal.sosfiltfilt`` accepts with default padding."""
    sos = np.atleast_2d(sos)
    n_sections = sos.shape[0]
    ntaps = 2 * n_sections + 1
    bzeros = int(np.count_nonzero(sos[:, 2] == 0))
    azeros = int(np.count_nonzero(sos[:, 5] == 0))
    ntaps -= min(bzeros, azeros)
    return 3 * ntaps + 1


def apply_zero_phase(design: FilterDesign, data: ArrayLike) -> np.ndarray:
    """
    Filter ``data`` forward and backward (zero phase) with ``design``.

    Returns
    -------
    np.ndarray
        Filtered data with the same length as the input.
    """
    data_arr = np.asarray(data, dtype=float).reshape(-1)
    min_cnt = min_len_for_sosfiltfilt(design.sos)
    if data_arr.size < min_cnt:
        raise ValidationError(
            f"Requires {min_cnt} points for filtering. Got {data_arr.size}"
        )
    return signal.sosfiltfilt(design.sos, data_arr)


__all__ = [
    "FilterDesign",
    "FilterType",
    "NYQUIST_PERIOD",
    "apply_zero_phase",
    "cutoff_period_to_nyquist",
    "design_lowpass",
    "min_len_for_sosfiltfilt",
    "normalize_lowpass_dc",
]
