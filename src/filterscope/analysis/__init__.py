"""Numeric analysis of designed low-pass filters and raw series.

Everything here is a pure function of NumPy arrays, free of I/O and GUI
dependencies:

- :mod:`roots` finds polynomial roots through companion-matrix eigenvalues,
- :mod:`zplane` maps delay-operator roots to z-plane zeros and poles,
- :mod:`bode` samples the frequency-response magnitude on a log grid,
- :mod:`candles` summarises samples into open/high/low/close windows,
- :mod:`filters` and :mod:`fft` wrap SciPy/NumPy filter design, zero-phase
  filtering and spectra.
"""

from .bode import FrequencyResponse, bode_mag_logspace, magnitude_to_db
from .candles import Candle, CandleLength, vec_to_candles
from .fft import compute_fft, magnitude_spectrum
from .filters import (
    NYQUIST_PERIOD,
    FilterDesign,
    FilterType,
    apply_zero_phase,
    cutoff_period_to_nyquist,
    design_lowpass,
)
from .roots import EigenSolver, poly_roots_ascending
from .zplane import ROOT_AT_INFINITY, iir_zeros_poles_z, to_z_plane

__all__ = [
    "Candle",
    "CandleLength",
    "EigenSolver",
    "FilterDesign",
    "FilterType",
    "FrequencyResponse",
    "NYQUIST_PERIOD",
    "ROOT_AT_INFINITY",
    "apply_zero_phase",
    "bode_mag_logspace",
    "compute_fft",
    "cutoff_period_to_nyquist",
    "design_lowpass",
    "iir_zeros_poles_z",
    "magnitude_spectrum",
    "magnitude_to_db",
    "poly_roots_ascending",
    "to_z_plane",
    "vec_to_candles",
]
