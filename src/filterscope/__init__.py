"""filterscope: pole/zero, Bode and candle analysis of low-pass filtered series.

The numeric core lives in :mod:`filterscope.analysis`; :mod:`filterscope.core`
orchestrates one analysis run over an immutable :class:`AnalysisState`.
"""

from .analysis import (
    Candle,
    CandleLength,
    FilterDesign,
    FilterType,
    FrequencyResponse,
    NYQUIST_PERIOD,
    bode_mag_logspace,
    cutoff_period_to_nyquist,
    iir_zeros_poles_z,
    magnitude_to_db,
    poly_roots_ascending,
    to_z_plane,
    vec_to_candles,
)
from .core import AnalysisState, FilterSettings, run_analysis
from .errors import (
    ConvergenceError,
    EmptyInputError,
    FilterScopeError,
    InvalidChunkSizeError,
    ValidationError,
    ZeroPolynomialError,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisState",
    "Candle",
    "CandleLength",
    "ConvergenceError",
    "EmptyInputError",
    "FilterDesign",
    "FilterScopeError",
    "FilterSettings",
    "FilterType",
    "FrequencyResponse",
    "InvalidChunkSizeError",
    "NYQUIST_PERIOD",
    "ValidationError",
    "ZeroPolynomialError",
    "bode_mag_logspace",
    "cutoff_period_to_nyquist",
    "iir_zeros_poles_z",
    "magnitude_to_db",
    "poly_roots_ascending",
    "run_analysis",
    "to_z_plane",
    "vec_to_candles",
]
