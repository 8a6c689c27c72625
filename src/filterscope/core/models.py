"""Immutable records describing one analysis run."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

import numpy as np

from ..analysis.bode import FrequencyResponse
from ..analysis.candles import Candle
from ..analysis.filters import FilterDesign, FilterType

DEFAULT_CUTOFF_PERIOD = 4.2
DEFAULT_ORDER = 4
DEFAULT_RIPPLE_DB = 5.0
DEFAULT_ATTENUATION_DB = 40.0
DEFAULT_SAMPLE_RATE = 1.0
DEFAULT_BODE_POINTS = 100
DEFAULT_CANDLE_SIZE = 2


@dataclass(frozen=True)
class FilterSettings:
    """User-selected filter parameters; ``cutoff_period`` is in samples per cycle."""

    filter_type: FilterType = FilterType.BUTTERWORTH
    cutoff_period: float = DEFAULT_CUTOFF_PERIOD
    order: int = DEFAULT_ORDER
    ripple_db: float = DEFAULT_RIPPLE_DB
    attenuation_db: float = DEFAULT_ATTENUATION_DB
    sample_rate: float = DEFAULT_SAMPLE_RATE
    bode_points: int = DEFAULT_BODE_POINTS
    candle_size: int = DEFAULT_CANDLE_SIZE


@dataclass(frozen=True, eq=False)
class AnalysisState:
    """
    The current analysis: raw input, settings and every derived result.

    Instances are never mutated. A successful run returns a new state with
    all results replaced together; a failed run leaves the old one in place.
    """

    raw_data: Optional[np.ndarray] = None
    settings: FilterSettings = FilterSettings()
    design: Optional[FilterDesign] = None
    filtered_data: Optional[np.ndarray] = None
    zeros: Optional[np.ndarray] = None
    poles: Optional[np.ndarray] = None
    spectrum: Optional[np.ndarray] = None
    bode: Optional[FrequencyResponse] = None
    candles: Optional[Tuple[Candle, ...]] = None

    @property
    def has_results(self) -> bool:
        return self.design is not None

    def with_data(self, raw_data) -> "AnalysisState":
        """Return a fresh state holding ``raw_data`` and no results."""
        arr = np.array(raw_data, dtype=float).reshape(-1)
        arr.setflags(write=False)
        return AnalysisState(raw_data=arr, settings=self.settings)

    def with_settings(self, settings: FilterSettings) -> "AnalysisState":
        return replace(self, settings=settings)

    def cleared(self) -> "AnalysisState":
        """Drop all derived results, keeping data and settings."""
        return AnalysisState(raw_data=self.raw_data, settings=self.settings)
