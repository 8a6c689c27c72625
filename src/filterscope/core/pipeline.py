"""One analysis run: design, filter, roots, spectrum, Bode and candles."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..analysis.bode import bode_mag_logspace
from ..analysis.candles import vec_to_candles
from ..analysis.fft import magnitude_spectrum
from ..analysis.filters import (
    apply_zero_phase,
    cutoff_period_to_nyquist,
    design_lowpass,
)
from ..analysis.zplane import iir_zeros_poles_z
from ..errors import ValidationError
from ..tools.debug import time_block
from .models import AnalysisState, FilterSettings

logger = logging.getLogger(__name__)

__all__ = ["run_analysis"]


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def run_analysis(
    state: AnalysisState,
    settings: Optional[FilterSettings] = None,
) -> AnalysisState:
    """
    Recompute every derived result for ``state.raw_data``.

    Parameters
    ----------
    state:
        Current analysis; must hold raw data.
    settings:
        Parameters to use instead of ``state.settings``.

    Returns
    -------
    AnalysisState
        A new state with all results replaced. The input is never modified,
        so when any step raises the caller still holds the last good state.

    Raises
    ------
    FilterScopeError
        The first failure among the steps, unchanged.
    """
    settings = settings or state.settings
    if state.raw_data is None:
        raise ValidationError("No data set")
    raw = np.asarray(state.raw_data, dtype=float)

    with time_block("cutoff"):
        cutoff = cutoff_period_to_nyquist(settings.cutoff_period)

    with time_block("design"):
        design = design_lowpass(
            settings.filter_type,
            settings.order,
            cutoff,
            ripple_db=settings.ripple_db,
            attenuation_db=settings.attenuation_db,
        )

    with time_block("filter"):
        filtered = apply_zero_phase(design, raw)

    with time_block("zeros/poles"):
        zeros, poles = iir_zeros_poles_z(design.b, design.a)

    with time_block("spectrum"):
        spectrum = magnitude_spectrum(filtered)

    with time_block("bode"):
        bode = bode_mag_logspace(
            design.b, design.a, settings.sample_rate, settings.bode_points
        )

    with time_block("candles"):
        candles = tuple(vec_to_candles(raw, settings.candle_size))

    logger.info(
        "Analysis complete: %s order=%d cutoff=%.4f, %d zeros, %d poles, %d candles",
        design.filter_type.label,
        settings.order,
        cutoff,
        zeros.size,
        poles.size,
        len(candles),
    )
    return AnalysisState(
        raw_data=state.raw_data,
        settings=settings,
        design=design,
        filtered_data=_frozen(filtered),
        zeros=_frozen(zeros),
        poles=_frozen(poles),
        spectrum=_frozen(spectrum),
        bode=bode,
        candles=candles,
    )
