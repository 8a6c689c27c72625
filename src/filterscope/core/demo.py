"""Synthetic input for trying the analysis without a data file."""

from __future__ import annotations

import numpy as np


def demo_signal(n_samples: int = 512) -> np.ndarray:
    """A 5-cycle sine plus a slow low-amplitude component over ``n_samples``."""
    t = np.arange(int(n_samples), dtype=float) / float(n_samples)
    return np.sin(2.0 * np.pi * 5.0 * t) + 0.15 * np.sin(2.0 * t)
