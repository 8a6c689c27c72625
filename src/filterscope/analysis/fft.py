"""FFT helpers."""

from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike

from ..errors import EmptyInputError, ValidationError


def magnitude_spectrum(data: ArrayLike) -> np.ndarray:
    """
    One-sided FFT magnitude of a real 1-D sequence.

    Returns
    -------
    np.ndarray
        ``len(data) // 2 + 1`` non-negative magnitudes (unnormalized).
    """
    arr = np.asarray(data, dtype=float).reshape(-1)
    if arr.size == 0:
        raise EmptyInputError("Could not take fft of data: signal is empty")
    return np.abs(np.fft.rfft(arr))


def spectrum_freqs(n_samples: int, sample_rate: float) -> np.ndarray:
    """Frequency bins matching :func:`magnitude_spectrum` for ``n_samples`` inputs."""
    if sample_rate <= 0:
        raise ValidationError(f"sample_rate must be > 0, got {sample_rate}")
    return np.fft.rfftfreq(int(n_samples), d=1.0 / float(sample_rate))


def compute_fft(data: ArrayLike, sample_rate: float) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(freqs, magnitude)`` for a real-valued signal."""
    magnitude = magnitude_spectrum(data)
    n_samples = np.asarray(data).reshape(-1).size
    return spectrum_freqs(n_samples, sample_rate), magnitude


__all__ = ["compute_fft", "magnitude_spectrum", "spectrum_freqs"]
