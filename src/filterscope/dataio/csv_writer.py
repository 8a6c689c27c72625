"""CSV writing helpers for analysis results."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Iterable, Sequence

import numpy as np

from ..analysis.bode import FrequencyResponse, magnitude_to_db
from ..analysis.candles import Candle


def write_rows(path: Path, headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
    """
    Write a header row and all data rows to a CSV file.

    Directories are created as needed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(headers)
        writer.writerows(rows)


def write_roots(path: Path, roots: np.ndarray) -> None:
    write_rows(path, ("real", "imag"), ((float(r.real), float(r.imag)) for r in roots))


def write_bode(path: Path, response: FrequencyResponse, *, db_scale: bool = False) -> None:
    """Write the Bode curve; ``db_scale`` converts magnitudes at this boundary."""
    if db_scale:
        values = magnitude_to_db(response.magnitude)
        header = ("frequency", "magnitude_db")
    else:
        values = response.magnitude
        header = ("frequency", "magnitude")
    write_rows(path, header, zip(response.freqs.tolist(), values.tolist()))


def write_candles(path: Path, candles: Iterable[Candle]) -> None:
    write_rows(path, ("t", "open", "high", "low", "close"), (c.as_row() for c in candles))


def write_series(path: Path, values: np.ndarray, name: str = "value") -> None:
    write_rows(path, ("index", name), enumerate(np.asarray(values).tolist()))
