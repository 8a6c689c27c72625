"""Utilities for loading sample series from CSV files."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np

from ..errors import EmptyInputError, ValidationError


def _looks_numeric_csv_line(line: str) -> bool:
    """Heuristically decide if a CSV line is numeric-only (no header)."""
    stripped = line.strip()
    if not stripped:
        return False
    tokens = [t for t in stripped.split(",") if t]
    if not tokens:
        return False
    try:
        for t in tokens:
            float(t)
        return True
    except ValueError:
        return False


def load_csv(path: Path) -> Tuple[np.ndarray, List[str]]:
    """
    Load a CSV file containing numeric data.

    The file may optionally include a single header row, which is returned
    as the column names. Without a header the names are ``"0"``, ``"1"``, ...

    Returns
    -------
    data : np.ndarray
        2-D float array, one row per line.
    columns : list[str]
        Column names.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        first_line = f.readline()
        rest = f.read()

    if _looks_numeric_csv_line(first_line):
        buffer = io.StringIO(first_line + rest)
        columns: List[str] = []
    else:
        buffer = io.StringIO(rest)
        columns = [c.strip() for c in next(csv.reader([first_line]), [])]

    data = np.loadtxt(buffer, delimiter=",", ndmin=2)
    if data.size == 0:
        raise EmptyInputError(f"{path} contains no samples")
    if not columns:
        columns = [str(i) for i in range(data.shape[1])]
    return data, columns


def load_series(path: Path, column: Optional[Union[str, int]] = None) -> np.ndarray:
    """
    Load one column of a CSV file as a 1-D float series.

    Parameters
    ----------
    path:
        CSV file, header optional.
    column:
        Header name or zero-based index. Defaults to the last column, so a
        ``date,value`` file yields the values.
    """
    path = Path(path)
    if not path.exists():
        raise ValidationError(f"{path} does not exist")
    data, columns = load_csv(path)

    if column is None:
        idx = data.shape[1] - 1
    elif isinstance(column, int) or str(column).lstrip("-").isdigit():
        idx = int(column)
    elif column in columns:
        idx = columns.index(column)
    else:
        raise ValidationError(f"Column {column!r} not found in {path}; available: {columns}")

    if not -data.shape[1] <= idx < data.shape[1]:
        raise ValidationError(f"Column index {idx} out of range for {data.shape[1]} columns")
    return np.ascontiguousarray(data[:, idx], dtype=float)
