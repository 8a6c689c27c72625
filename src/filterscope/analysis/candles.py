"""Open/high/low/close aggregation of raw samples."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

import numpy as np
from numpy.typing import ArrayLike

from ..errors import InvalidChunkSizeError


@dataclass(frozen=True)
class Candle:
    """One fixed-width window summary; ``t`` is the window's ordinal index."""

    t: float
    open: float
    high: float
    low: float
    close: float

    def as_row(self) -> tuple[float, float, float, float, float]:
        return (self.t, self.open, self.high, self.low, self.close)


class CandleLength(Enum):
    """Calendar-style chunk presets for daily series."""

    WEEKLY = 7
    MONTHLY = 30
    YEARLY = 365

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label


ChunkSize = Union[int, CandleLength]


def vec_to_candles(data: ArrayLike, chunk_size: ChunkSize) -> List[Candle]:
    """
    Partition ``data`` into consecutive full windows of ``chunk_size`` samples.

    A trailing window with fewer than ``chunk_size`` samples is dropped.

    Raises
    ------
    InvalidChunkSizeError
        If ``chunk_size`` is not a positive integer.
    """
    if isinstance(chunk_size, CandleLength):
        chunk_size = chunk_size.value
    size = int(chunk_size)
    if size <= 0:
        raise InvalidChunkSizeError(
            f"Cannot have a chunk size of {size} in candle making function"
        )

    arr = np.asarray(data, dtype=float).reshape(-1)
    n_full = arr.size // size
    if n_full == 0:
        return []

    blocks = arr[: n_full * size].reshape(n_full, size)
    highs = blocks.max(axis=1)
    lows = blocks.min(axis=1)
    return [
        Candle(
            t=float(i),
            open=float(blocks[i, 0]),
            high=float(highs[i]),
            low=float(lows[i]),
            close=float(blocks[i, -1]),
        )
        for i in range(n_full)
    ]


__all__ = ["Candle", "CandleLength", "ChunkSize", "vec_to_candles"]
