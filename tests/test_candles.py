from __future__ import annotations

import numpy as np
import pytest

from filterscope.analysis.candles import Candle, CandleLength, vec_to_candles
from filterscope.errors import InvalidChunkSizeError


def test_pairs_of_samples() -> None:
    candles = vec_to_candles([1, 2, 3, 4, 5, 6], 2)
    assert candles == [
        Candle(t=0, open=1, high=2, low=1, close=2),
        Candle(t=1, open=3, high=4, low=3, close=4),
        Candle(t=2, open=5, high=6, low=5, close=6),
    ]


def test_trailing_partial_window_is_dropped() -> None:
    candles = vec_to_candles([1, 2, 3], 2)
    assert candles == [Candle(t=0, open=1, high=2, low=1, close=2)]


def test_shorter_than_one_window_gives_no_candles() -> None:
    assert vec_to_candles([1.0, 2.0], 3) == []
    assert vec_to_candles([], 4) == []


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_chunk_size_fails(size: int) -> None:
    with pytest.raises(InvalidChunkSizeError):
        vec_to_candles([1.0, 2.0], size)


def test_high_low_within_window() -> None:
    candles = vec_to_candles([3.0, 9.0, -1.0, 4.0, 2.0, 2.5, 7.0, 0.0], 4)
    assert candles[0] == Candle(t=0, open=3.0, high=9.0, low=-1.0, close=4.0)
    assert candles[1] == Candle(t=1, open=2.0, high=7.0, low=0.0, close=0.0)


def test_ohlc_invariant_on_random_walk() -> None:
    rng = np.random.default_rng(3)
    data = np.cumsum(rng.normal(size=1000))
    candles = vec_to_candles(data, 7)
    assert len(candles) == 1000 // 7
    for i, c in enumerate(candles):
        assert c.t == i
        assert c.low <= min(c.open, c.close)
        assert max(c.open, c.close) <= c.high
        assert c.open == data[i * 7]
        assert c.close == data[i * 7 + 6]


def test_calendar_presets() -> None:
    data = np.arange(100, dtype=float)
    weekly = vec_to_candles(data, CandleLength.WEEKLY)
    monthly = vec_to_candles(data, CandleLength.MONTHLY)
    assert len(weekly) == 14
    assert len(monthly) == 3
    assert monthly[2] == Candle(t=2, open=60.0, high=89.0, low=60.0, close=89.0)
    assert str(CandleLength.YEARLY) == "Yearly"


def test_as_row_order() -> None:
    assert Candle(t=1, open=2, high=5, low=1, close=3).as_row() == (1, 2, 5, 1, 3)
