"""
Data structures for the indicator engine.
"""
from dataclasses import dataclass
from typing import List, Sequence, Union


@dataclass(frozen=True)
class Candle:
    """
    OHLCV candle.

    timestamp: ms since epoch
    open, high, low, close, volume: float values
    """
    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume: float


PriceData = Union[Sequence[float], Sequence[Candle]]


def candles_to_closes(candles: Sequence[Candle]) -> List[float]:
    """Extract closing prices from candles array."""
    return [candle.close for candle in candles]


def as_prices(data: PriceData) -> List[float]:
    """
    Normalize indicator input into a fresh list of floats.

    Accepts a list of Candle objects (closes are used) or any ordered
    sequence of numbers, including 1-D numpy arrays. The input is never
    modified.
    """
    if len(data) > 0 and isinstance(data[0], Candle):
        return candles_to_closes(data)
    return [float(price) for price in data]
