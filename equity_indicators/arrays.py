"""
numpy adapters for the indicator functions.

Same algorithms as equity_indicators.indicators, typed for numpy callers:
inputs are coerced to 1-D float64 arrays and outputs come back as arrays.
"""
from __future__ import annotations
from typing import Optional

import numpy as np

from .indicators.ema import calculate_ema
from .indicators.macd import MACDResult, calculate_macd
from .indicators.rsi import calculate_rsi


def _as_vector(prices) -> np.ndarray:
    values = np.asarray(prices, dtype=np.float64)
    if values.ndim != 1:
        raise ValueError(f"prices must be a 1-D array, got {values.ndim}-D")
    return values


def ema_array(prices, window: int) -> np.ndarray:
    """
    Exponential Moving Average over a numpy array.

    Returns:
        Array of len(prices) - window + 1 values.
    """
    return np.asarray(calculate_ema(_as_vector(prices), window), dtype=np.float64)


def rsi_array(prices, window: Optional[int] = None) -> np.ndarray:
    """
    Relative Strength Index over a numpy array.

    Returns:
        Array of len(prices) - window values in [0, 100].
    """
    return np.asarray(calculate_rsi(_as_vector(prices), window), dtype=np.float64)


def macd_array(
    prices,
    short_window: Optional[int] = None,
    long_window: Optional[int] = None,
    signal_window: Optional[int] = None,
) -> MACDResult:
    """MACD over a numpy array; each field of the result is a float64 array."""
    result = calculate_macd(_as_vector(prices), short_window, long_window, signal_window)
    return MACDResult(*(np.asarray(series, dtype=np.float64) for series in result))
