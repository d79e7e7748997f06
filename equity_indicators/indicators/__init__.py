"""
Technical Indicators Module
Pure functions for technical analysis.
"""

from .rsi import calculate_rsi
from .macd import calculate_macd, MACDResult
from .ema import calculate_ema

__all__ = [
    "calculate_rsi",
    "calculate_macd",
    "calculate_ema",
    "MACDResult",
]
