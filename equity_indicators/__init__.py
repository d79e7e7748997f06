"""
Equity Indicators
Pure, testable RSI, EMA and MACD calculations over price series.
"""

from .config import settings, IndicatorSettings
from .errors import (
    ErrorCode,
    IndicatorError,
    IndicatorErrorModel,
    InvalidWindow,
    NotEnoughData,
)
from .types import Candle, candles_to_closes
from .indicators.rsi import calculate_rsi
from .indicators.macd import calculate_macd, MACDResult
from .indicators.ema import calculate_ema
from .arrays import ema_array, rsi_array, macd_array
from .logging_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    # Config
    "settings",
    "IndicatorSettings",
    "configure_logging",
    # Errors
    "ErrorCode",
    "IndicatorError",
    "IndicatorErrorModel",
    "InvalidWindow",
    "NotEnoughData",
    # Types
    "Candle",
    "candles_to_closes",
    # Indicators
    "calculate_rsi",
    "calculate_macd",
    "calculate_ema",
    "MACDResult",
    # numpy adapters
    "ema_array",
    "rsi_array",
    "macd_array",
]
