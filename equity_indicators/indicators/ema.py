"""
EMA (Exponential Moving Average) Indicator

Formula:
- multiplier = 2 / (window + 1)
- EMA(today) = (close(today) - EMA(yesterday)) * multiplier + EMA(yesterday)
- Initial EMA seed: simple moving average of first N prices.
"""
import logging
from typing import List
from ..errors import NotEnoughData
from ..types import PriceData, as_prices
from ..validators import validate_window
from .sma import simple_mean

logger = logging.getLogger(__name__)


def calculate_ema(data: PriceData, window: int) -> List[float]:
    """
    Calculate Exponential Moving Average (EMA).

    Args:
        data: Ordered prices (earliest first) or a list of Candle objects
        window: EMA window (e.g., 20, 50, 200)

    Returns:
        List of len(prices) - window + 1 EMA values. The first value is the
        SMA of the first `window` prices.

    Raises:
        InvalidWindow: window is not a positive integer
        NotEnoughData: fewer than `window` prices
    """
    window = validate_window(window, indicator="EMA")
    closes = as_prices(data)

    if len(closes) < window:
        logger.debug(f"EMA({window}) rejected: {len(closes)} prices")
        raise NotEnoughData(
            f"EMA({window}) needs at least {window} prices, got {len(closes)}",
            indicator="EMA",
            required=window,
            available=len(closes),
        )

    multiplier = 2.0 / (window + 1.0)

    sma = simple_mean(closes, window)
    ema_values = [sma]

    for i in range(window, len(closes)):
        prev_ema = ema_values[-1]
        ema_values.append((closes[i] - prev_ema) * multiplier + prev_ema)

    logger.debug(f"EMA({window}) computed {len(ema_values)} values from {len(closes)} prices")
    return ema_values
