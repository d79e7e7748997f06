"""
RSI (Relative Strength Index) Indicator

Default window: 14 (settings.RSI_WINDOW)

Formula:
1. Compute gains and losses:
   gain[i] = max(close[i+1] - close[i], 0)
   loss[i] = max(close[i] - close[i+1], 0)

2. Compute initial average gain and loss over the first `window` changes:
   avgGain = sum(gain[0..window]) / window
   avgLoss = sum(loss[0..window]) / window

3. For each price index i in [window, len(closes)), use Wilder's smoothing
   with the change ending at i:
   avgGain = (prevAvgGain * (window - 1) + gain[i-1]) / window
   avgLoss = (prevAvgLoss * (window - 1) + loss[i-1]) / window

4. RS = avgGain / avgLoss  (avgLoss == 0 -> RS = +inf -> RSI = 100)
   RSI = 100 - (100 / (1 + RS))
"""
import logging
import math
from typing import List, Optional
from ..config import settings
from ..errors import NotEnoughData
from ..types import PriceData, as_prices
from ..validators import validate_window
from .sma import simple_mean

logger = logging.getLogger(__name__)


def calculate_rsi(data: PriceData, window: Optional[int] = None) -> List[float]:
    """
    Calculate RSI (Relative Strength Index) using Wilder's smoothing.

    Args:
        data: Ordered prices (earliest first) or a list of Candle objects
        window: RSI window (default: settings.RSI_WINDOW)

    Returns:
        List of len(prices) - window RSI values in [0, 100].

    Raises:
        InvalidWindow: window is not a positive integer
        NotEnoughData: len(prices) <= window
    """
    if window is None:
        window = settings.RSI_WINDOW
    window = validate_window(window, indicator="RSI")
    closes = as_prices(data)

    if len(closes) <= window:
        logger.debug(f"RSI({window}) rejected: {len(closes)} prices")
        raise NotEnoughData(
            f"RSI({window}) needs more than {window} prices, got {len(closes)}",
            indicator="RSI",
            required=window + 1,
            available=len(closes),
        )

    # Step 1: Compute gains and losses
    changes = [curr - prev for prev, curr in zip(closes, closes[1:])]
    gains = [change if change > 0 else 0.0 for change in changes]
    losses = [-change if change < 0 else 0.0 for change in changes]

    # Step 2: Seed averages over the first window
    avg_gain = simple_mean(gains, window)
    avg_loss = simple_mean(losses, window)

    rsi_values = []

    # Step 3: Wilder's smoothing
    for i in range(window, len(closes)):
        avg_gain = (avg_gain * (window - 1) + gains[i - 1]) / window
        avg_loss = (avg_loss * (window - 1) + losses[i - 1]) / window

        # Step 4: Calculate RS and RSI
        rs = avg_gain / avg_loss if avg_loss > 0 else math.inf
        rsi_values.append(100.0 - (100.0 / (1.0 + rs)))

    logger.debug(f"RSI({window}) computed {len(rsi_values)} values from {len(closes)} prices")
    return rsi_values
