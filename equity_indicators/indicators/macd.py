"""
MACD (Moving Average Convergence Divergence) Indicator

Default parameters (settings.MACD_*):
- Short EMA: 12
- Long EMA: 26
- Signal EMA: 9

Steps:
1. Compute EMA(short) and EMA(long)
2. MACD line = EMA(short) - EMA(long), aligned where EMA(long) starts
3. Signal line = EMA(signal) of the MACD line
4. Histogram = MACD - Signal, aligned where the signal line starts
"""
import logging
from typing import Dict, List, NamedTuple, Optional
from ..config import settings
from ..types import PriceData, as_prices
from ..validators import validate_window, validate_window_order
from .ema import calculate_ema

logger = logging.getLogger(__name__)


class MACDResult(NamedTuple):
    """MACD output. All three series have the same length."""
    macd_line: List[float]
    signal_line: List[float]
    histogram: List[float]

    def to_dict(self) -> Dict[str, List[float]]:
        return {
            "macdLine": list(self.macd_line),
            "signalLine": list(self.signal_line),
            "histogram": list(self.histogram),
        }


def calculate_macd(
    data: PriceData,
    short_window: Optional[int] = None,
    long_window: Optional[int] = None,
    signal_window: Optional[int] = None,
) -> MACDResult:
    """
    Calculate MACD (Moving Average Convergence Divergence).

    Args:
        data: Ordered prices (earliest first) or a list of Candle objects
        short_window: Fast EMA window (default: settings.MACD_SHORT_WINDOW)
        long_window: Slow EMA window (default: settings.MACD_LONG_WINDOW)
        signal_window: Signal EMA window (default: settings.MACD_SIGNAL_WINDOW)

    Returns:
        MACDResult(macd_line, signal_line, histogram), all aligned to the
        same trailing suffix of the prices.

    Raises:
        InvalidWindow: a window is not a positive integer, or
            short_window >= long_window
        NotEnoughData: propagated unchanged from whichever EMA ran out of data
    """
    if short_window is None:
        short_window = settings.MACD_SHORT_WINDOW
    if long_window is None:
        long_window = settings.MACD_LONG_WINDOW
    if signal_window is None:
        signal_window = settings.MACD_SIGNAL_WINDOW

    short_window = validate_window(short_window, field="short_window", indicator="MACD")
    long_window = validate_window(long_window, field="long_window", indicator="MACD")
    signal_window = validate_window(signal_window, field="signal_window", indicator="MACD")
    validate_window_order(short_window, long_window)

    closes = as_prices(data)

    # Step 1: Compute both EMAs
    ema_short = calculate_ema(closes, short_window)
    ema_long = calculate_ema(closes, long_window)

    # EMA(short)[0] corresponds to closes[short_window-1],
    # EMA(long)[0] to closes[long_window-1]
    ema_short = ema_short[long_window - short_window:]

    # Step 2: MACD line
    macd_line = [short - long for short, long in zip(ema_short, ema_long)]

    # Step 3: Signal line
    signal_line = calculate_ema(macd_line, signal_window)
    macd_line = macd_line[len(macd_line) - len(signal_line):]

    # Step 4: Histogram
    histogram = [macd - signal for macd, signal in zip(macd_line, signal_line)]

    logger.debug(
        f"MACD({short_window},{long_window},{signal_window}) computed "
        f"{len(histogram)} values from {len(closes)} prices"
    )
    return MACDResult(macd_line, signal_line, histogram)
