"""
Shared parameter checks for indicator functions.
"""
import numbers
from typing import Any, Optional
from .errors import InvalidWindow


def validate_window(window: Any, field: str = "window", indicator: Optional[str] = None) -> int:
    """
    Validate a window parameter.
    Requirements:
    - Integer type (bool is rejected)
    - At least 1
    """
    if isinstance(window, bool) or not isinstance(window, numbers.Integral):
        raise InvalidWindow(
            f"`{field}` must be an integer, got {type(window).__name__}",
            indicator=indicator,
            field=field,
        )
    if window < 1:
        raise InvalidWindow(
            f"`{field}` must be at least 1, got {window}",
            indicator=indicator,
            field=field,
        )
    return int(window)


def validate_window_order(short_window: int, long_window: int, indicator: str = "MACD") -> None:
    """Short window must be strictly smaller than long window."""
    if short_window >= long_window:
        raise InvalidWindow(
            f"`short_window` ({short_window}) must be smaller than `long_window` ({long_window})",
            indicator=indicator,
            field="short_window",
        )
