"""
Simple moving average seed shared by EMA and RSI.
"""
from typing import Sequence


def simple_mean(values: Sequence[float], window: int) -> float:
    """
    Mean of the first `window` values.

    Adds left to right with plain float addition, so the seed is the same on
    every Python version (the builtin sum() is compensated on 3.12+).
    """
    total = 0.0
    for value in values[:window]:
        total += value
    return total / window
