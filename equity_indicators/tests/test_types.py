"""
Unit tests for Candle and input normalization.
"""
import array
from dataclasses import FrozenInstanceError
import unittest
from ..types import Candle, as_prices, candles_to_closes


class TestCandle(unittest.TestCase):

    def test_candle_is_frozen(self):
        candle = Candle(timestamp=5, open=1.0, high=2.0, low=0.5, close=1.5, volume=10.0)
        with self.assertRaises(FrozenInstanceError):
            candle.close = 2.0

    def test_candles_to_closes(self):
        candles = [Candle(timestamp=i, open=0.0, high=0.0, low=0.0, close=i * 2.0, volume=0.0)
                   for i in range(3)]
        self.assertEqual(candles_to_closes(candles), [0.0, 2.0, 4.0])


class TestAsPrices(unittest.TestCase):

    def test_sequences(self):
        self.assertEqual(as_prices([1, 2, 3]), [1.0, 2.0, 3.0])
        self.assertEqual(as_prices((1.5, 2.5)), [1.5, 2.5])
        self.assertEqual(as_prices(array.array("d", [4.0, 5.0])), [4.0, 5.0])
        self.assertEqual(as_prices([]), [])

    def test_returns_copy(self):
        prices = [1.0, 2.0]
        result = as_prices(prices)
        result.append(3.0)
        self.assertEqual(prices, [1.0, 2.0])

    def test_candles(self):
        candles = [Candle(timestamp=0, open=9.0, high=9.0, low=9.0, close=7.0, volume=1.0)]
        self.assertEqual(as_prices(candles), [7.0])


if __name__ == '__main__':
    unittest.main()
