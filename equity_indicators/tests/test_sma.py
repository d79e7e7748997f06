"""
Unit tests for the shared SMA seed.
"""
import unittest
from ..indicators.sma import simple_mean


class TestSimpleMean(unittest.TestCase):

    def test_mean_of_first_window(self):
        self.assertEqual(simple_mean([1.0, 2.0, 3.0, 100.0], 3), 2.0)

    def test_in_order_addition(self):
        """Values are added left to right without compensation."""
        self.assertEqual(simple_mean([1e16, 1.0, -1e16], 3), 0.0)
        self.assertEqual(simple_mean([1.0, 1e16, -1e16], 3), 0.0)
        self.assertEqual(simple_mean([1e16, -1e16, 1.0], 3), 1.0 / 3)


if __name__ == '__main__':
    unittest.main()
