"""
Tests for sampling functions and the uniform source.
"""

import copy
import itertools
import unittest
import numpy as np

from dist_lib.distribution import SamplingFunction, UniformSource
from dist_lib.exceptions import OperationInvalidError
from dist_lib.utils import take


class TestSamplingFunction(unittest.TestCase):
    """Test cases for the sampling function cursor."""

    def test_current_before_advance(self):
        """Reading an unstarted cursor fails."""
        sf = SamplingFunction(itertools.count())
        self.assertFalse(sf.started)
        with self.assertRaises(OperationInvalidError):
            sf.current

    def test_advance_and_peek(self):
        """Only advance moves the cursor."""
        sf = SamplingFunction(itertools.count())
        self.assertEqual(sf.advance(), 0)
        self.assertTrue(sf.started)
        self.assertEqual(sf.current, 0)
        self.assertEqual(sf.current, 0)
        self.assertEqual(next(sf), 1)
        self.assertEqual(sf.current, 1)

    def test_iteration_shares_cursor(self):
        """Iterating a cursor returns the cursor itself."""
        sf = SamplingFunction(itertools.count())
        self.assertIs(iter(sf), sf)
        self.assertEqual(list(take(sf, 3)), [0, 1, 2])
        self.assertEqual(sf.advance(), 3)

    def test_copies_share_stream(self):
        """Copying a handle never forks the stream."""
        sf = SamplingFunction(itertools.count())
        sf.advance()
        self.assertIs(copy.copy(sf), sf)
        self.assertIs(copy.deepcopy(sf), sf)


class TestUniformSource(unittest.TestCase):
    """Test cases for the uniform source."""

    def test_draws_in_unit_interval(self):
        """A million draws all lie in [0, 1)."""
        source = UniformSource(seed=3)
        draws = np.fromiter(take(source, 10 ** 6), dtype=float, count=10 ** 6)
        self.assertEqual(len(draws), 10 ** 6)
        self.assertGreaterEqual(draws.min(), 0.0)
        self.assertLess(draws.max(), 1.0)
        self.assertAlmostEqual(draws.mean(), 0.5, delta=0.005)

    def test_seeded_sources_agree(self):
        """Sources with the same seed yield the same stream."""
        a = UniformSource(seed=5)
        b = UniformSource(seed=5)
        self.assertEqual([a.next() for _ in range(10)], [b.next() for _ in range(10)])

    def test_next_is_advance(self):
        """next() moves the shared cursor."""
        source = UniformSource(seed=1)
        u = source.next()
        self.assertEqual(source.current, u)
        self.assertIsInstance(u, float)


if __name__ == '__main__':
    unittest.main()
