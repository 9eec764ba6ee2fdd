"""
Tests for the Monte-Carlo expectation estimators.
"""

import itertools
import unittest
from fractions import Fraction
import numpy as np

from dist_lib.distribution import (
    Distribution,
    UniformSource,
    bernoulli,
    expectation,
    expectation_using_density,
    gaussian_central,
    normal_exponential,
    uniform,
)
from dist_lib.distribution.expectation import _saturating_count
from dist_lib.exceptions import OperationInvalidError


class TestExpectation(unittest.TestCase):
    """Test cases for the plain estimator."""

    def setUp(self):
        self.source = UniformSource(seed=31415)

    def test_normal_exponential_loose(self):
        """A few hundred draws already land near 1."""
        estimate = expectation(normal_exponential(self.source), 200)
        self.assertAlmostEqual(estimate, 1.0, delta=0.3)

    def test_normal_exponential_tight(self):
        """The estimate converges to 1 as n grows."""
        estimate = expectation(normal_exponential(self.source), 100000)
        self.assertAlmostEqual(estimate, 1.0, delta=0.02)

    def test_gaussian_mean(self):
        """The mean of Gaussian(2, 1) is 2."""
        estimate = expectation(gaussian_central(self.source, 2.0, 1.0), 50000)
        self.assertAlmostEqual(estimate, 2.0, delta=0.03)

    def test_uses_next_draws(self):
        """The estimator averages the n draws after the current value."""
        d = Distribution(itertools.count())
        self.assertAlmostEqual(expectation(d, 3), 2.0)
        self.assertEqual(d.sample, 3)

    def test_rounding_order(self):
        """Each term is divided by n before it is added."""
        values = [0.1, 0.7, 0.2, 1e-17, 0.3, 0.9]
        n = len(values)
        expected = 0.0
        for v in values:
            expected = expected + v / n
        d = Distribution(iter([0.0] + values))
        self.assertEqual(expectation(d, n), expected)

    def test_negative_count(self):
        """A negative sample count draws nothing and estimates zero."""
        d = Distribution(itertools.count())
        self.assertEqual(expectation(d, -5), 0.0)
        self.assertEqual(d.sample, 0)
        self.assertEqual(d.sample_n(-1), [])

    def test_density_takes_precedence(self):
        """A distribution with a density is estimated through it."""
        d = Distribution(itertools.repeat(2.0), lambda x: 0.5)
        self.assertEqual(expectation(d, 4), 0.5)

    def test_bernoulli(self):
        """The expectation of a Bernoulli is its success rate."""
        estimate = expectation(bernoulli(self.source, 0.25), 100000)
        self.assertAlmostEqual(estimate, 0.25, delta=0.005)

    def test_float32(self):
        """The result is computed in the requested representation."""
        estimate = expectation(uniform(self.source, 0.0, 2.0), 10000, dtype=np.float32)
        self.assertIsInstance(estimate, np.float32)
        self.assertAlmostEqual(float(estimate), 1.0, delta=0.05)

    def test_fraction(self):
        """Exact representations give exact results."""
        d = Distribution(itertools.cycle([1, 2, 3]))
        estimate = expectation(d, 3, dtype=Fraction)
        self.assertIsInstance(estimate, Fraction)
        self.assertEqual(estimate, Fraction(2))

    def test_saturating_count(self):
        """Counts beyond the representation clamp to its largest value."""
        self.assertEqual(_saturating_count(10 ** 6, np.float16), np.float16(65504))
        self.assertEqual(_saturating_count(1000, np.float16), np.float16(1000))
        self.assertEqual(_saturating_count(10 ** 6, float), 1e6)


class TestExpectationUsingDensity(unittest.TestCase):
    """Test cases for the density-weighted estimator."""

    def setUp(self):
        self.source = UniformSource(seed=2718)

    def test_missing_density_fails(self):
        """Without a density the estimator fails on every call."""
        d = normal_exponential(self.source)
        before = d.sample
        for _ in range(3):
            with self.assertRaises(OperationInvalidError):
                expectation_using_density(d, 1000)
        # Nothing was drawn
        self.assertEqual(d.sample, before)

    def test_own_density(self):
        """The distribution's density is used by default."""
        estimate = expectation_using_density(bernoulli(self.source, 0.7), 100000)
        self.assertAlmostEqual(estimate, 0.7, delta=0.005)

    def test_explicit_density(self):
        """An explicit density replaces the distribution's own."""
        d = uniform(self.source, 0.0, 1.0)
        estimate = expectation_using_density(d, 50000, density=lambda x: x * x)
        self.assertAlmostEqual(estimate, 1.0 / 3.0, delta=0.01)

    def test_explicit_density_overrides_own(self):
        """The explicit density wins over an existing one."""
        d = bernoulli(self.source, 0.7)
        estimate = expectation_using_density(d, 1000, density=lambda b: 2.0)
        self.assertAlmostEqual(estimate, 2.0, places=9)

    def test_float64(self):
        """numpy representations are supported."""
        d = bernoulli(self.source, 0.5)
        estimate = expectation_using_density(d, 1000, dtype=np.float64)
        self.assertIsInstance(estimate, np.float64)


if __name__ == '__main__':
    unittest.main()
