"""
Monte-Carlo expectation of distributions.

Both estimators average n consecutive draws. The probability representation
is given by `dtype`: any numeric-like type that can be built from a number
and supports addition and division (float, numpy.float32, numpy.float64,
fractions.Fraction, ...). Each term is divided by n before being added, so
the rounding order is fixed.
"""

from typing import Callable, Optional, TypeVar

import numpy as np

from dist_lib.distribution.base import Density, Distribution
from dist_lib.exceptions import OperationInvalidError
from dist_lib.logging import log_estimate, log_phase

T = TypeVar('T')
P = TypeVar('P')


def _saturating_count(samples_count: int, dtype: Callable[..., P]) -> P:
    """Convert the sample count to dtype, clamping to its largest finite value."""
    if isinstance(dtype, type) and issubclass(dtype, np.floating):
        return dtype(min(float(samples_count), float(np.finfo(dtype).max)))
    if dtype is float:
        return float(samples_count)
    return dtype(samples_count)


def expectation(
    distribution: Distribution[T, P],
    samples_count: int,
    dtype: Callable[..., P] = float
) -> P:
    """
    Estimate the expectation of a distribution.

    When the distribution carries a density the density-weighted estimate
    is returned; otherwise the mean of the samples themselves, which must
    be convertible to dtype.

    Args:
        distribution: Distribution to sample
        samples_count: Number of draws to average; a non-positive count
            draws nothing and gives zero
        dtype: Probability representation of the result

    Returns:
        The estimated expectation
    """
    if distribution.density is not None:
        return expectation_using_density(distribution, samples_count, dtype=dtype)

    log_phase("expectation", {"mode": "plain", "samples_count": samples_count})
    n = _saturating_count(samples_count, dtype)
    total = dtype(0)
    for sample in distribution.take(samples_count):
        total = total + dtype(sample) / n

    log_estimate("plain", samples_count, total)
    return total


def expectation_using_density(
    distribution: Distribution[T, P],
    samples_count: int,
    density: Optional[Density] = None,
    dtype: Callable[..., P] = float
) -> P:
    """
    Estimate the mean of density(X) over draws X of the distribution.

    Args:
        distribution: Distribution to sample
        samples_count: Number of draws to average
        density: Density to use instead of the distribution's own
        dtype: Probability representation of the result

    Returns:
        The estimated expectation

    Raises:
        OperationInvalidError: If no density is given and the distribution
            has none. Nothing is drawn in that case.
    """
    if density is None:
        density = distribution.density
    if density is None:
        raise OperationInvalidError("Distribution has no density function")

    log_phase("expectation", {"mode": "density", "samples_count": samples_count})
    n = _saturating_count(samples_count, dtype)
    total = dtype(0)
    for sample in distribution.take(samples_count):
        total = total + dtype(density(sample)) / n

    log_estimate("density", samples_count, total)
    return total
