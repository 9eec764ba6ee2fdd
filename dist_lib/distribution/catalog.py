"""
A catalog of classic distributions.

Every sampling function here draws, directly or through other
distributions, from the UniformSource passed as first argument. Parameters
are not validated: out of range values give meaningless samples, and a
Geometric with p = 1 never emits.
"""

import math
import operator
from typing import Callable, Iterable, Iterator, Optional, TypeVar, Union

from dist_lib.distribution.base import Distribution
from dist_lib.distribution.sampling import SamplingFunction
from dist_lib.distribution.source import UniformSource
from dist_lib.utils.iterate import RetryHook, accumulate, count_while, reject, sample_map

# Type variable for the domain of a Bayes rejection distribution
D = TypeVar('D')

Proposal = Union[Distribution, SamplingFunction, Iterable]


def _neg_log(v: float) -> float:
    """-ln(v), with a draw of exactly 0.0 mapped to +inf."""
    return -math.log(v) if v > 0.0 else math.inf


# Sampling functions

def unit_uniform_sampling_function(source: UniformSource) -> SamplingFunction[float]:
    """
    The uniform sampling function over [0, 1).

    This is the source itself: holders share its cursor.
    """
    return source


def uniform_sampling_function(source: UniformSource, a: float, b: float) -> SamplingFunction[float]:
    """
    Uniform sampling function over the interval [a, b).

    Args:
        source: The shared uniform source
        a: Minimum value of the interval
        b: Maximum value of the interval
    """
    return SamplingFunction(sample_map(lambda v: a + v * (b - a), source))


def point_uniform_sampling_function(source: UniformSource) -> SamplingFunction[float]:
    """
    Uniform draws below 0.5 collapsed onto 0.0.

    It has a point mass at 0.0 and is continuous elsewhere, so it cannot be
    described by either a discrete or a continuous density.
    """
    return SamplingFunction(sample_map(lambda v: 0.0 if v < 0.5 else v, source))


def bernoulli_sampling_function(source: UniformSource, p: float) -> SamplingFunction[bool]:
    """Bernoulli sampling function: True iff the uniform draw is <= p."""
    return SamplingFunction(sample_map(lambda v: v <= p, source))


def binomial_sampling_function(source: UniformSource, p: float, n: int) -> SamplingFunction[float]:
    """
    Binomial sampling function: number of successes in n Bernoulli(p) tosses.

    Args:
        source: The shared uniform source
        p: Probability of success of each toss
        n: Number of tosses
    """
    toss = bernoulli(source, p)
    return SamplingFunction(
        accumulate(toss.next_sample, n, lambda acc, hit: acc + 1.0 if hit else acc, 0.0)
    )


def geometric_sampling_function(source: UniformSource, p: float) -> SamplingFunction[float]:
    """
    Geometric sampling function: number of Bernoulli(p) successes before the
    first failure.
    """
    toss = bernoulli(source, p)
    return SamplingFunction(count_while(toss.next_sample))


def normal_exponential_sampling_function(source: UniformSource) -> SamplingFunction[float]:
    """Exponential sampling function with rate 1, by inversion."""
    return SamplingFunction(sample_map(_neg_log, source))


def _box_mueller(source: UniformSource, mean: float, variance: float) -> Iterator[float]:
    while True:
        u = source.next()
        v = source.next()
        yield mean + variance * math.sqrt(2.0 * _neg_log(u)) * math.cos(2.0 * math.pi * v)


def gaussian_box_mueller_sampling_function(
    source: UniformSource,
    mean: float,
    variance: float
) -> SamplingFunction[float]:
    """
    Gaussian sampling function as defined by Box and Mueller.

    Two uniform draws are used per sample. Note that the spread factor
    multiplies the standard normal draw directly.
    """
    return SamplingFunction(_box_mueller(source, mean, variance))


def gaussian_central_sampling_function(
    source: UniformSource,
    mean: float,
    variance: float
) -> SamplingFunction[float]:
    """
    Gaussian sampling function based on the central limit theorem.

    The sum of 12 uniform draws minus 6 has mean 0 and variance 1.
    """
    standard = accumulate(source.next, 12, operator.add, -6.0)
    return SamplingFunction(sample_map(lambda z: mean + variance * z, standard))


def gaussian_rejection_sampling_function(
    source: UniformSource,
    mean: float,
    variance: float,
    retry_hook: Optional[RetryHook] = None
) -> SamplingFunction[float]:
    """
    Gaussian sampling function by rejection from the exponential.

    Two exponential draws y1, y2 are accepted when y2 >= (y1 - 1)^2 / 2;
    y1 is then a half-normal draw and a fair coin, tossed only on
    acceptance, chooses its sign.

    Args:
        source: The shared uniform source
        mean: Mean of the distribution
        variance: Spread factor applied to the standard draw
        retry_hook: Optional hook bounding the rejection loop
    """
    exponential = normal_exponential(source)
    fair = bernoulli(source, 0.5)

    def propose():
        return exponential.next_sample(), exponential.next_sample()

    def accept(ys) -> bool:
        y1, y2 = ys
        return y2 >= ((y1 - 1.0) * (y1 - 1.0)) / 2.0

    def emit(ys) -> float:
        y1 = ys[0]
        return mean + (variance * y1 if fair.next_sample() else -variance * y1)

    return SamplingFunction(reject(propose, accept, emit, retry_hook=retry_hook))


def _as_sampling_function(proposal: Proposal) -> SamplingFunction:
    if isinstance(proposal, Distribution):
        return proposal.sampling_function
    if isinstance(proposal, SamplingFunction):
        return proposal
    return SamplingFunction(proposal)


def bayes_rejection_sampling_function(
    source: UniformSource,
    density: Callable[[D], float],
    envelope: float,
    proposal: Proposal,
    retry_hook: Optional[RetryHook] = None
) -> SamplingFunction[D]:
    """
    Rejection sampling function over the domain of a proposal.

    Each attempt reads the current proposal value x, then draws u; x is
    emitted when u < density(x) / envelope. The proposal is advanced after
    every attempt.
    The result follows density(x) * q(x) normalised, provided
    density(x) <= envelope wherever the proposal q can land.

    Args:
        source: The shared uniform source
        density: Probability (or weight) function over the domain
        envelope: Upper bound of the density over the proposal's support
        proposal: Distribution, sampling function or iterable of candidates
        retry_hook: Optional hook bounding the rejection loop
    """
    candidates = _as_sampling_function(proposal)
    if not candidates.started:
        candidates.advance()

    def propose():
        # The candidate is read before u is drawn, so a proposal sharing the
        # source cursor is never tested against its own value
        x = candidates.current
        return source.next(), x

    def accept(attempt) -> bool:
        u, x = attempt
        return u < density(x) / envelope

    return SamplingFunction(reject(
        propose,
        accept,
        emit=operator.itemgetter(1),
        advance=candidates.advance,
        retry_hook=retry_hook
    ))


# Distributions

def unit_uniform(source: UniformSource) -> Distribution[float, float]:
    """
    Unit uniform distribution.

    Since it shares the source's cursor, constructing it advances the source.
    """
    return Distribution(unit_uniform_sampling_function(source))


def uniform(source: UniformSource, a: float, b: float) -> Distribution[float, float]:
    """Uniform distribution over the interval [a, b)."""
    return Distribution(uniform_sampling_function(source, a, b))


def point_uniform(source: UniformSource) -> Distribution[float, float]:
    """Distribution built on top of the point uniform sampling function."""
    return Distribution(point_uniform_sampling_function(source))


def bernoulli(source: UniformSource, p: float) -> Distribution[bool, float]:
    """
    Bernoulli distribution.

    Its density weighs True as 1.0 and False as 0.0, so the density-weighted
    expectation is the success rate.
    """
    return Distribution(bernoulli_sampling_function(source, p), lambda b: 1.0 if b else 0.0)


def binomial(source: UniformSource, p: float, n: int) -> Distribution[float, float]:
    """Binomial distribution of n tosses with success probability p."""
    return Distribution(binomial_sampling_function(source, p, n))


def geometric(source: UniformSource, p: float) -> Distribution[float, float]:
    """Geometric distribution counting successes before the first failure."""
    return Distribution(geometric_sampling_function(source, p))


def normal_exponential(source: UniformSource) -> Distribution[float, float]:
    """Exponential distribution with rate 1."""
    return Distribution(normal_exponential_sampling_function(source))


def gaussian_box_mueller(source: UniformSource, mean: float, variance: float) -> Distribution[float, float]:
    """Gaussian distribution sampled with the Box-Mueller transform."""
    return Distribution(gaussian_box_mueller_sampling_function(source, mean, variance))


def gaussian_central(source: UniformSource, mean: float, variance: float) -> Distribution[float, float]:
    """Gaussian distribution sampled through the central limit theorem."""
    return Distribution(gaussian_central_sampling_function(source, mean, variance))


def gaussian_rejection(
    source: UniformSource,
    mean: float,
    variance: float,
    retry_hook: Optional[RetryHook] = None
) -> Distribution[float, float]:
    """Gaussian distribution sampled by rejection from the exponential."""
    return Distribution(gaussian_rejection_sampling_function(source, mean, variance, retry_hook))


def bayes_rejection(
    source: UniformSource,
    density: Callable[[D], float],
    envelope: float,
    proposal: Proposal,
    retry_hook: Optional[RetryHook] = None
) -> Distribution[D, float]:
    """
    Distribution over the proposal's domain obtained by acceptance-rejection.

    See bayes_rejection_sampling_function for the parameters.
    """
    return Distribution(
        bayes_rejection_sampling_function(source, density, envelope, proposal, retry_hook)
    )
