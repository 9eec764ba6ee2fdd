"""
Distribution module.

This module provides lazy, infinite sampling functions rooted in one shared
uniform source, the distributions built on them, a catalog of classic
families and Monte-Carlo estimators of expectations.
"""

from dist_lib.distribution.sampling import SamplingFunction
from dist_lib.distribution.source import UniformSource
from dist_lib.distribution.base import Density, Distribution
from dist_lib.distribution.catalog import (
    unit_uniform,
    uniform,
    point_uniform,
    bernoulli,
    binomial,
    geometric,
    normal_exponential,
    gaussian_box_mueller,
    gaussian_central,
    gaussian_rejection,
    bayes_rejection,
)
from dist_lib.distribution.expectation import expectation, expectation_using_density
from dist_lib.distribution.registry import Catalog, CatalogEntry

__all__ = [
    'SamplingFunction',
    'UniformSource',
    'Density',
    'Distribution',
    'unit_uniform',
    'uniform',
    'point_uniform',
    'bernoulli',
    'binomial',
    'geometric',
    'normal_exponential',
    'gaussian_box_mueller',
    'gaussian_central',
    'gaussian_rejection',
    'bayes_rejection',
    'expectation',
    'expectation_using_density',
    'Catalog',
    'CatalogEntry',
]
