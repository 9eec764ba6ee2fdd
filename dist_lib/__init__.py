"""
Distribution Library.

This library provides composable probability distributions: lazy infinite
sampling sequences sharing one source of uniform randomness, a catalog of
classic families, acceptance-rejection construction of new distributions
and Monte-Carlo estimation of expectations.
"""

__version__ = '0.1.0'

# Import submodules to make them available through the package
from dist_lib import exceptions
from dist_lib import logging
from dist_lib import utils
from dist_lib import distribution

__all__ = [
    'exceptions',
    'logging',
    'utils',
    'distribution'
]
