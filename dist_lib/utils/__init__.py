"""
Utility functions for the distribution library.

This module provides the lazy combinators used to build sampling functions:
per-draw mapping, bounded prefixes, accumulation and rejection filtering.
"""

from dist_lib.utils.iterate import (
    sample_map,
    take,
    accumulate,
    count_while,
    reject,
    retry_limit,
    retry_deadline,
)

__all__ = [
    'sample_map',
    'take',
    'accumulate',
    'count_while',
    'reject',
    'retry_limit',
    'retry_deadline',
]
