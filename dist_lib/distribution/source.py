"""
The shared source of uniform randomness.
"""

from typing import Iterator, Optional

import numpy as np

from dist_lib.distribution.sampling import SamplingFunction


class UniformSource(SamplingFunction[float]):
    """
    Infinite stream of independent uniform draws in [0, 1).

    One source is meant to be created by the program and handed to every
    catalog constructor, so that all distributions consume the same
    entropy stream. Distributions built on the same source are therefore
    not independent of each other once their draws are interleaved.

    The source is not thread safe and cannot be reseeded.
    """

    def __init__(self, seed: Optional[int] = None, block_size: int = 1024):
        """
        Initialize the source.

        Args:
            seed: Optional seed for numpy's default bit generator
            block_size: Number of draws fetched from the generator at once
        """
        self._rng = np.random.default_rng(seed)
        super().__init__(self._draws(block_size))

    def _draws(self, block_size: int) -> Iterator[float]:
        while True:
            yield from self._rng.random(block_size).tolist()

    def next(self) -> float:
        """
        Return a fresh uniform draw.
        """
        return self.advance()
