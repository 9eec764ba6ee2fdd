"""
Base class for distributions built on a sampling function.
"""

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from dist_lib.distribution.sampling import SamplingFunction
from dist_lib.utils.iterate import take

# Type variables for the domain and the probability representation
T = TypeVar('T')
P = TypeVar('P')

# A density maps a domain value to its probability (or weight)
Density = Callable[[T], P]


class Distribution(Generic[T, P]):
    """
    A distribution of values of a domain T.

    A distribution binds one sampling function and an optional density
    mapping each value to a probability of type P. Without a density, raw
    samples are treated as unit-weighted.

    The sampling function is advanced once on construction, so `sample` is
    defined immediately. Iterating the distribution and calling
    `next_sample` move the same cursor: there is no replay.

    Example:
        >>> from dist_lib.distribution import UniformSource
        >>> source = UniformSource(seed=1)
        >>> coin = Distribution((u <= 0.5 for u in source), lambda b: 1.0 if b else 0.0)
        >>> coin.next_sample() in (True, False)
        True
    """

    def __init__(
        self,
        sampling_function: Union[SamplingFunction[T], Iterable[T]],
        density: Optional[Density] = None
    ):
        """
        Initialize a distribution.

        Args:
            sampling_function: Sampling function defining the distribution.
                Any other iterable is wrapped in a SamplingFunction.
            density: Probability function associated with the values, if known
        """
        if not isinstance(sampling_function, SamplingFunction):
            sampling_function = SamplingFunction(sampling_function)
        self._sampling_function = sampling_function
        self._density = density
        self._sampling_function.advance()

    @property
    def sampling_function(self) -> SamplingFunction[T]:
        """The sampling function (cursor) of this distribution."""
        return self._sampling_function

    @property
    def density(self) -> Optional[Density]:
        """The density function, or None if unknown."""
        return self._density

    @property
    def sample(self) -> T:
        """The current sample. Reading it does not advance the distribution."""
        return self._sampling_function.current

    def next_sample(self) -> T:
        """
        Advance the distribution and return the new sample.

        Returns:
            A sample from the distribution
        """
        return self._sampling_function.advance()

    def take(self, n: int) -> Iterator[T]:
        """
        Lazily yield the next n samples.
        """
        return take(self._sampling_function, n)

    def sample_n(self, n: int) -> List[T]:
        """
        Return the next n samples from this distribution.

        Args:
            n: Number of samples to generate

        Returns:
            List of n samples
        """
        return list(self.take(n))

    def __iter__(self) -> SamplingFunction[T]:
        # Always the same cursor; the sequence is infinite
        return self._sampling_function

    def __repr__(self) -> str:
        density = "with density" if self._density is not None else "no density"
        return f"Distribution(sample={self.sample!r}, {density})"
