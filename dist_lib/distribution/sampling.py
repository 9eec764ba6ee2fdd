"""
The sampling function: a forward-only cursor over an infinite sequence.
"""

from typing import TypeVar, Generic, Iterable

from dist_lib.exceptions import OperationInvalidError

T = TypeVar('T')

_UNSET = object()


class SamplingFunction(Generic[T]):
    """
    Stateful cursor over a (usually infinite) sequence of samples.

    Only `advance` produces a new value; `current` re-reads the last one.
    Every holder of a handle observes the same stream: there is no rewind,
    and copying the handle returns the handle itself.
    """

    def __init__(self, values: Iterable[T]):
        self._values = iter(values)
        self._current = _UNSET

    @property
    def started(self) -> bool:
        """Whether the cursor has been advanced at least once."""
        return self._current is not _UNSET

    @property
    def current(self) -> T:
        """
        Return the most recent value without advancing.

        Raises:
            OperationInvalidError: If the cursor was never advanced
        """
        if self._current is _UNSET:
            raise OperationInvalidError("Sampling function has not been advanced yet")
        return self._current

    def advance(self) -> T:
        """
        Move to the next value of the sequence and return it.
        """
        self._current = next(self._values)
        return self._current

    def __iter__(self) -> 'SamplingFunction[T]':
        return self

    def __next__(self) -> T:
        return self.advance()

    def __copy__(self) -> 'SamplingFunction[T]':
        return self

    def __deepcopy__(self, memo) -> 'SamplingFunction[T]':
        return self

    def __repr__(self) -> str:
        if self.started:
            return f"{type(self).__name__}(current={self._current!r})"
        return f"{type(self).__name__}(<not started>)"
