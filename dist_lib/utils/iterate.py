"""
Iteration utilities for sampling functions.

This module provides the combinators that sampling functions are built from.
All of them are lazy: nothing is drawn from an underlying sequence until the
next value is requested, and never more than is needed for that value.
"""

import itertools
import time
from typing import TypeVar, Callable, Iterator, Iterable, Optional

from dist_lib.exceptions import RejectionAbortedError
from dist_lib.logging import get_logger

# Type variables for values
T = TypeVar('T')
U = TypeVar('U')

RetryHook = Callable[[int], bool]


def sample_map(f: Callable[[T], U], draws: Iterable[T]) -> Iterator[U]:
    """
    Apply a function to every draw of an underlying sequence.

    Args:
        f: Function applied to each draw
        draws: Underlying (usually infinite) sequence

    Returns:
        Iterator yielding f(draw) for each draw, one draw per value
    """
    for v in draws:
        yield f(v)


def take(draws: Iterable[T], n: int) -> Iterator[T]:
    """
    Return a lazy prefix of length n of a sequence.

    Exactly n values are pulled from the underlying sequence, and only
    as they are requested. A negative n gives an empty prefix.
    """
    return itertools.islice(draws, max(n, 0))


def accumulate(
    draw: Callable[[], T],
    count: int,
    func: Callable[[U, T], U],
    initial: U
) -> Iterator[U]:
    """
    Fold a fixed number of draws into each emitted value.

    Every emission starts again from `initial` and consumes exactly `count`
    draws, combining them with `func`.

    Args:
        draw: Function returning the next draw of the underlying sequence
        count: Number of draws folded into each value
        func: Binary function combining the accumulator and a draw
        initial: Starting value of the accumulator

    Returns:
        Infinite iterator of accumulated values
    """
    while True:
        acc = initial
        for _ in range(count):
            acc = func(acc, draw())
        yield acc


def count_while(draw: Callable[[], bool]) -> Iterator[float]:
    """
    Count consecutive truthy draws before the first falsy one.

    The falsy draw that ends a run is consumed and not counted.
    """
    while True:
        n = 0.0
        while draw():
            n += 1
        yield n


class _RejectionLoop(Iterator[U]):
    """
    Iterator running the generate-and-test loop of `reject`.

    Unlike a generator it survives an abort: the next request starts a new
    run of attempts.
    """

    def __init__(self, propose, accept, emit, advance, retry_hook):
        self._propose = propose
        self._accept = accept
        self._emit = emit
        self._advance = advance
        self._retry_hook = retry_hook
        self._advance_pending = False

    def __iter__(self) -> '_RejectionLoop[U]':
        return self

    def __next__(self) -> U:
        if self._advance_pending:
            self._advance_pending = False
            self._advance()

        attempts = 0
        while True:
            candidate = self._propose()
            if self._accept(candidate):
                self._advance_pending = self._advance is not None
                return self._emit(candidate) if self._emit is not None else candidate

            attempts += 1
            if self._advance is not None:
                self._advance()
            if self._retry_hook is not None and not self._retry_hook(attempts):
                get_logger().warning({
                    "event": "rejection_aborted",
                    "attempts": attempts
                })
                raise RejectionAbortedError(attempts)


def reject(
    propose: Callable[[], T],
    accept: Callable[[T], bool],
    emit: Optional[Callable[[T], U]] = None,
    advance: Optional[Callable[[], None]] = None,
    retry_hook: Optional[RetryHook] = None
) -> Iterator[U]:
    """
    Generate-and-test loop behind the rejection samplers.

    Each attempt proposes a candidate and tests it. Accepted candidates are
    passed through `emit` and returned; rejected ones are discarded silently
    and the loop tries again. With no retry hook the loop runs until a
    candidate is accepted, however long that takes.

    Args:
        propose: Function drawing a new candidate
        accept: Predicate deciding whether a candidate is emitted
        emit: Function turning an accepted candidate into the emitted value;
            only called on acceptance, so it may draw from other sequences
        advance: Function called at the end of every attempt. On acceptance
            it runs only when the next value is requested.
        retry_hook: Called with the number of consecutive rejections after
            each rejection; returning False aborts the current request

    Returns:
        Infinite iterator of accepted values. It stays usable after an
        abort; the next request starts counting attempts from zero.

    Raises:
        RejectionAbortedError: If the retry hook refuses to continue
    """
    return _RejectionLoop(propose, accept, emit, advance, retry_hook)


def retry_limit(max_attempts: int) -> RetryHook:
    """
    Build a retry hook allowing at most `max_attempts` consecutive rejections.
    """
    def hook(attempts: int) -> bool:
        return attempts < max_attempts
    return hook


def retry_deadline(seconds: float) -> RetryHook:
    """
    Build a retry hook that stops a run of rejections lasting longer than
    `seconds`.

    The clock restarts with every run of rejections, i.e. after each
    accepted value.
    """
    started = 0.0

    def hook(attempts: int) -> bool:
        nonlocal started
        now = time.monotonic()
        if attempts == 1:
            started = now
        return now - started <= seconds
    return hook
