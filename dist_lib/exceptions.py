"""
Exceptions raised by the distribution library.
"""


class OperationInvalidError(RuntimeError):
    """
    Raised when an operation is not valid for the current state of an object.

    The typical case is asking for a density-weighted expectation of a
    distribution that carries no density function.
    """
    pass


class RejectionAbortedError(RuntimeError):
    """
    Raised when a retry hook stops a rejection sampling loop.
    """

    def __init__(self, attempts: int):
        super().__init__(f"Rejection sampling aborted after {attempts} rejected attempts")
        self.attempts = attempts
