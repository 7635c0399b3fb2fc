"""Error types for algebra preconditions."""

from __future__ import annotations


class AlgebraError(Exception):
    """Base class for precondition violations raised by monoidal."""


class InsufficientSamplesError(AlgebraError, ValueError):
    """Error raised when a statistic needs more samples than were folded in.

    Preserves the sample count so callers can tell an empty accumulator
    from a single-sample one.
    """

    def __init__(self, message: str, count: int) -> None:
        self.count = count
        super().__init__(message)

    def __repr__(self) -> str:
        return f"InsufficientSamplesError({super().__repr__()}, count={self.count!r})"


class InvalidExponentError(AlgebraError, ValueError):
    """Error raised when repeated self-combination gets an unusable exponent."""

    def __init__(self, message: str, exponent: int) -> None:
        self.exponent = exponent
        super().__init__(message)

    def __repr__(self) -> str:
        return f"InvalidExponentError({super().__repr__()}, exponent={self.exponent!r})"
