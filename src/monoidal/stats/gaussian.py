"""Mergeable online accumulator of the first two moments of a real stream.

Samples are folded in one at a time with Welford's update, and partial
accumulators built from separate chunks of a stream are merged with
Chan's parallel combination. Both keep the running sum of squared
deviations (``m2``) instead of ``sum(x**2)``, which avoids catastrophic
cancellation over long streams.

Merging is associative and commutative, so a stream may be split into
arbitrary chunks, accumulated independently, and reduced in any order or
grouping; the result equals the sequential fold up to floating tolerance.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import ClassVar, Self

from monoidal.kernel.errors import InsufficientSamplesError
from monoidal.kernel.tolerance import DEFAULT_TOLERANCE, Tolerance

logger = logging.getLogger(__name__)


def _sample(x: float) -> float:
    if not isinstance(x, numbers.Real):
        raise TypeError(f"Gaussian samples must be real numbers, got {type(x).__name__}")
    return float(x)


@dataclass(eq=False)
class Gaussian:
    """Sufficient statistics of a multiset of real samples.

    Attributes:
        count: Number of samples folded in.
        m1: Running mean (0.0 when empty).
        m2: Running sum of squared deviations from the mean.
            The sample variance is ``m2 / (count - 1)``.
    """

    count: int = 0
    m1: float = 0.0
    m2: float = 0.0

    commutative: ClassVar[bool] = True

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        if self.count == 0 and (self.m1 != 0.0 or self.m2 != 0.0):
            raise ValueError("an empty Gaussian must have m1 == 0 and m2 == 0")

    @classmethod
    def of(cls, x: float) -> Self:
        """Construct from a single data point."""
        return cls(count=1, m1=_sample(x), m2=0.0)

    @classmethod
    def empty(cls) -> Self:
        """The empty distribution."""
        return cls()

    @classmethod
    def zero(cls) -> Self:
        """Identity element for ``op``; same as ``empty()``."""
        return cls()

    @classmethod
    def from_samples(cls, samples: Iterable[float]) -> Self:
        """Accumulate the points one at a time into a new Gaussian."""
        g = cls()
        for x in samples:
            g += x
        logger.debug("Gaussian.from_samples: accumulated %d samples", g.count)
        return g

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def copy(self) -> Self:
        return replace(self)

    def push(self, x: float) -> None:
        """Fold one sample in place (Welford's update).

        ``m2`` uses the old mean in the first factor and the new mean in the
        second.

        Raises:
            TypeError: If ``x`` is not a real number. Strings such as
                ``"nan"`` are rejected rather than parsed.
        """
        x = _sample(x)
        self.count += 1
        old_mean = self.m1
        delta = x - old_mean
        self.m1 = old_mean + delta / self.count
        self.m2 += delta * (x - self.m1)

    def __iadd__(self, x: float) -> Self:
        self.push(x)
        return self

    def __add__(self, x: float) -> Self:
        if isinstance(x, Gaussian):
            return NotImplemented
        g = self.copy()
        g.push(x)
        return g

    @staticmethod
    def op(a: Gaussian, b: Gaussian) -> Gaussian:
        """Join together two Gaussian accumulators.

        ``mean = ma*(na/n) + mb*(nb/n)`` and
        ``m2 = sa + sb + (ma - mb)**2 * na*nb / n``. The correction term
        restores the spread between the two group means that combining
        the means alone would lose.

        Merging with an empty accumulator returns a copy of the other
        operand, field for field.
        """
        na, nb = a.count, b.count
        if na == 0:
            return b.copy()
        if nb == 0:
            return a.copy()
        n = na + nb
        m1 = a.m1 * (na / n) + b.m1 * (nb / n)
        m2 = a.m2 + b.m2 + (a.m1 - b.m1) ** 2 * (na * nb) / n
        return type(a)(count=n, m1=m1, m2=m2)

    def merge(self, other: Gaussian) -> Gaussian:
        return Gaussian.op(self, other)

    def mean(self) -> float:
        """The mean of this distribution (0.0 when empty)."""
        return self.m1

    def variance(self) -> float:
        """The (sample) variance of this distribution.

        Raises:
            InsufficientSamplesError: If fewer than two samples were folded in.
        """
        if self.count <= 1:
            raise InsufficientSamplesError(
                f"Variance requires more than 1 sample, got {self.count}",
                count=self.count,
            )
        return self.m2 / (self.count - 1)

    def stddev(self) -> float:
        return math.sqrt(self.variance())

    def pdf(self, x: float) -> float:
        """Probability density function of the fitted normal distribution."""
        m = self.mean()
        v = self.variance()
        return 1.0 / math.sqrt(2.0 * math.pi * v) * math.exp(-0.5 * ((x - m) ** 2 / v))

    def cdf(self, x: float) -> float:
        """Cumulative distribution function of the fitted normal distribution."""
        m = self.mean()
        v = self.variance()
        return 0.5 * (1.0 + math.erf((x - m) / math.sqrt(2.0 * v)))

    def approx_eq(self, other: Gaussian, tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
        """Exact count equality plus tolerance equality of ``m1`` and ``m2``."""
        return (
            self.count == other.count
            and tolerance.close(self.m1, other.m1)
            and tolerance.close(self.m2, other.m2)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gaussian):
            return NotImplemented
        return self.approx_eq(other)

    __hash__ = None  # type: ignore[assignment]
