"""Generic operations over any algebra: power, fold_map, concat, sconcat."""

from __future__ import annotations

import copy
import logging
import operator
from collections.abc import Callable, Iterable
from typing import TypeVar

from monoidal.kernel.errors import InvalidExponentError
from monoidal.kernel.traits import Monoid, Semigroup

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M")


def power_semigroup(algebra: Semigroup[T], x: T, n: int) -> T:
    """Combine ``x`` with itself ``n`` times in O(log n) applications of ``op``.

    Uses binary exponentiation: the running square of ``x`` is folded into
    the result for every set bit of ``n``. The bracketing is chosen here,
    not by the caller, so the result only matches the left-to-right fold
    when ``op`` is exactly associative.

    ``n == 1`` returns a shallow copy of ``x``, so the result never aliases
    the argument even for mutable values such as ``Gaussian``.

    Args:
        algebra: Semigroup providing ``op``
        x: The value to repeat
        n: Number of copies (must be >= 1)

    Returns:
        ``x`` combined with itself ``n`` times

    Raises:
        InvalidExponentError: If ``n < 1``; a bare semigroup has no identity
            to return for zero copies.
        TypeError: If ``n`` is not an integer.
    """
    n = operator.index(n)
    if n < 1:
        raise InvalidExponentError(
            f"power_semigroup requires a positive exponent, got {n}", exponent=n
        )
    if n == 1:
        return copy.copy(x)

    applications = 0
    square = x
    m = n
    # square away trailing zero bits so the lowest set bit seeds the result
    while not m & 1:
        square = algebra.op(square, square)
        applications += 1
        m >>= 1
    result = square
    m >>= 1
    while m:
        square = algebra.op(square, square)
        applications += 1
        if m & 1:
            result = algebra.op(result, square)
            applications += 1
        m >>= 1

    logger.debug("power_semigroup: n=%d used %d op applications", n, applications)
    return result


def power_monoid(algebra: Monoid[T], x: T, n: int) -> T:
    """Monoid version of ``power_semigroup``, accepting 0 as an exponent.

    ``n == 0`` returns ``algebra.zero()`` without calling ``op``.

    Raises:
        InvalidExponentError: If ``n`` is negative.
    """
    n = operator.index(n)
    if n == 0:
        return algebra.zero()
    if n < 0:
        raise InvalidExponentError(
            f"power_monoid requires a non-negative exponent, got {n}", exponent=n
        )
    return power_semigroup(algebra, x, n)


def fold_map(algebra: Monoid[M], items: Iterable[T], f: Callable[[T], M]) -> M:
    """Simultaneously map items into a monoid and accumulate them."""
    acc = algebra.zero()
    count = 0
    for item in items:
        acc = algebra.op(acc, f(item))
        count += 1
    logger.debug("fold_map: folded %d items", count)
    return acc


def concat(algebra: Monoid[T], values: Iterable[T]) -> T:
    """Fold values left to right starting from ``zero()``."""
    acc = algebra.zero()
    count = 0
    for value in values:
        acc = algebra.op(acc, value)
        count += 1
    logger.debug("concat: folded %d values", count)
    return acc


def sconcat(algebra: Semigroup[T], values: Iterable[T]) -> T:
    """Fold a non-empty iterable left to right.

    Raises:
        ValueError: If ``values`` is empty.
    """
    iterator = iter(values)
    try:
        acc = next(iterator)
    except StopIteration:
        raise ValueError("sconcat requires at least one value") from None
    count = 1
    for value in iterator:
        acc = algebra.op(acc, value)
        count += 1
    logger.debug("sconcat: folded %d values", count)
    return acc
