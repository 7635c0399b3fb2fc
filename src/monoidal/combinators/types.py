"""Composite algebras lifting combinability through pairs, optionals and maps.

Each composite is built from the algebras of its parts and reaches the
strongest capability level its parts allow. Constructing ``Pair(Max, AnyOf)``
yields a monoid because both parts have a ``zero``; ``Pair(MinPlus, MinPlus)``
yields a semiring. The concrete class is picked at construction time, so
``has_zero``/``is_semiring`` answer truthfully for every composite.

Composite values are plain Python values: 2-tuples, ``T | None`` and
``dict``. Operations never mutate their inputs.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from monoidal.kernel.traits import has_zero, is_commutative, is_semiring

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class Pair(Generic[A, B]):
    """The direct product of two algebras.

    Values are ``(a, b)`` tuples combined side by side.

    Attributes:
        left: Algebra of the first component.
        right: Algebra of the second component.
    """

    left: Any
    right: Any

    def __new__(cls, left: Any, right: Any) -> Pair[A, B]:
        if cls is Pair:
            if is_semiring(left) and is_semiring(right):
                cls = SemiringPair
            elif has_zero(left) and has_zero(right):
                cls = MonoidPair
        return super().__new__(cls)

    def __getnewargs__(self) -> tuple[Any, Any]:
        return (self.left, self.right)

    @property
    def commutative(self) -> bool:
        return is_commutative(self.left) and is_commutative(self.right)

    def op(self, x: tuple[A, B], y: tuple[A, B]) -> tuple[A, B]:
        (a, u), (b, v) = x, y
        return (self.left.op(a, b), self.right.op(u, v))


@dataclass(frozen=True)
class MonoidPair(Pair[A, B]):
    """Pair of two monoids; the identity is the pair of identities."""

    def zero(self) -> tuple[A, B]:
        return (self.left.zero(), self.right.zero())


@dataclass(frozen=True)
class SemiringPair(MonoidPair[A, B]):
    """Pair of two semirings, multiplied side by side."""

    def mul(self, x: tuple[A, B], y: tuple[A, B]) -> tuple[A, B]:
        (a, u), (b, v) = x, y
        return (self.left.mul(a, b), self.right.mul(u, v))

    def one(self) -> tuple[A, B]:
        return (self.left.one(), self.right.one())


@dataclass(frozen=True)
class Option(Generic[T]):
    """A semigroup made into a monoid by adjoining ``None`` as identity.

    Attributes:
        inner: Algebra of the present payloads.
    """

    inner: Any

    def __new__(cls, inner: Any) -> Option[T]:
        if cls is Option and is_semiring(inner):
            cls = SemiringOption
        return super().__new__(cls)

    def __getnewargs__(self) -> tuple[Any]:
        return (self.inner,)

    @property
    def commutative(self) -> bool:
        return is_commutative(self.inner)

    def op(self, x: T | None, y: T | None) -> T | None:
        if x is None:
            return y
        if y is None:
            return x
        return self.inner.op(x, y)

    def zero(self) -> T | None:
        return None


@dataclass(frozen=True)
class SemiringOption(Option[T]):
    """Option over a semiring: ``None`` annihilates under ``mul``."""

    def mul(self, x: T | None, y: T | None) -> T | None:
        if x is None or y is None:
            return None
        return self.inner.mul(x, y)

    def one(self) -> T | None:
        return self.inner.one()


@dataclass(frozen=True)
class MergeMap(Generic[K, V]):
    """A map of ``{key: value}`` is a monoid if the values form a semigroup.

    Combining two maps takes the union of their keys. A key present on
    both sides maps to ``values.op(left_value, right_value)``; a key present
    on one side keeps its value. The identity is the empty dict.

    Attributes:
        values: Algebra of the mapped values.
    """

    values: Any

    @property
    def commutative(self) -> bool:
        return is_commutative(self.values)

    def op(self, x: Mapping[K, V], y: Mapping[K, V]) -> dict[K, V]:
        merged = dict(x)
        for key, value in y.items():
            if key in merged:
                merged[key] = self.values.op(merged[key], value)
            else:
                merged[key] = value
        return merged

    def zero(self) -> dict[K, V]:
        return {}
