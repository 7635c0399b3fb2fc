"""Small concrete algebras.

Each class is its own algebra: ``op``/``mul`` are static methods and
``zero``/``one`` are class methods, so the class can be passed wherever a
``Semigroup``/``Monoid``/``Semiring`` is expected::

    concat(Max, [Max(1.0), Max(3.0)])  # Max(3.0)
    power_monoid(Sum, Sum(2), 10)      # Sum(20)

``zero`` always names the identity of ``op``: ``Product.zero()`` is
``Product(1)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class Max:
    """Largest value seen. NaN is ignored when the other side is a number."""

    value: float
    commutative: ClassVar[bool] = True

    @staticmethod
    def op(x: Max, y: Max) -> Max:
        if math.isnan(x.value):
            return y
        if math.isnan(y.value):
            return x
        return Max(max(x.value, y.value))

    @classmethod
    def zero(cls) -> Max:
        return cls(-math.inf)


@dataclass(frozen=True)
class Min:
    """Smallest value seen. NaN is ignored when the other side is a number."""

    value: float
    commutative: ClassVar[bool] = True

    @staticmethod
    def op(x: Min, y: Min) -> Min:
        if math.isnan(x.value):
            return y
        if math.isnan(y.value):
            return x
        return Min(min(x.value, y.value))

    @classmethod
    def zero(cls) -> Min:
        return cls(math.inf)


@dataclass(frozen=True)
class AnyOf:
    value: bool
    commutative: ClassVar[bool] = True

    @staticmethod
    def op(x: AnyOf, y: AnyOf) -> AnyOf:
        return AnyOf(x.value or y.value)

    @classmethod
    def zero(cls) -> AnyOf:
        return cls(False)


@dataclass(frozen=True)
class AllOf:
    value: bool
    commutative: ClassVar[bool] = True

    @staticmethod
    def op(x: AllOf, y: AllOf) -> AllOf:
        return AllOf(x.value and y.value)

    @classmethod
    def zero(cls) -> AllOf:
        return cls(True)


@dataclass(frozen=True)
class Sum:
    """Additive integers."""

    value: int
    commutative: ClassVar[bool] = True

    @staticmethod
    def op(x: Sum, y: Sum) -> Sum:
        return Sum(x.value + y.value)

    @classmethod
    def zero(cls) -> Sum:
        return cls(0)


@dataclass(frozen=True)
class Product:
    """Multiplicative integers."""

    value: int
    commutative: ClassVar[bool] = True

    @staticmethod
    def op(x: Product, y: Product) -> Product:
        return Product(x.value * y.value)

    @classmethod
    def zero(cls) -> Product:
        return cls(1)


@dataclass(frozen=True)
class Concat:
    """String concatenation. Not commutative."""

    value: str

    @staticmethod
    def op(x: Concat, y: Concat) -> Concat:
        return Concat(x.value + y.value)

    @classmethod
    def zero(cls) -> Concat:
        return cls("")


@dataclass(frozen=True)
class Chain:
    """Tuple concatenation. Not commutative."""

    items: tuple[Any, ...] = ()

    @staticmethod
    def op(x: Chain, y: Chain) -> Chain:
        return Chain(x.items + y.items)

    @classmethod
    def zero(cls) -> Chain:
        return cls()


@dataclass(frozen=True)
class MinPlus:
    """The tropical semiring: ``op`` is min, ``mul`` is addition.

    ``MinPlus(math.inf)`` is the additive identity and annihilates under
    ``mul``; ``MinPlus(0.0)`` is the multiplicative identity. Float
    addition is only associative on exactly representable sums, so law
    checks should draw values from such a set (e.g. small integers).
    """

    value: float
    commutative: ClassVar[bool] = True

    @property
    def is_infinite(self) -> bool:
        return self.value == math.inf

    @staticmethod
    def op(x: MinPlus, y: MinPlus) -> MinPlus:
        if x.is_infinite:
            return y
        if y.is_infinite:
            return x
        return MinPlus(min(x.value, y.value))

    @staticmethod
    def mul(x: MinPlus, y: MinPlus) -> MinPlus:
        if x.is_infinite or y.is_infinite:
            return INFINITY
        return MinPlus(x.value + y.value)

    @classmethod
    def zero(cls) -> MinPlus:
        return cls(math.inf)

    @classmethod
    def one(cls) -> MinPlus:
        return cls(0.0)


INFINITY = MinPlus(math.inf)
