"""Capability contracts - pure and dependency-free.

An *algebra* is any object exposing the methods of one of the protocols
below for some value type ``T``. Algebras are passed explicitly to the
generic utilities, so plain Python values (tuples, ``None``, dicts) can be
combined without wrapping them.

A value class may act as its own algebra by exposing ``op``/``mul`` as
static methods and ``zero``/``one`` as class methods::

    Max.op(Max(1.0), Max(2.0))  # Max(2.0)
    Max.zero()                  # Max(-inf)
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class Semigroup(Protocol[T]):
    """A set with a closed associative binary operation.

    Law: ``op(op(a, b), c) == op(a, op(b, c))``.
    """

    def op(self, x: T, y: T) -> T:
        """Associative operation."""
        ...


class Monoid(Semigroup[T], Protocol[T]):
    """A semigroup with an identity element (named zero).

    Law: ``op(zero(), x) == x == op(x, zero())``.

    ``zero`` is a function rather than a constant because some identities
    are mutable containers (``{}``) that must not be shared.
    """

    def zero(self) -> T:
        """Identity element for ``op``."""
        ...


class CommutativeMonoid(Monoid[T], Protocol[T]):
    """A monoid whose operation is commutative.

    Law: ``op(a, b) == op(b, a)``.

    Commutativity is not visible in a signature, so implementations
    declare it with a ``commutative = True`` class attribute.
    """

    commutative: bool


class Semiring(CommutativeMonoid[T], Protocol[T]):
    """A commutative monoid with a second operation and identity (one).

    Laws:
        - ``mul`` is associative with identity ``one()``
        - ``zero()`` annihilates: ``mul(zero(), x) == zero() == mul(x, zero())``
        - ``mul`` distributes over ``op`` on both sides
    """

    def mul(self, x: T, y: T) -> T:
        """Second associative binary operation."""
        ...

    def one(self) -> T:
        """Identity element for ``mul``."""
        ...


def is_commutative(algebra: Any) -> bool:
    """Whether ``algebra`` declares its operation commutative."""
    return bool(getattr(algebra, "commutative", False))


def has_zero(algebra: Any) -> bool:
    """Whether ``algebra`` provides an identity element."""
    return callable(getattr(algebra, "zero", None))


def is_semiring(algebra: Any) -> bool:
    """Whether ``algebra`` provides the second operation and its identity."""
    return (
        is_commutative(algebra)
        and has_zero(algebra)
        and callable(getattr(algebra, "mul", None))
        and callable(getattr(algebra, "one", None))
    )
