"""Algebraic laws as executable predicates."""

# Every algebra must satisfy the laws of its capability level:
#
# 1. Semigroup associativity: op(op(x, y), z) == op(x, op(y, z))
#
# 2. Monoid identity: op(zero(), x) == x == op(x, zero())
#
# 3. Commutativity: op(x, y) == op(y, x)
#
# 4. Semiring: mul is associative with identity one(),
#    zero() annihilates under mul, and mul distributes over op
#    on both sides
#
# Nothing checks these at runtime. The *_violations helpers below return
# the names of the laws a sample of values breaks, so a caller can
# property-test their own algebra against random inputs.

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any, TypeVar

from monoidal.kernel.traits import CommutativeMonoid, Monoid, Semigroup, Semiring

T = TypeVar("T")

Eq = Callable[[Any, Any], bool]


def semigroup_violations(
    algebra: Semigroup[T], x: T, y: T, z: T, eq: Eq = operator.eq
) -> list[str]:
    op = algebra.op
    violations: list[str] = []
    if not eq(op(op(x, y), z), op(x, op(y, z))):
        violations.append("associativity")
    return violations


def monoid_violations(
    algebra: Monoid[T], x: T, y: T, z: T, eq: Eq = operator.eq
) -> list[str]:
    violations = semigroup_violations(algebra, x, y, z, eq)
    if not eq(algebra.op(algebra.zero(), x), x):
        violations.append("left_zero")
    if not eq(algebra.op(x, algebra.zero()), x):
        violations.append("right_zero")
    return violations


def commutative_monoid_violations(
    algebra: CommutativeMonoid[T], x: T, y: T, z: T, eq: Eq = operator.eq
) -> list[str]:
    violations = monoid_violations(algebra, x, y, z, eq)
    if not eq(algebra.op(x, y), algebra.op(y, x)):
        violations.append("commutativity")
    return violations


def semiring_violations(
    algebra: Semiring[T], x: T, y: T, z: T, eq: Eq = operator.eq
) -> list[str]:
    violations = commutative_monoid_violations(algebra, x, y, z, eq)
    op, mul = algebra.op, algebra.mul
    zero = algebra.zero()

    checks = {
        "left_annihilation": (mul(algebra.zero(), x), zero),
        "right_annihilation": (mul(x, algebra.zero()), zero),
        "left_one": (mul(algebra.one(), x), x),
        "right_one": (mul(x, algebra.one()), x),
        "mul_associativity": (mul(mul(x, y), z), mul(x, mul(y, z))),
        "left_distribution": (mul(x, op(y, z)), op(mul(x, y), mul(x, z))),
        "right_distribution": (mul(op(x, y), z), op(mul(x, z), mul(y, z))),
    }
    for name, (actual, expected) in checks.items():
        if not eq(actual, expected):
            violations.append(name)
    return violations
