"""Combinators - composite algebras, generic operations and law checks."""

from .laws import (
    commutative_monoid_violations,
    monoid_violations,
    semigroup_violations,
    semiring_violations,
)
from .ops import concat, fold_map, power_monoid, power_semigroup, sconcat
from .types import (
    MergeMap,
    MonoidPair,
    Option,
    Pair,
    SemiringOption,
    SemiringPair,
)

__all__ = [
    # Composites
    "Pair",
    "MonoidPair",
    "SemiringPair",
    "Option",
    "SemiringOption",
    "MergeMap",
    # Operations
    "power_semigroup",
    "power_monoid",
    "fold_map",
    "concat",
    "sconcat",
    # Laws
    "semigroup_violations",
    "monoid_violations",
    "commutative_monoid_violations",
    "semiring_violations",
]
