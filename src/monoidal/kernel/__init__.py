"""Kernel layer - capability contracts, errors and tolerance configuration."""

from monoidal.kernel.errors import (
    AlgebraError,
    InsufficientSamplesError,
    InvalidExponentError,
)
from monoidal.kernel.tolerance import DEFAULT_TOLERANCE, Tolerance
from monoidal.kernel.traits import (
    CommutativeMonoid,
    Monoid,
    Semigroup,
    Semiring,
    has_zero,
    is_commutative,
    is_semiring,
)

__all__ = [
    # Contracts
    "Semigroup",
    "Monoid",
    "CommutativeMonoid",
    "Semiring",
    "is_commutative",
    "has_zero",
    "is_semiring",
    # Errors
    "AlgebraError",
    "InsufficientSamplesError",
    "InvalidExponentError",
    # Configuration
    "Tolerance",
    "DEFAULT_TOLERANCE",
]
