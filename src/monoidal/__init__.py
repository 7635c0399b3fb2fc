from .combinators import (
    MergeMap,
    Option,
    Pair,
    concat,
    fold_map,
    power_monoid,
    power_semigroup,
    sconcat,
)
from .instances import INFINITY, AllOf, AnyOf, Chain, Concat, Max, Min, MinPlus, Product, Sum
from .kernel import (
    DEFAULT_TOLERANCE,
    AlgebraError,
    CommutativeMonoid,
    InsufficientSamplesError,
    InvalidExponentError,
    Monoid,
    Semigroup,
    Semiring,
    Tolerance,
    is_commutative,
)
from .stats import Gaussian

__all__ = [
    # Contracts
    "Semigroup",
    "Monoid",
    "CommutativeMonoid",
    "Semiring",
    "is_commutative",
    # Errors
    "AlgebraError",
    "InsufficientSamplesError",
    "InvalidExponentError",
    # Configuration
    "Tolerance",
    "DEFAULT_TOLERANCE",
    # Composites
    "Pair",
    "Option",
    "MergeMap",
    # Operations
    "power_semigroup",
    "power_monoid",
    "fold_map",
    "concat",
    "sconcat",
    # Instances
    "Max",
    "Min",
    "AnyOf",
    "AllOf",
    "Sum",
    "Product",
    "Concat",
    "Chain",
    "MinPlus",
    "INFINITY",
    # Statistics
    "Gaussian",
]
