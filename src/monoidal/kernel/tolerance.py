"""Approximate floating-point equality used to compare accumulated statistics."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field


class Tolerance(BaseModel):
    """Absolute plus relative tolerance, with ``numpy.isclose`` semantics.

    ``close(x, y)`` holds when ``|x - y| <= abs_tol + rel_tol * |y|``.
    The test is asymmetric: ``y`` is the reference value.

    Only meant for verification and equality. Accumulator arithmetic
    never consults it.
    """

    model_config = ConfigDict(frozen=True)

    abs_tol: float = Field(default=1e-8, ge=0.0)
    rel_tol: float = Field(default=1e-5, ge=0.0)

    def close(self, x: float, y: float) -> bool:
        if math.isnan(x) or math.isnan(y):
            return math.isnan(x) and math.isnan(y)
        if math.isinf(x) or math.isinf(y):
            return x == y
        return abs(x - y) <= self.abs_tol + self.rel_tol * abs(y)


DEFAULT_TOLERANCE = Tolerance()
