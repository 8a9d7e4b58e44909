"""Scalar helpers shared by every value type in the package."""
from __future__ import annotations

import numpy as np

EPSILON = 1e-10


# //1.- Compare two floats within the fixed package tolerance.
def equal(lhs: float, rhs: float) -> bool:
    return abs(lhs - rhs) < EPSILON


# //2.- Divide following IEEE-754 so a zero divisor yields inf or nan instead of raising.
def divide(numerator: float, denominator: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))
